from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
HIGHLIGHT_COLOR = QColor(138, 202, 255, 60)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller  # reference to round controller
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square play area centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        rows, cols = self.controller.get_dimensions()
        row = int((y-oy) // (side/rows)); col = int((x-ox) // (side/cols))
        # clamp to valid range
        row = max(0, min(row, rows-1)); col = max(0, min(col, cols-1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            rows, cols = self.controller.get_dimensions()
            cell_w, cell_h = side/cols, side/rows
            # winning cells underneath everything else
            line = self.controller.get_winning_line()
            if line:
                for r, c in line:
                    painter.fillRect(QRectF(offset_x + c*cell_w, offset_y + r*cell_h,
                                            cell_w, cell_h), HIGHLIGHT_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, cols):
                x = offset_x + i*cell_w
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
            for i in range(1, rows):
                y = offset_y + i*cell_h
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks from a fresh snapshot
            for board_row in self.controller.get_board_snapshot():
                for cell in board_row:
                    if not cell.token: continue
                    cx = offset_x + cell.column*cell_w + cell_w/2
                    cy = offset_y + cell.row*cell_h + cell_h/2
                    rad = min(cell_w, cell_h)/2 * 0.7
                    if cell.token == 'X':
                        painter.setPen(QPen(X_COLOR, 4))
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(O_COLOR, 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(*cell)  # notify main window
