import logging

from ..game_logic import RoundController
from ..board import Rejection
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QInputDialog, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome, please enter your names!"
INVALID_TEXT = "Invalid placement - please try again"
DRAW_TEXT = "Game over - draw"
ROUND_OVER_TEXT = "Round is over - start a new game"

# why each rejection happened, shown under the board
REJECTION_TEXT = {
    Rejection.INVALID_TOKEN: INVALID_TEXT,
    Rejection.OUT_OF_BOUNDS: INVALID_TEXT,
    Rejection.CELL_OCCUPIED: "Cell taken - please try again",
    Rejection.ROUND_OVER: ROUND_OVER_TEXT,
}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, controller=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = controller or RoundController()
        self.board_widget = BoardWidget(self.controller, parent=self)

        self._setup_ui()
        self.refresh()
        self._update_message(WELCOME_TEXT)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_player_labels()       # whose turn
        self.main_layout.addWidget(self.players_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        names_action = QAction("Set Player Names...", self)
        names_action.triggered.connect(self.prompt_player_names)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, names_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_labels(self):
        # one status label per player, only the mover's is filled
        self.players_widget = QWidget()
        hl = QHBoxLayout(self.players_widget)
        f = QFont(); f.setPointSize(11)
        self.player_x_label = QLabel(""); self.player_o_label = QLabel("")
        for lbl in (self.player_x_label, self.player_o_label):
            lbl.setFont(f)
            lbl.setStyleSheet("color: #8acaff;" if lbl is self.player_x_label else "color: #ff8a8a;")
        self.player_o_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        hl.addWidget(self.player_x_label); hl.addStretch(1); hl.addWidget(self.player_o_label)

    def _create_bottom_controls(self):
        # status label + names/new game buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.names_button = QPushButton("Names"); self.names_button.clicked.connect(self.prompt_player_names)
        self.new_game_button = QPushButton("New Game"); self.new_game_button.clicked.connect(self.new_game)
        for w in (self.message_label, None, self.names_button, self.new_game_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_player_labels(self):
        # mover's label shows the turn, both blank once the round ends
        active = self.controller.get_active_player()
        turn = f"{active.name}'s turn." if self.controller.is_viable() else ""
        self.player_x_label.setText(turn if active.token == 'X' else "")
        self.player_o_label.setText(turn if active.token == 'O' else "")

    def _update_button_state(self):
        # renaming is only allowed before the first move or after the end
        mid_round = self.controller.is_viable() and self.controller.get_move_count() > 0
        self.names_button.setEnabled(not mid_round)

    def refresh(self):
        """
        redraw board and labels from controller state
        """
        self._update_player_labels()
        self._update_button_state()
        self.board_widget.set_accept_clicks(self.controller.is_viable())
        self.board_widget.update()

    def _show_result(self, result):
        # message for one play_round result
        if result.winner is not None:
            self._update_message(f"{result.winner.name} wins", is_success=True)
        elif result.drawn:
            self._update_message(DRAW_TEXT, is_success=True)
        elif not result.accepted:
            self._update_message(REJECTION_TEXT[result.rejection], is_error=True)
        else:
            nxt = result.active_player
            self._update_message(f"{nxt.name} ({nxt.token}) to move", is_turn=True)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        result = self.controller.play_round(r, c)
        self.refresh()
        self._show_result(result)

    @Slot()
    def prompt_player_names(self):
        """
        ask for both names with input dialogs
        """
        current = self.controller.get_players()
        names = []
        for player in current:
            text, ok = QInputDialog.getText(
                self, "Player Names", f"Name for player {player.token}:", text=player.name)
            if not ok:
                return  # cancelled, keep old names
            names.append(text)
        self.apply_player_names(*names)

    def apply_player_names(self, name_x, name_o):
        if not self.controller.set_player_names(name_x, name_o):
            self._update_message("Finish the round before renaming players", is_error=True)
            return False
        players = self.controller.get_players()
        logger.debug("players renamed to %s / %s", players[0].name, players[1].name)
        self.refresh()
        self._update_message(f"{players[0].name} (X) vs {players[1].name} (O)", is_turn=True)
        return True

    @Slot()
    def new_game(self):
        # clear board and hand the move back to X
        self.controller.start_new_game()
        self.refresh()
        active = self.controller.get_active_player()
        self._update_message(f"New game - {active.name} ({active.token}) to move", is_turn=True)
