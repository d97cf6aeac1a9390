import numbers
from dataclasses import dataclass
from enum import Enum

BOARD_ROWS = 3                    # fixed 3x3 grid
BOARD_COLUMNS = 3
PLAYER_TOKENS = ('X', 'O')        # player A, player B
EMPTY = None                      # token of an unclaimed cell


class Rejection(Enum):
    """
    why a move was turned down
    """
    INVALID_TOKEN = "invalid token"
    OUT_OF_BOUNDS = "out of bounds"
    CELL_OCCUPIED = "cell occupied"
    ROUND_OVER = "round already over"


@dataclass(frozen=True)
class CellView:
    """read-only copy of one cell, as handed out in snapshots"""
    row: int
    column: int
    token: str = EMPTY


class Cell:
    """
    one square on the board, position fixed at creation
    """
    def __init__(self, row, column):
        self._row = row; self._column = column
        self._token = EMPTY

    @property
    def row(self):
        return self._row

    @property
    def column(self):
        return self._column

    @property
    def token(self):
        return self._token

    def is_empty(self):
        return self._token is EMPTY

    def claim(self, token):
        # write-once until the board is reset
        if not self.is_empty():
            raise ValueError(f"cell ({self._row}, {self._column}) already holds {self._token}")
        self._token = token

    def view(self):
        return CellView(self._row, self._column, self._token)


class Board:
    """
    grid of cells and placement rules
    knows nothing about players or turns
    """
    def __init__(self):
        self._rows = BOARD_ROWS
        self._columns = BOARD_COLUMNS
        self._grid = []
        self.reset()

    def reset(self):
        """
        throw away the old grid and build a fresh empty one
        """
        self._grid = [[Cell(r, c) for c in range(self._columns)]
                      for r in range(self._rows)]

    def dimensions(self):
        return self._rows, self._columns

    def in_bounds(self, row, column):
        # bool is an int subclass but never a coordinate
        if not isinstance(row, numbers.Integral) or not isinstance(column, numbers.Integral) \
           or isinstance(row, bool) or isinstance(column, bool):
            return False
        return 0 <= row < self._rows and 0 <= column < self._columns

    def check_placement(self, row, column, token):
        """
        validate a placement without touching the grid
        returns: a Rejection, or None when the move is legal
        """
        if token not in PLAYER_TOKENS:
            return Rejection.INVALID_TOKEN
        if not self.in_bounds(row, column):
            return Rejection.OUT_OF_BOUNDS
        if not self._grid[row][column].is_empty():
            return Rejection.CELL_OCCUPIED
        return None

    def place_token(self, row, column, token):
        """
        drop token at (row, column)
        returns: True if placed, False if rejected (board left as it was)
        """
        if self.check_placement(row, column, token) is not None:
            return False
        self._grid[row][column].claim(token)
        return True

    def empty_cells(self):
        # row-major list of open positions
        return [(cell.row, cell.column) for line in self._grid
                for cell in line if cell.is_empty()]

    def snapshot(self):
        """
        fresh immutable copy of the grid: tuple of rows of CellView
        """
        return tuple(tuple(cell.view() for cell in line) for line in self._grid)
