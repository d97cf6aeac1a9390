"""
win / draw classification over board snapshots
pure functions: nothing here keeps state or mutates its input
"""
from .board import EMPTY


def lines(rows, columns):
    """
    every scoring line as a tuple of (row, col) positions:
    rows, then columns, then the two diagonals
    """
    found = []
    for r in range(rows):
        found.append(tuple((r, c) for c in range(columns)))
    for c in range(columns):
        found.append(tuple((r, c) for r in range(rows)))
    # diagonals only exist on a non-empty square grid
    if rows == columns and rows > 0:
        n = rows
        found.append(tuple((i, i) for i in range(n)))
        found.append(tuple((i, n - 1 - i) for i in range(n)))
    return found


def _dimensions(snapshot):
    return len(snapshot), len(snapshot[0]) if snapshot else 0


def _line_owner(snapshot, line):
    # token filling the whole line, or None
    if not line:
        return None
    first = snapshot[line[0][0]][line[0][1]].token
    if first is EMPTY:
        return None
    if all(snapshot[r][c].token == first for r, c in line):
        return first
    return None


def winning_line(snapshot):
    """
    first complete line in scan order, or None
    """
    for line in lines(*_dimensions(snapshot)):
        if _line_owner(snapshot, line) is not None:
            return line
    return None


def has_winner(snapshot):
    return winning_line(snapshot) is not None


def has_draw(snapshot):
    # full board; says nothing about winners, check those first
    return all(cell.token is not EMPTY for row in snapshot for cell in row)


def is_viable(snapshot):
    return not (has_winner(snapshot) or has_draw(snapshot))


def tokens(snapshot):
    """bare token grid, handy for text rendering"""
    return tuple(tuple(cell.token for cell in row) for row in snapshot)
