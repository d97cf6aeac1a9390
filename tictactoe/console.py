"""
Text front end for a two-player game on one terminal.
Reads moves as "row,col" (or "row col") and prints the board after each turn.
"""
import argparse
import logging

from .board import Rejection
from .board_state import tokens
from .game_logic import RoundController, DEFAULT_PLAYER_NAMES

QUIT_WORDS = ('q', 'quit', 'exit')

REJECTION_TEXT = {
    Rejection.INVALID_TOKEN: "!! Invalid token.",
    Rejection.OUT_OF_BOUNDS: "!! Invalid row/column number. Must be between 0 and 2.",
    Rejection.CELL_OCCUPIED: "!! Cell already taken. Try again.",
    Rejection.ROUND_OVER: "!! The round is over. Start a new game.",
}


def format_board(snapshot):
    """
    Render a snapshot as text. Empty cells show their column number.
    """
    grid = tokens(snapshot)
    width = len(grid[0]) if grid else 0
    out = ["-------------"]
    for i, row in enumerate(grid):
        out.append(f"{i}  {' | '.join(cell if cell else str(j) for j, cell in enumerate(row))}")
        if i < len(grid) - 1: out.append("  -----------")
    out.append("   " + "   ".join(str(j) for j in range(width)))  # column indices
    out.append("-------------")
    return "\n".join(out)


def format_open_cells(cells):
    """hint line listing the free positions"""
    return "Open cells: " + " ".join(f"{r},{c}" for r, c in cells)


def parse_move(text):
    """
    Parse "r,c" or "r c" into a (row, col) tuple of ints.
    Raises ValueError on anything else.
    """
    sep = ',' if ',' in text else None
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ValueError(f"expected row and column, got {text!r}")
    return int(parts[0]), int(parts[1])


class ConsoleGame:
    """Drives a RoundController from a line-based input source."""

    def __init__(self, controller=None, input_func=None, print_func=None):
        self.controller = controller or RoundController()
        self._input = input_func or input
        self._print = print_func or print

    def print_board(self):
        self._print("\n" + format_board(self.controller.get_board_snapshot()))

    def announce_outcome(self):
        winner = self.controller.get_winner()
        self._print("\n--- Game Over ---")
        if winner is not None:
            self._print(f"{winner.name} ({winner.token}) wins!")
        else:
            self._print("It's a Tie!")

    def play_game(self):
        """
        Play one round to the end.
        Returns False if the user quit (or input ran out) mid-round.
        """
        self.print_board()
        while self.controller.is_viable():
            active = self.controller.get_active_player()
            try:
                text = self._input(f"{active.name}'s turn ({active.token}). Enter move (row,col): ").strip()
            except (EOFError, KeyboardInterrupt):
                self._print("")
                return False
            if text.lower() in QUIT_WORDS:
                return False
            try:
                row, col = parse_move(text)
            except ValueError:
                self._print("!! Invalid input format. Use row,col (e.g., 0,0 or 1,2).")
                continue
            result = self.controller.play_round(row, col)
            if not result.accepted:
                self._print(REJECTION_TEXT[result.rejection])
                if result.rejection in (Rejection.OUT_OF_BOUNDS, Rejection.CELL_OCCUPIED):
                    self._print(format_open_cells(self.controller.get_open_cells()))
                continue
            self.print_board()
        self.announce_outcome()
        return True

    def ask_names(self):
        players = self.controller.get_players()
        names = []
        for player in players:
            try:
                text = self._input(f"Name for {player.token} (default {player.name}): ")
            except (EOFError, KeyboardInterrupt):
                return
            names.append(text.strip() or player.name)
        self.controller.set_player_names(*names)

    def run(self, ask_names=True):
        """
        Main loop: optional name entry, then rounds until the user stops.
        """
        self._print("--- Welcome to Tic-Tac-Toe ---")
        if ask_names:
            self.ask_names()
        while self.play_game():
            try:
                again = self._input("Play again? [y/N]: ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                break
            if again not in ('y', 'yes'):
                break
            self.controller.start_new_game()
        self._print("Exiting.")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Tic-tac-toe in the terminal')
    parser.add_argument('--player-x', default=None, help='Name of the X player')
    parser.add_argument('--player-o', default=None, help='Name of the O player')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging verbosity')
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    controller = RoundController(args.player_x or DEFAULT_PLAYER_NAMES[0],
                                 args.player_o or DEFAULT_PLAYER_NAMES[1])
    # names given on the command line skip the prompt
    ConsoleGame(controller).run(ask_names=not (args.player_x or args.player_o))


if __name__ == "__main__":
    main()
