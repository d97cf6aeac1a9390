import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board, Rejection, PLAYER_TOKENS
from . import board_state

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAMES = ("Player One", "Player Two")


@dataclass(frozen=True)
class PlayerView:
    name: str
    token: str


@dataclass(frozen=True)
class Outcome:
    player_a_won: bool = False
    player_b_won: bool = False
    drawn: bool = False


@dataclass(frozen=True)
class RoundResult:
    """
    what one play_round call did, for the ui to render
    """
    accepted: bool
    rejection: Optional[Rejection]   # None when accepted
    row: int
    column: int
    active_player: PlayerView     # whose turn it is now
    winner: Optional[PlayerView] = None
    drawn: bool = False
    viable: bool = True


class Player:
    """
    name can change between games, token never does
    """
    def __init__(self, name, token):
        self.name = name
        self._token = token
        self.winner = False

    @property
    def token(self):
        return self._token

    def view(self):
        return PlayerView(self.name, self._token)


class RoundController:
    """
    tic-tac-toe rules and round state
    owns its board, so any number of games can run side by side
    """
    def __init__(self, name_a=DEFAULT_PLAYER_NAMES[0], name_b=DEFAULT_PLAYER_NAMES[1]):
        """
        init board, players and round flags
        """
        self._board = Board()
        self._players = [Player(DEFAULT_PLAYER_NAMES[0], PLAYER_TOKENS[0]),
                         Player(DEFAULT_PLAYER_NAMES[1], PLAYER_TOKENS[1])]
        self._active_index = 0            # X always starts
        self._game_viable = True          # false once won or drawn
        self._game_drawn = False
        self._last_placement_valid = True
        self._move_count = 0
        self._winning_line = None
        self.set_player_names(name_a, name_b)

    # -- moves ---------------------------------------------------------------

    def play_round(self, row, column):
        """
        place the active player's token and classify the board
        returns: RoundResult, never raises for a bad move
        """
        if not self._game_viable:
            logger.info("rejected move (%s, %s): round already over", row, column)
            return self._result(False, Rejection.ROUND_OVER, row, column)

        mover = self.get_active_player()
        if not self._board.place_token(row, column, mover.token):
            # board is untouched, so asking again names the failed check
            reason = self._board.check_placement(row, column, mover.token)
            self._last_placement_valid = False
            logger.info("rejected %s at (%s, %s): %s", mover.token, row, column, reason.value)
            return self._result(False, reason, row, column)

        self._last_placement_valid = True
        self._move_count += 1
        snapshot = self._board.snapshot()

        # winner first: a full board with a line is a win, not a draw
        line = board_state.winning_line(snapshot)
        if line is not None:
            self._players[self._active_index].winner = True
            self._winning_line = line
            logger.info("round over: %s (%s) wins on %s", mover.name, mover.token, line)
        elif board_state.has_draw(snapshot):
            self._game_drawn = True
            logger.info("round over: draw after %d moves", self._move_count)
        else:
            logger.debug("dropped %s's token into row %s column %s", mover.name, row, column)
            self._active_index = 1 - self._active_index

        self._game_viable = board_state.is_viable(snapshot)
        return self._result(True, None, row, column)

    def start_new_game(self):
        """
        clear board and flags, X to move
        """
        self._board.reset()
        for player in self._players:
            player.winner = False
        self._game_drawn = False; self._game_viable = True
        self._active_index = 0; self._move_count = 0
        self._winning_line = None
        self._last_placement_valid = True
        logger.debug("new game: %s (X) vs %s (O)", self._players[0].name, self._players[1].name)

    def set_player_names(self, name_a, name_b):
        """
        rename both players; only before the first move or after the round ends
        blank names fall back to the defaults
        returns: True if applied
        """
        if self._game_viable and self._move_count > 0:
            logger.info("ignoring rename while a round is in progress")
            return False
        names = (name_a, name_b)
        for player, name, default in zip(self._players, names, DEFAULT_PLAYER_NAMES):
            player.name = name.strip() if name and name.strip() else default
        return True

    # -- accessors -----------------------------------------------------------

    def get_active_player(self):
        return self._players[self._active_index].view()

    def get_players(self):
        return tuple(player.view() for player in self._players)

    def get_outcome(self):
        return Outcome(player_a_won=self._players[0].winner,
                       player_b_won=self._players[1].winner,
                       drawn=self._game_drawn)

    def get_winner(self):
        for player in self._players:
            if player.winner:
                return player.view()
        return None

    def get_last_placement_valid(self):
        return self._last_placement_valid

    def get_board_snapshot(self):
        return self._board.snapshot()

    def get_dimensions(self):
        return self._board.dimensions()

    def get_open_cells(self):
        # row-major positions still free on the board
        return self._board.empty_cells()

    def get_winning_line(self):
        return self._winning_line

    def get_move_count(self):
        return self._move_count

    def is_viable(self):
        return self._game_viable

    def _result(self, accepted, rejection, row, column):
        return RoundResult(accepted=accepted, rejection=rejection,
                           row=row, column=column,
                           active_player=self.get_active_player(),
                           winner=self.get_winner(),
                           drawn=self._game_drawn,
                           viable=self._game_viable)
