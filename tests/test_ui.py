import os
import unittest
from unittest.mock import patch

# No display needed for these tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication, QInputDialog  # noqa: E402

from tictactoe.game_logic import RoundController  # noqa: E402
from tictactoe.ui.board_widget import BoardWidget  # noqa: E402
from tictactoe.ui.main_window import TicTacToeWindow, DRAW_TEXT, WELCOME_TEXT  # noqa: E402


def _app():
    return QApplication.instance() or QApplication([])


class TestBoardWidget(unittest.TestCase):
    def setUp(self):
        self.app = _app()
        self.controller = RoundController()
        self.widget = BoardWidget(self.controller)
        self.widget.resize(300, 300)

    def test_given_square_widget_when_mapping_points_then_cells(self):
        self.assertEqual(self.widget.cell_at(10, 10), (0, 0))
        self.assertEqual(self.widget.cell_at(150, 150), (1, 1))
        self.assertEqual(self.widget.cell_at(299, 5), (0, 2))
        self.assertEqual(self.widget.cell_at(5, 299), (2, 0))

    def test_given_wide_widget_when_clicking_margin_then_ignored(self):
        self.widget.resize(500, 300)  # grid is centred: x in [100, 400)
        self.assertIsNone(self.widget.cell_at(50, 150))
        self.assertEqual(self.widget.cell_at(100, 0), (0, 0))
        self.assertIsNone(self.widget.cell_at(450, 150))

    def test_paint_with_marks_and_winning_line(self):
        for r, c in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            self.controller.play_round(r, c)
        self.assertIsNotNone(self.controller.get_winning_line())
        image = self.widget.grab()
        self.assertFalse(image.isNull())


class TestMainWindow(unittest.TestCase):
    def setUp(self):
        self.app = _app()
        self.controller = RoundController()
        self.window = TicTacToeWindow(self.controller)

    def tearDown(self):
        self.window.close()

    def test_initial_labels(self):
        self.assertEqual(self.window.message_label.text(), WELCOME_TEXT)
        self.assertEqual(self.window.player_x_label.text(), "Player One's turn.")
        self.assertEqual(self.window.player_o_label.text(), "")

    def test_given_click_when_valid_then_turn_passes_to_o(self):
        self.window._on_cell_clicked(1, 1)
        self.assertEqual(self.window.player_o_label.text(), "Player Two's turn.")
        self.assertEqual(self.window.player_x_label.text(), "")
        self.assertIn("Player Two (O) to move", self.window.message_label.text())
        self.assertFalse(self.window.names_button.isEnabled())

    def test_given_taken_cell_when_clicked_then_error_message(self):
        self.window._on_cell_clicked(1, 1)
        self.window._on_cell_clicked(1, 1)
        self.assertEqual(self.window.message_label.text(), "Cell taken - please try again")
        self.assertEqual(self.controller.get_active_player().token, 'O')

    def test_given_winning_sequence_then_winner_shown_and_clicks_disabled(self):
        for r, c in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            self.window._on_cell_clicked(r, c)
        self.assertEqual(self.window.message_label.text(), "Player One wins")
        self.assertEqual(self.window.player_x_label.text(), "")
        self.assertFalse(self.window.board_widget._accept_clicks)
        self.assertTrue(self.window.names_button.isEnabled())

    def test_given_draw_sequence_then_draw_shown(self):
        for r, c in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]:
            self.window._on_cell_clicked(r, c)
        self.assertEqual(self.window.message_label.text(), DRAW_TEXT)

    def test_new_game_clears_board(self):
        self.window._on_cell_clicked(0, 0)
        self.window.new_game()
        self.assertIsNone(self.controller.get_board_snapshot()[0][0].token)
        self.assertTrue(self.window.board_widget._accept_clicks)
        self.assertIn("Player One (X) to move", self.window.message_label.text())

    def test_given_dialog_answers_when_prompting_names_then_applied(self):
        answers = iter([("Ada", True), ("Linus", True)])
        with patch.object(QInputDialog, "getText", side_effect=lambda *a, **kw: next(answers)):
            self.window.prompt_player_names()
        self.assertEqual(self.window.player_x_label.text(), "Ada's turn.")
        self.assertEqual(self.controller.get_players()[1].name, "Linus")

    def test_given_cancelled_dialog_then_names_kept(self):
        with patch.object(QInputDialog, "getText", return_value=("", False)):
            self.window.prompt_player_names()
        self.assertEqual(self.controller.get_players()[0].name, "Player One")

    def test_rename_mid_round_refused(self):
        self.window._on_cell_clicked(0, 0)
        self.assertFalse(self.window.apply_player_names("Ada", "Linus"))
        self.assertEqual(self.controller.get_players()[0].name, "Player One")


if __name__ == "__main__":
    unittest.main()
