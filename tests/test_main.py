import unittest

import main
from tictactoe.game_logic import DEFAULT_PLAYER_NAMES


class TestParseArgs(unittest.TestCase):
    def test_given_no_args_then_defaults(self):
        args, qt_args = main.parse_args([])
        self.assertEqual(args.player_x, DEFAULT_PLAYER_NAMES[0])
        self.assertEqual(args.player_o, DEFAULT_PLAYER_NAMES[1])
        self.assertEqual(args.log_level, 'WARNING')
        self.assertEqual(qt_args, [])

    def test_given_names_and_level_then_parsed(self):
        args, _ = main.parse_args(['--player-x', 'Ada', '--player-o', 'Linus', '--log-level', 'DEBUG'])
        self.assertEqual((args.player_x, args.player_o, args.log_level), ('Ada', 'Linus', 'DEBUG'))

    def test_given_qt_options_then_passed_through(self):
        args, qt_args = main.parse_args(['--player-x', 'Ada', '-style', 'fusion'])
        self.assertEqual(args.player_x, 'Ada')
        self.assertEqual(qt_args, ['-style', 'fusion'])


if __name__ == "__main__":
    unittest.main()
