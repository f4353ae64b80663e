import os
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.color import ColorTriplet

from segclock.config import Configuration
from segclock.errors import ClockError, TerminalError
from segclock.main import build_parser, main


def clean_environ():
    return {k: v for k, v in os.environ.items() if not k.startswith("SEGCLOCK_")}


class TestParser(unittest.TestCase):
    """Test command-line flag parsing"""

    def setUp(self):
        self.parser = build_parser()

    def test_defaults(self):
        args = self.parser.parse_args([])
        self.assertFalse(args.twenty_four_hour)
        self.assertFalse(args.show_seconds)
        self.assertIsNone(args.colour)

    def test_twenty_four_hour_flag(self):
        """Test that -24 is a flag, not a negative number"""
        self.assertTrue(self.parser.parse_args(["-24"]).twenty_four_hour)

    def test_seconds_flag(self):
        self.assertTrue(self.parser.parse_args(["--seconds"]).show_seconds)

    def test_colour_spellings(self):
        for flag in ("-c", "--color", "--colour"):
            self.assertEqual(self.parser.parse_args([flag, "red"]).colour, "red", flag)


@patch("segclock.main.err_console")
@patch("segclock.main.run_clock")
class TestMain(unittest.TestCase):
    """Test exit statuses and error reporting"""

    def setUp(self):
        self.env = patch.dict(os.environ, clean_environ(), clear=True)
        self.env.start()
        self.config_file = patch(
            "segclock.config.CONFIG_FILE", Path("/nonexistent/segclock_test/config.json")
        )
        self.config_file.start()

    def tearDown(self):
        self.config_file.stop()
        self.env.stop()

    def test_clean_run(self, mock_run, mock_console):
        """Test that a normal quit returns without exiting non-zero"""
        main([])
        mock_run.assert_called_once_with(Configuration())
        mock_console.print.assert_not_called()

    def test_flags_reach_configuration(self, mock_run, mock_console):
        main(["-24", "--seconds", "-c", "#FF0000"])
        config = mock_run.call_args[0][0]
        self.assertTrue(config.twenty_four_hour)
        self.assertTrue(config.show_seconds)
        self.assertEqual(config.colour.triplet, ColorTriplet(255, 0, 0))

    def test_invalid_colour_exits_2(self, mock_run, mock_console):
        with self.assertRaises(SystemExit) as cm:
            main(["--colour", "notacolour"])
        self.assertEqual(cm.exception.code, 2)
        mock_run.assert_not_called()
        mock_console.print.assert_called_once()
        self.assertIn("notacolour", mock_console.print.call_args[0][0])

    def test_invalid_colour_from_environment_exits_2(self, mock_run, mock_console):
        os.environ["SEGCLOCK_COLOUR"] = "#ZZZZZZ"
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 2)
        mock_run.assert_not_called()

    def test_unknown_flag_exits_2(self, mock_run, mock_console):
        with self.assertRaises(SystemExit) as cm:
            main(["--bogus"])
        self.assertEqual(cm.exception.code, 2)
        mock_run.assert_not_called()

    def test_missing_colour_value_exits_2(self, mock_run, mock_console):
        with self.assertRaises(SystemExit) as cm:
            main(["-c"])
        self.assertEqual(cm.exception.code, 2)

    def test_help_exits_0(self, mock_run, mock_console):
        with self.assertRaises(SystemExit) as cm:
            main(["--help"])
        self.assertEqual(cm.exception.code, 0)
        mock_run.assert_not_called()

    def test_version_exits_0(self, mock_run, mock_console):
        with self.assertRaises(SystemExit) as cm:
            main(["--version"])
        self.assertEqual(cm.exception.code, 0)

    def test_terminal_error_exits_1(self, mock_run, mock_console):
        mock_run.side_effect = TerminalError("not a tty")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)
        mock_console.print.assert_called_once()
        self.assertIn("not a tty", mock_console.print.call_args[0][0])

    def test_clock_error_exits_1(self, mock_run, mock_console):
        mock_run.side_effect = ClockError("no local time")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)

    def test_os_error_exits_1(self, mock_run, mock_console):
        mock_run.side_effect = OSError("broken pipe")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)

    def test_interrupt_exits_1(self, mock_run, mock_console):
        mock_run.side_effect = KeyboardInterrupt()
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)

    def test_unexpected_error_exits_1(self, mock_run, mock_console):
        """Test that any other failure is one message on stderr, not a traceback"""
        mock_run.side_effect = RuntimeError("something unexpected")
        with self.assertRaises(SystemExit) as cm:
            main([])
        self.assertEqual(cm.exception.code, 1)
        mock_console.print.assert_called_once()
        self.assertIn("something unexpected", mock_console.print.call_args[0][0])

    def test_error_message_is_escaped(self, mock_run, mock_console):
        """Test that brackets in error text are not read as Rich markup"""
        mock_run.side_effect = TerminalError("bad [bold]thing[/bold]")
        with self.assertRaises(SystemExit):
            main([])
        self.assertIn("\\[bold]", mock_console.print.call_args[0][0])


if __name__ == "__main__":
    unittest.main()
