import io
import sys
import unittest
from unittest.mock import patch

import main


class TestMain(unittest.TestCase):
    def test_command_option_runs_one_line(self):
        out = io.StringIO()
        with patch.object(sys, "stdout", out):
            rc = main.main(["-c", "echo 'hello   world'"])
        self.assertEqual(0, rc)
        self.assertEqual("hello   world\n", out.getvalue())

    def test_command_option_exit_status(self):
        self.assertEqual(3, main.main(["-c", "exit 3"]))

    def test_command_option_parse_error(self):
        err = io.StringIO()
        with patch.object(sys, "stderr", err):
            rc = main.main(["-c", "echo \"open"])
        self.assertEqual(2, rc)
        self.assertIn("Unclosed double quote", err.getvalue())

    def test_interactive_mode_runs_shell(self):
        with patch.object(main, "install_completer") as mock_install, \
             patch.object(main.Shell, "run", return_value=0) as mock_run:
            rc = main.main([])
        self.assertEqual(0, rc)
        mock_install.assert_called_once()
        mock_run.assert_called_once()

    def test_no_completion_flag(self):
        with patch.object(main, "install_completer") as mock_install, \
             patch.object(main.Shell, "run", return_value=0):
            main.main(["--no-completion"])
        mock_install.assert_not_called()


if __name__ == "__main__":
    unittest.main()
