"""
Tests for the CLI scan loops
"""

import unittest
from threading import Event
from unittest import mock

from src.obstacle_alert.cli import run_interactive, run_periodic, run_scan
from src.obstacle_alert.core import ScanReport, ScanStatus
from src.obstacle_alert.ui import DisplayState


class FakeSession:
    def __init__(self, status=ScanStatus.NOTHING, error=None):
        self.status = status
        self.error = error
        self.display = DisplayState()
        self.scans = 0

    def scan(self):
        self.scans += 1
        if self.error:
            raise self.error
        return ScanReport(status=self.status)


def stopped_after(checks):
    """Shutdown event that reports set after `checks` unset checks."""
    event = mock.Mock()
    event.is_set.side_effect = [False] * checks + [True]
    return event


@mock.patch("src.obstacle_alert.cli.print_display")
class TestRunScan(unittest.TestCase):
    """Test a single scan from the CLI."""

    def test_renders_result(self, mock_print):
        """Test a finished scan is shown."""
        session = FakeSession(ScanStatus.DETECTED)

        self.assertEqual(run_scan(session), ScanStatus.DETECTED)
        mock_print.assert_called_once_with(session.display)

    def test_busy_not_rendered(self, mock_print):
        """Test a rejected trigger leaves the display alone."""
        session = FakeSession(ScanStatus.BUSY)

        self.assertEqual(run_scan(session), ScanStatus.BUSY)
        mock_print.assert_not_called()


@mock.patch("src.obstacle_alert.cli.print_display")
class TestRunPeriodic(unittest.TestCase):
    """Test interval mode."""

    def test_waits_between_scans_until_shutdown(self, mock_print):
        """Test each scan is followed by a wait of one interval."""
        session = FakeSession()
        shutdown = stopped_after(2)

        with mock.patch("src.obstacle_alert.cli._shutdown_signal", shutdown):
            run_periodic(session, 2.5)

        self.assertEqual(session.scans, 2)
        self.assertEqual(shutdown.wait.call_args_list, [mock.call(2.5)] * 2)

    def test_no_scan_after_shutdown(self, mock_print):
        """Test a shutdown before the first scan runs nothing."""
        session = FakeSession()

        with mock.patch("src.obstacle_alert.cli._shutdown_signal", stopped_after(0)):
            run_periodic(session, 1)

        self.assertEqual(session.scans, 0)


@mock.patch("src.obstacle_alert.cli.print_display")
@mock.patch("src.obstacle_alert.cli._shutdown_signal", Event())
class TestRunInteractive(unittest.TestCase):
    """Test manual mode commands."""

    @mock.patch("builtins.input", side_effect=["l", "", "q"])
    def test_toggle_does_not_scan(self, mock_input, mock_print):
        """Test 'l' toggles the panel, Enter scans and 'q' quits."""
        session = FakeSession()

        run_interactive(session)

        self.assertEqual(session.scans, 1)
        self.assertTrue(session.display.labels_expanded)
        self.assertEqual(mock_print.call_count, 2)
        self.assertEqual(mock_input.call_count, 3)

    @mock.patch("builtins.input", side_effect=["scan", "x", "Q"])
    def test_other_input_scans(self, mock_input, mock_print):
        """Test anything but 'l' and 'q' triggers a scan."""
        session = FakeSession()

        run_interactive(session)

        self.assertEqual(session.scans, 2)

    @mock.patch("builtins.input", side_effect=EOFError)
    def test_eof_quits(self, mock_input, mock_print):
        """Test end of input ends the loop without scanning."""
        session = FakeSession()

        run_interactive(session)

        self.assertEqual(session.scans, 0)

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", side_effect=["", ""])
    def test_ctrl_c_during_scan_quits(self, mock_input, mock_builtin_print, mock_print):
        """Test Ctrl+C while a scan is running ends manual mode cleanly."""
        session = FakeSession(error=KeyboardInterrupt())

        run_interactive(session)

        self.assertEqual(session.scans, 1)
        self.assertEqual(mock_input.call_count, 1)


if __name__ == "__main__":
    unittest.main()
