"""Tests for shell command execution."""
import os
import signal
from unittest.mock import patch

import pytest

from qcmd.shell import ShellExecutor, CommandFailed, default_shell

posix_only = pytest.mark.skipif(os.name == 'nt', reason="requires a POSIX sh")


class TestDefaultShell:
    """Test platform shell selection."""

    def test_posix_shell(self):
        """Test sh -c is used on POSIX."""
        with patch('qcmd.shell.os.name', 'posix'):
            assert default_shell() == ['sh', '-c']

    def test_windows_shell(self):
        """Test pwsh is used on Windows."""
        with patch('qcmd.shell.os.name', 'nt'):
            assert default_shell() == ['pwsh', '-command']

    def test_custom_shell(self):
        """Test a configured shell replaces the default."""
        executor = ShellExecutor(shell=('bash', '-lc'))
        assert executor.shell == ['bash', '-lc']

    def test_shell_as_string(self):
        """Test a shell given as one string is split into arguments."""
        assert ShellExecutor(shell="bash -c").shell == ['bash', '-c']


class TestRun:
    """Test running commands."""

    def test_command_appended_to_shell(self):
        """Test the command string is passed as the last argument."""
        with patch('qcmd.shell.subprocess.Popen') as mock_popen:
            mock_popen.return_value.wait.return_value = 0
            executor = ShellExecutor(shell=['sh', '-c'], cwd='/tmp')
            assert executor.run("echo hi") == (0, None)
            mock_popen.assert_called_once_with(['sh', '-c', 'echo hi'], cwd='/tmp')

    def test_shell_missing(self):
        """Test a shell that cannot start yields -1 and the OSError."""
        executor = ShellExecutor(shell=['definitely-not-a-shell-qcmd', '-c'])
        status, error = executor.run("true")
        assert status == -1
        assert isinstance(error, OSError)

    @posix_only
    def test_success(self):
        """Test a successful command returns status 0 and no error."""
        assert ShellExecutor().run("true") == (0, None)

    @posix_only
    def test_exit_status(self):
        """Test a failing command's status is returned with CommandFailed."""
        status, error = ShellExecutor().run("exit 3")
        assert status == 3
        assert isinstance(error, CommandFailed)
        assert error.status == 3
        assert error.command == "exit 3"

    @posix_only
    def test_signal_is_negative(self):
        """Test a signalled command maps to a negative status."""
        status, error = ShellExecutor().run("kill -TERM $$")
        assert status == -15
        assert "signal 15" in str(error)

    @posix_only
    def test_runs_in_cwd(self, tmp_path):
        """Test commands run from the configured directory."""
        ShellExecutor(cwd=str(tmp_path)).run("touch marker")
        assert (tmp_path / "marker").exists()


class TestInterrupt:
    """Test Ctrl-C handling while a command runs."""

    @posix_only
    def test_sigint_to_qcmd_ignored_while_waiting(self):
        """Test a SIGINT reaching qcmd mid-command does not abort the wait."""
        status, error = ShellExecutor().run("sleep 0.2; kill -INT $PPID; sleep 0.2")
        assert (status, error) == (0, None)

    @posix_only
    def test_ctrl_c_kills_only_the_command(self):
        """Test a terminal Ctrl-C ends the command with a negative status."""
        status, error = ShellExecutor().run("sleep 0.2; kill -INT $PPID; kill -INT $$")
        assert status == -signal.SIGINT
        assert isinstance(error, CommandFailed)

    @posix_only
    def test_handler_restored(self):
        """Test the previous SIGINT handler is back after the command."""
        before = signal.getsignal(signal.SIGINT)
        ShellExecutor().run("exit 1")
        assert signal.getsignal(signal.SIGINT) is before

    def test_handler_untouched_when_start_fails(self):
        """Test a shell that cannot start leaves SIGINT handling alone."""
        before = signal.getsignal(signal.SIGINT)
        ShellExecutor(shell=['definitely-not-a-shell-qcmd', '-c']).run("true")
        assert signal.getsignal(signal.SIGINT) is before
