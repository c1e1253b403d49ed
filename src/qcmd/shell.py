"""Shell command execution."""
import os
import shlex
import signal
import logging
import threading
import subprocess
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class CommandFailed(Exception):
    """A command exited with a non-zero status or was killed by a signal."""
    def __init__(self, command, status):
        self.command = command
        self.status = status
        if status < 0:
            message = f"Command terminated by signal {-status}: {command}"
        else:
            message = f"Command exited with status {status}: {command}"
        super().__init__(message)


@contextmanager
def _ignore_sigint():
    """Ignore Ctrl-C in this process while a child owns the terminal."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def default_shell():
    if os.name == 'nt':
        return ['pwsh', '-command']
    return ['sh', '-c']


class ShellExecutor:
    """Runs commands through a shell, attached to the session's terminal."""

    def __init__(self, shell=None, cwd=None):
        """
        Args:
            shell: argv prefix the command string is appended to, as a list
                or a string such as "bash -c". Defaults to the platform shell.
            cwd: Working directory for commands, None for the current one.
        """
        if isinstance(shell, str):
            shell = shlex.split(shell)
        self.shell = list(shell) if shell else default_shell()
        self.cwd = cwd

    def run(self, command):
        """Run a command and wait for it to finish.

        Returns:
            Tuple of (status, error). Status is the exit code, negative for a
            signal, or -1 if the shell could not be started. Error is None on
            success.
        """
        argv = self.shell + [command]
        logger.debug(f"Running {argv} in {self.cwd or os.getcwd()}")
        try:
            # stdin/stdout/stderr are inherited from the session.
            proc = subprocess.Popen(argv, cwd=self.cwd)
        except OSError as e:
            logger.error(f"Failed to start {self.shell[0]}: {e}")
            return -1, e

        # Started before ignoring SIGINT so the child keeps the default handler.
        with _ignore_sigint():
            returncode = proc.wait()

        if returncode != 0:
            error = CommandFailed(command, returncode)
            logger.info(str(error))
            return returncode, error
        return 0, None
