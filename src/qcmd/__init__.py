"""qcmd - Pick and run shell commands from an outline file."""

from .main import MenuController, main
from .menu import MenuNode
from .navigator import MenuNavigator
from .outline import parse_outline, load_outline
from .shell import ShellExecutor, CommandFailed
from .terminal import TerminalPrompt

__all__ = [
    'MenuController', 'main', 'MenuNode', 'MenuNavigator', 'parse_outline',
    'load_outline', 'ShellExecutor', 'CommandFailed', 'TerminalPrompt',
]
