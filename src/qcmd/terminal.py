"""Terminal prompt used to present menu levels."""
import logging

import questionary
from questionary import Choice, Style

logger = logging.getLogger(__name__)


class TerminalPrompt:
    """Presents menu levels with arrow key navigation and prints messages."""

    def __init__(self, display_config=None):
        """Initialize prompt with display configuration.

        Args:
            display_config: Dictionary with 'numbered', 'branch_suffix',
                'instruction' and 'style' keys (all optional)
        """
        display_config = display_config or {}
        self.numbered = display_config.get('numbered', True)
        self.branch_suffix = display_config.get('branch_suffix', ' >')
        self.instruction = display_config.get('instruction', '(ctrl-c to go back)')
        self.style = Style(list(display_config.get('style', {}).items()))

    def format_option(self, k, label, is_submenu):
        text = f"{label}{self.branch_suffix}" if is_submenu else label
        if self.numbered:
            return f"{k + 1}. {text}"
        return text

    def select(self, title, options):
        """Ask the user to pick one of the options.

        Args:
            title: Breadcrumb shown above the list
            options: Sequence of (label, is_submenu) tuples

        Returns:
            Index of the selected option, or None if the user cancelled
        """
        choices = [
            Choice(title=self.format_option(k, label, is_submenu), value=k)
            for k, (label, is_submenu) in enumerate(options)
        ]
        answer = questionary.select(
            title,
            choices=choices,
            instruction=self.instruction,
            style=self.style,
        ).ask()
        if answer is None:
            logger.debug(f"Selection cancelled at {title!r}")
        return answer

    def show_command(self, command):
        questionary.print(f"\n{command}\n", style="bold")

    def notify(self, message):
        questionary.print(message, style="fg:ansired")
