import sys
import argparse
import logging
from pathlib import Path

# Local imports
from .config import load_config
from .navigator import MenuNavigator
from .outline import load_outline, format_outline
from .shell import ShellExecutor
from .terminal import TerminalPrompt

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def exit_code(status):
    """Map a navigator result to a process exit code."""
    if status is None:
        return 0
    if status < 0:
        # Killed by a signal, reported the way shells do
        return 128 - status
    return status


class MenuController:
    def __init__(self, outline_path, config, prompt=None, executor=None):
        self.config = config
        self.outline_path = Path(outline_path)

        # Load Menu Tree
        outline_conf = self.config['outline']
        markers = {key: outline_conf[key] for key in ('comment', 'directive', 'return_marker')}
        self.root, self.indent_unit = load_outline(
            self.outline_path, indent_unit=outline_conf['indent'], markers=markers
        )

        shell_conf = self.config['shell']
        if executor is None:
            cwd = self.outline_path.resolve().parent if shell_conf.get('chdir', True) else None
            executor = ShellExecutor(shell_conf.get('command'), cwd=cwd)
        self.executor = executor
        self.prompt = prompt if prompt is not None else TerminalPrompt(self.config['display'])
        self.navigator = MenuNavigator(self.root, self.prompt, self.executor)

    def list_commands(self):
        return format_outline(self.root, branch_suffix=self.config['display']['branch_suffix'])

    def run(self, index_path=None):
        """Run the menu session and return the process exit code.

        With index_path, the entry at that 1-based dotted path is run directly,
        or its submenu is presented instead of the main menu.
        """
        if not index_path:
            return exit_code(self.navigator.run())

        path = [self.root.label]
        node = self.root
        for part in str(index_path).split('.'):
            node = node.find(part)
            path.append(node.label)

        if node.is_submenu:
            return exit_code(self.navigator.run(node, path))
        return exit_code(self.navigator.execute(node))


def build_parser():
    parser = argparse.ArgumentParser(prog="qcmd", description="Pick and run commands from an outline file")
    parser.add_argument("-f", "--file", default=".qcmd", help="Path to the outline file")
    parser.add_argument("-n", "--nth", metavar="INDEX",
                        help="Execute the entry at a dotted index, e.g. 2 or 2.1")
    parser.add_argument("-l", "--list", action="store_true", help="List available commands")
    parser.add_argument("-c", "--config", default=None, help="Path to a YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    config = load_config(args.config)
    try:
        app = MenuController(args.file, config)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {args.file}: {e}")
        sys.exit(1)

    if args.list:
        print(f"\n{app.list_commands()}\n")
        sys.exit(0)

    try:
        code = app.run(args.nth)
    except LookupError as e:
        logger.error(e)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
