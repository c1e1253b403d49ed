"""Outline parser: turns an indented command file into a MenuNode tree."""
import logging
from pathlib import Path

from .menu import MenuNode, ROOT_LABEL

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2
DEFAULT_MARKERS = {
    'comment': '#',
    'directive': '#indent=',
    'return_marker': '...',
}


def _indent_width(line, indent_unit):
    """Leading whitespace in columns; a tab counts as one indent unit."""
    width = 0
    for ch in line:
        if ch == ' ':
            width += 1
        elif ch == '\t':
            width += indent_unit
        else:
            break
    return width


def _parse_directive(value, current):
    try:
        size = int(value.strip())
    except ValueError:
        size = 0
    if size <= 0:
        logger.warning(f"Ignoring invalid indent directive {value.strip()!r}, keeping {current}")
        return current
    return size


def _split_marker(text, marker):
    """Strip a trailing return marker. Returns (text, exit_after_run)."""
    if marker and text.endswith(marker):
        head = text[:-len(marker)]
        if not head or head[-1].isspace():
            return head.strip(), False
    return text, True


def parse_line(text, return_marker=DEFAULT_MARKERS['return_marker']):
    """Convert the trimmed text of a content line into a MenuNode.

    Returns None when the line carries neither a label nor a command.
    """
    text, exit_after_run = _split_marker(text.strip(), return_marker)

    if text.endswith(':'):
        label = text[:-1].strip()
        if not label:
            return None
        return MenuNode(label=label, exit_after_run=exit_after_run)

    label, sep, command = text.partition(':')
    label = label.strip()
    command = command.strip() if sep else label
    if not command:
        return None
    return MenuNode(label=label or command, command=command, exit_after_run=exit_after_run)


def parse_outline(text, indent_unit=DEFAULT_INDENT, markers=None):
    """Parse outline text into a tree rooted at a "Main Menu" node.

    Args:
        text: Full document text.
        indent_unit: Columns per nesting level until an indent directive
            changes it.
        markers: Optional overrides for DEFAULT_MARKERS.

    Returns:
        Tuple of (root MenuNode, indent unit in effect at end of document).
    """
    markers = {**DEFAULT_MARKERS, **(markers or {})}
    root = MenuNode(label=ROOT_LABEL)
    # stack[d] is the branch new entries at depth d attach to.
    stack = [root]

    for lineno, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(markers['directive']):
            indent_unit = _parse_directive(stripped[len(markers['directive']):], indent_unit)
            logger.debug(f"Line {lineno}: indent unit is {indent_unit}")
            continue
        if stripped.startswith(markers['comment']):
            continue

        node = parse_line(stripped, markers['return_marker'])
        if node is None:
            logger.debug(f"Line {lineno}: nothing to add, skipping")
            continue

        depth = _indent_width(line, indent_unit) // indent_unit
        if depth > len(stack) - 1:
            logger.debug(f"Line {lineno}: indentation jumps to level {depth}, "
                         f"attaching to {stack[-1].label!r}")
            depth = len(stack) - 1
        del stack[depth + 1:]
        stack[depth].children.append(node)
        stack.append(node)

    return root, indent_unit


def load_outline(path, indent_unit=DEFAULT_INDENT, markers=None):
    """Read and parse an outline file.

    OSError and UnicodeDecodeError propagate to the caller. A leading BOM is
    dropped.
    """
    text = Path(path).read_text(encoding='utf-8-sig')
    return parse_outline(text, indent_unit=indent_unit, markers=markers)


def iter_commands(node, prefix=''):
    """Yield (index_path, node) for every descendant in display order."""
    for k, child in enumerate(node.children, 1):
        index_path = f"{prefix}{k}"
        yield index_path, child
        yield from iter_commands(child, prefix=f"{index_path}.")


def format_outline(root, branch_suffix=' >'):
    lines = []
    for index_path, node in iter_commands(root):
        indent = '    ' * index_path.count('.')
        suffix = branch_suffix if node.is_submenu else ''
        lines.append(f"    {indent}{index_path}. {node.label}{suffix}")
    return '\n'.join(lines)
