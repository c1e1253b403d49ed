"""Menu structure and node representation."""

ROOT_LABEL = "Main Menu"


class MenuNode:
    """Represents a single item in the menu tree."""
    def __init__(self, label, command=None, children=None, exit_after_run=True):
        self.label = label
        self.command = command
        self.children = children if children else []
        self.exit_after_run = exit_after_run

    def __repr__(self):
        return f"MenuNode({self.label!r}, command={self.command!r}, children={len(self.children)})"

    @property
    def is_submenu(self):
        # Children win over a command; a header without either is an empty submenu.
        return bool(self.children) or self.command is None

    def find(self, index_path):
        """Resolve a 1-based dotted index path (e.g. "2.1") to a descendant.

        Raises:
            LookupError: If the path is malformed or an index is out of range.
        """
        node = self
        for part in str(index_path).split('.'):
            try:
                k = int(part)
            except ValueError:
                raise LookupError(f"Invalid index: {part!r}") from None
            if not 1 <= k <= len(node.children):
                raise LookupError(f"Item not found: {index_path}")
            node = node.children[k - 1]
        return node
