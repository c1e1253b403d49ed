"""Recursive menu navigation and command dispatch."""
import logging

logger = logging.getLogger(__name__)

BREADCRUMB_SEPARATOR = " > "


class MenuNavigator:
    """Walks a MenuNode tree, one prompt per menu level.

    The prompt collaborator provides select(title, options) -> index or None,
    notify(message) and show_command(command). The executor provides
    run(command) -> (status, error).
    """

    def __init__(self, root, prompt, executor):
        self.root = root
        self.prompt = prompt
        self.executor = executor

    def run(self, node=None, path=None):
        """Present a menu level until the user cancels or a command ends the session.

        Args:
            node: Menu level to present, defaults to the root
            path: Breadcrumb labels leading to node, defaults to [node.label]

        Returns:
            Exit status of the command that ended the session, or None if the
            user cancelled this level.
        """
        node = node if node is not None else self.root
        path = path if path is not None else [node.label]
        title = BREADCRUMB_SEPARATOR.join(path)
        if not node.children:
            self.prompt.notify(f"{node.label} has no entries")
            return None

        while True:
            options = [(child.label, child.is_submenu) for child in node.children]
            index = self.prompt.select(title, options)
            if index is None:
                return None

            selected = node.children[index]
            if selected.is_submenu:
                status = self.run(selected, path + [selected.label])
                if status is not None:
                    return status
                continue

            status = self.execute(selected)
            if selected.exit_after_run:
                return status

    def execute(self, node):
        logger.info(f"Executing {node.label!r}: {node.command}")
        self.prompt.show_command(node.command)
        status, error = self.executor.run(node.command)
        if error is not None:
            self.prompt.notify(str(error))
        return status
