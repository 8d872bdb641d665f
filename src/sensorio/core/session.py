"""
Editing session state.

The session is the single owner of the sensor tree while it is being edited,
along with the dirty flag, the file name used for export and the last error
reported to the user.
"""

from typing import Callable, Optional

from .models import FlatRecord, SensorTree
from .tree_builder import build_tree, flatten_tree
from ..infrastructure.logging_config import get_logger

logger = get_logger(__name__)


DEFAULT_FILE_NAME = "cameras.csv"

UNSAVED_CHANGES_MESSAGE = (
    "You have unsaved changes in the database. Are you sure you want to leave?"
)


class EditingSession:
    """
    Session-scoped editing state.

    Holds the tree being edited and tracks whether it differs from the last
    loaded or exported flat form.
    """

    def __init__(self, file_name: str = DEFAULT_FILE_NAME):
        """
        Initialize an empty session.

        Args:
            file_name: File name used for export until a load sets another one.
        """
        self.tree = SensorTree()
        self.file_name = file_name
        self.dirty = False
        self.error: Optional[str] = None

    @property
    def has_unsaved_changes(self) -> bool:
        """True when the tree has edits not yet exported."""
        return self.dirty

    @property
    def is_empty(self) -> bool:
        """True when no dataset is loaded."""
        return self.tree.is_empty()

    def replace_tree(self, tree: SensorTree, file_name: Optional[str] = None) -> None:
        """
        Replace the tree wholesale, as after a successful load.

        Args:
            tree: The newly built tree.
            file_name: New export file name, or None to keep the current one.
        """
        self.tree = tree
        if file_name:
            self.file_name = file_name
        self.dirty = False
        self.error = None
        logger.info(f"Loaded {tree.mode_count()} modes into session ({self.file_name})")

    def load_records(self, records: list[FlatRecord], file_name: Optional[str] = None) -> SensorTree:
        """
        Build a tree from flat records and make it the session tree.

        Args:
            records: Flat records in persisted order.
            file_name: New export file name, or None to keep the current one.

        Returns:
            The newly built tree.
        """
        tree = build_tree(records)
        self.replace_tree(tree, file_name)
        return tree

    def to_records(self) -> list[FlatRecord]:
        """Flatten the current tree for export."""
        return flatten_tree(self.tree)

    def mark_dirty(self) -> None:
        """Record that the tree changed since the last load or export."""
        self.dirty = True

    def mark_saved(self) -> None:
        """Record a successful export."""
        self.dirty = False

    def report_error(self, message: str) -> None:
        """Store a human-readable error for display. The tree is not touched."""
        self.error = message
        logger.error(message)

    def clear_error(self) -> None:
        """Dismiss the current error message."""
        self.error = None

    def confirm_discard(self, confirm: Callable[[str], bool]) -> bool:
        """
        Guard a destructive navigation (closing, leaving, replacing the dataset).

        Args:
            confirm: Callback asked with a warning message when there are
                unsaved changes; returns True to proceed anyway.

        Returns:
            True when it is safe to proceed.
        """
        if not self.dirty:
            return True
        return bool(confirm(UNSAVED_CHANGES_MESSAGE))
