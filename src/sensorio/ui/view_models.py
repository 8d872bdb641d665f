"""
View models for presenting the sensor tree in the UI.

View models bridge the gap between the editing session and Qt views. Edits
made through a view are routed to the TreeEditor so that the session stays
the single owner of the tree.
"""

from typing import Any, Optional

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from sensorio.core.models import ModelNode, resolve_mode_field
from sensorio.core.mutations import TreeEditor
from sensorio.core.session import EditingSession
from sensorio.infrastructure.logging_config import get_logger


logger = get_logger(__name__)


class SessionViewModel:
    """
    View model for an editing session.
    
    Provides summary information for headers and status bars.
    """
    
    def __init__(self, session: EditingSession):
        self.session = session
    
    def get_brand_count(self) -> int:
        """Get the number of brands."""
        return len(self.session.tree.brands)
    
    def get_model_count(self) -> int:
        """Get the number of models across all brands."""
        return self.session.tree.model_count()
    
    def get_mode_count(self) -> int:
        """Get the number of modes across the tree."""
        return self.session.tree.mode_count()
    
    def show_unsaved_badge(self) -> bool:
        """Whether the 'Unsaved Changes' indicator should be visible."""
        return self.session.has_unsaved_changes
    
    def can_export(self) -> bool:
        """Export is only offered once a dataset is loaded."""
        return not self.session.is_empty


class ModeTableModel(QAbstractTableModel):
    """
    Table model for editing the modes of one camera model in a QTableView.
    
    Columns: Mode, Width, Height, Resolution, Native Anamorphic, Squeezes
    """
    
    COLUMNS = [
        ("Mode", "Mode"),
        ("Width (mm)", "Width"),
        ("Height (mm)", "Height"),
        ("Resolution", "Resolution"),
        ("Native Anamorphic", "NativeAnamorphic"),
        ("Squeezes", "SupportedSqueezes"),
    ]
    
    ANAMORPHIC_COLUMN = 4
    
    def __init__(self, editor: TreeEditor, brand_idx: int, model_idx: int, parent=None):
        """
        Initialize the table model.
        
        Args:
            editor: Mutation engine of the session being edited.
            brand_idx: Index of the brand holding the model.
            model_idx: Index of the model within the brand.
            parent: Parent QObject.
        """
        super().__init__(parent)
        self._editor = editor
        self._brand_idx = brand_idx
        self._model_idx = model_idx
    
    def _model(self) -> Optional[ModelNode]:
        return self._editor.tree.get_model(self._brand_idx, self._model_idx)
    
    def rowCount(self, parent=QModelIndex()) -> int:
        """Return the number of rows."""
        if parent.isValid():
            return 0
        model = self._model()
        return len(model.modes) if model is not None else 0
    
    def columnCount(self, parent=QModelIndex()) -> int:
        """Return the number of columns."""
        return len(self.COLUMNS)
    
    def data(self, index: QModelIndex, role=Qt.ItemDataRole.DisplayRole) -> Any:
        """Return data for the given index and role."""
        if not index.isValid():
            return None
        
        mode = self._editor.tree.get_mode(self._brand_idx, self._model_idx, index.row())
        if mode is None:
            return None
        
        col = index.column()
        if col == self.ANAMORPHIC_COLUMN:
            if role == Qt.ItemDataRole.CheckStateRole:
                checked = mode.native_anamorphic == "True"
                return Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked
            return None
        
        if role in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole):
            return getattr(mode, resolve_mode_field(self.COLUMNS[col][1]))
        
        if role == Qt.ItemDataRole.UserRole:
            return mode.id
        
        return None
    
    def setData(self, index: QModelIndex, value: Any, role=Qt.ItemDataRole.EditRole) -> bool:
        """Route an edit to the mutation engine."""
        if not index.isValid():
            return False
        
        row, col = index.row(), index.column()
        if col == self.ANAMORPHIC_COLUMN:
            if role != Qt.ItemDataRole.CheckStateRole:
                return False
            checked = value in (Qt.CheckState.Checked, Qt.CheckState.Checked.value)
            changed = self._editor.set_native_anamorphic(self._brand_idx, self._model_idx, row, checked)
        elif role == Qt.ItemDataRole.EditRole:
            changed = self._editor.update_field(
                self._brand_idx, self._model_idx, row, self.COLUMNS[col][1], str(value)
            )
        else:
            return False
        
        if changed:
            self.dataChanged.emit(index, index, [role])
        return changed
    
    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        """Return item flags."""
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        base = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if index.column() == self.ANAMORPHIC_COLUMN:
            return base | Qt.ItemFlag.ItemIsUserCheckable
        return base | Qt.ItemFlag.ItemIsEditable
    
    def headerData(self, section: int, orientation: Qt.Orientation, role=Qt.ItemDataRole.DisplayRole) -> Any:
        """Return header data."""
        if role == Qt.ItemDataRole.DisplayRole:
            if orientation == Qt.Orientation.Horizontal:
                return self.COLUMNS[section][0]
            else:
                return str(section + 1)
        return None
    
    def refresh(self):
        """Reset the view after structural changes (add, remove, reorder, sort)."""
        self.beginResetModel()
        self.endResetModel()

