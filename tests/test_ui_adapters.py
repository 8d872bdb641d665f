"""
Tests for the Qt adapters (view models and worker threads).

Only QtCore is used, so no display is required.
"""

import pytest
from PySide6.QtCore import QCoreApplication, Qt

from sensorio.core.errors import DatasetFetchError
from sensorio.ui.view_models import ModeTableModel, SessionViewModel
from sensorio.ui.workers import DefaultDatasetFetchThread


@pytest.fixture(scope="module")
def qt_app():
    """Ensure a Qt core application exists for QObject-based tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def table(qt_app, editor) -> ModeTableModel:
    """Table model over Acme / V1."""
    return ModeTableModel(editor, 0, 0)


class TestSessionViewModel:
    """Tests for SessionViewModel."""
    
    def test_counts(self, session):
        view_model = SessionViewModel(session)
        assert view_model.get_brand_count() == 2
        assert view_model.get_model_count() == 3
        assert view_model.get_mode_count() == 4
        assert view_model.can_export()
    
    def test_unsaved_badge(self, session, editor):
        view_model = SessionViewModel(session)
        assert not view_model.show_unsaved_badge()
        editor.add_mode(0, 0)
        assert view_model.show_unsaved_badge()


class TestModeTableModel:
    """Tests for ModeTableModel."""
    
    def test_shape_and_headers(self, table):
        assert table.rowCount() == 2
        assert table.columnCount() == 6
        assert table.headerData(3, Qt.Orientation.Horizontal) == "Resolution"
        assert table.headerData(0, Qt.Orientation.Vertical) == "1"
    
    def test_display_data(self, table):
        assert table.data(table.index(0, 0)) == "Wide"
        assert table.data(table.index(1, 3)) == "2048 x 1080"
        assert table.data(table.index(0, 5)) == "1.3"
    
    def test_checkbox_column(self, table):
        assert table.data(table.index(0, 4), Qt.ItemDataRole.CheckStateRole) == Qt.CheckState.Unchecked
        assert table.data(table.index(1, 4), Qt.ItemDataRole.CheckStateRole) == Qt.CheckState.Checked
        assert table.flags(table.index(0, 4)) & Qt.ItemFlag.ItemIsUserCheckable
    
    def test_set_data_routes_through_editor(self, table, session):
        """Test that view edits go through the mutation engine and mark the session dirty."""
        changed = []
        table.dataChanged.connect(lambda top_left, bottom_right, roles: changed.append(top_left.row()))
        
        assert table.setData(table.index(1, 1), "12.5", Qt.ItemDataRole.EditRole)
        
        assert session.tree.brands[0].models[0].modes[1].width == "12.5"
        assert session.dirty
        assert changed == [1]
    
    def test_toggle_checkbox(self, table, session):
        assert table.setData(table.index(0, 4), Qt.CheckState.Checked, Qt.ItemDataRole.CheckStateRole)
        assert session.tree.brands[0].models[0].modes[0].native_anamorphic == "True"
    
    def test_refresh_after_structural_change(self, table, editor):
        editor.add_mode(0, 0)
        table.refresh()
        assert table.rowCount() == 3
    
    def test_stale_address(self, qt_app, editor):
        """Test that a model pointing at a removed node shows nothing."""
        table = ModeTableModel(editor, 0, 1)
        editor.remove_model(0, 1)
        assert table.rowCount() == 0


class TestDefaultDatasetFetchThread:
    """Tests for the background fetch worker (run synchronously)."""
    
    def test_emits_payload(self, qt_app):
        received = []
        thread = DefaultDatasetFetchThread(
            url="https://example.invalid/c.csv",
            fetcher=lambda url, timeout: f"payload from {url}",
        )
        thread.fetch_complete.connect(received.append)
        
        thread.run()
        
        assert received == ["payload from https://example.invalid/c.csv"]
    
    def test_emits_error(self, qt_app):
        errors = []
        
        def failing(url, timeout):
            raise DatasetFetchError("Failed to fetch default database.")
        
        thread = DefaultDatasetFetchThread(fetcher=failing)
        thread.fetch_error.connect(errors.append)
        
        thread.run()
        
        assert errors == ["Failed to fetch default database."]
