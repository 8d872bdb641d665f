"""
Tests for the editing session state.

These tests verify the dirty flag lifecycle and the unsaved-changes guard.
"""

from sensorio.core.models import SensorTree
from sensorio.core.mutations import TreeEditor
from sensorio.core.session import DEFAULT_FILE_NAME, UNSAVED_CHANGES_MESSAGE, EditingSession


class TestSessionState:
    """Tests for session construction and loading."""
    
    def test_new_session_is_empty_and_clean(self):
        session = EditingSession()
        assert session.is_empty
        assert not session.has_unsaved_changes
        assert session.file_name == DEFAULT_FILE_NAME
        assert session.to_records() == []
    
    def test_load_replaces_tree_wholesale(self, session, sample_records):
        """Test that a load discards the prior tree and clears dirty and error."""
        TreeEditor(session).add_brand()
        session.report_error("stale")
        
        session.load_records(sample_records[:1], file_name="other.csv")
        
        assert [b.brand for b in session.tree.brands] == ["Acme"]
        assert session.tree.mode_count() == 1
        assert not session.dirty
        assert session.error is None
        assert session.file_name == "other.csv"
    
    def test_load_without_file_name_keeps_current(self, session):
        session.replace_tree(SensorTree())
        assert session.file_name == "sensors.csv"
    
    def test_mark_saved_clears_dirty(self, session):
        session.mark_dirty()
        assert session.has_unsaved_changes
        session.mark_saved()
        assert not session.has_unsaved_changes


class TestNavigationGuard:
    """Tests for confirm_discard."""
    
    def test_clean_session_does_not_ask(self, session):
        """Test that no confirmation is requested without unsaved changes."""
        asked = []
        assert session.confirm_discard(lambda message: asked.append(message) or False)
        assert asked == []
    
    def test_dirty_session_asks(self, session):
        """Test that the callback receives the warning and decides."""
        session.mark_dirty()
        asked = []
        
        assert not session.confirm_discard(lambda message: asked.append(message) or False)
        assert session.confirm_discard(lambda message: True)
        assert asked == [UNSAVED_CHANGES_MESSAGE]


class TestErrors:
    """Tests for error reporting."""
    
    def test_report_error_does_not_touch_tree(self, session):
        before = session.to_records()
        session.report_error("Error parsing CSV: boom")
        
        assert session.error == "Error parsing CSV: boom"
        assert session.to_records() == before
        assert not session.dirty
        
        session.clear_error()
        assert session.error is None
