"""Tests for favorites persistence."""
from toolboard.models import FavoriteTool
from toolboard.services.favorites_store import load_favorites, save_favorites


def test_empty_store(db_session):
    """Test a fresh database has no favorites."""
    assert load_favorites(db_session) == frozenset()


def test_save_and_load(db_session):
    """Test saved favorites load back."""
    save_favorites(db_session, {"1", "2"})
    assert load_favorites(db_session) == {"1", "2"}


def test_save_replaces_previous_set(db_session):
    """Test saving removes ids no longer present."""
    save_favorites(db_session, {"1", "2"})
    save_favorites(db_session, {"2", "3"})

    assert load_favorites(db_session) == {"2", "3"}
    assert db_session.query(FavoriteTool).count() == 2
