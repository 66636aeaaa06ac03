"""Tests for saved palettes and session persistence."""

import json
import logging

import pytest

from palette_engine import history
from palette_engine.storage import PaletteStore, load_session, save_session


class TestPaletteStore:
    """Test the saved palette list."""

    @pytest.mark.integration
    def test_save_and_list(self, temp_dir):
        """Test saved palettes come back in order with ids and timestamps."""
        store = PaletteStore(temp_dir / "palettes.json")
        first = store.save(["#ff0000", "#00ff00"], name="Traffic")
        second = store.save(["#000000"])

        palettes = store.list()
        assert [p.id for p in palettes] == [first.id, second.id]
        assert palettes[0].name == "Traffic"
        assert palettes[0].colors == ["#ff0000", "#00ff00"]
        assert second.name.startswith("Palette ")
        assert first.saved_at
        assert first.id != second.id

    @pytest.mark.integration
    def test_remove(self, temp_dir):
        """Test removing by id."""
        store = PaletteStore(temp_dir / "palettes.json")
        keep = store.save(["#ffffff"])
        drop = store.save(["#000000"])
        store.remove(drop.id)
        assert [p.id for p in store.list()] == [keep.id]
        assert store.get(drop.id) is None
        assert store.get(keep.id).colors == ["#ffffff"]

    @pytest.mark.integration
    def test_missing_file_is_empty(self, temp_dir):
        """Test a store with no file lists nothing."""
        assert PaletteStore(temp_dir / "nope" / "palettes.json").list() == []

    @pytest.mark.integration
    def test_corrupt_file_is_discarded(self, temp_dir, caplog):
        """Test unreadable content is treated as empty with a warning."""
        path = temp_dir / "palettes.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="palette_engine.storage"):
            assert PaletteStore(path).list() == []
        assert "Discarding" in caplog.text

    @pytest.mark.integration
    def test_malformed_entries_skipped(self, temp_dir):
        """Test entries without a color list are dropped."""
        path = temp_dir / "palettes.json"
        path.write_text(json.dumps([{"id": "a", "colors": ["#ff0000"]}, {"id": "b"}, "junk"]))
        assert [p.id for p in PaletteStore(path).list()] == ["a"]

    @pytest.mark.integration
    def test_default_location(self, data_dir):
        """Test the store lives under the configured data directory."""
        store = PaletteStore()
        store.save(["#123456"])
        assert (data_dir / "palettes.json").exists()


class TestSession:
    """Test saving and restoring the undo history."""

    @pytest.mark.integration
    def test_round_trip(self, temp_dir):
        """Test a saved session restores entries and cursor."""
        path = temp_dir / "session.json"
        state = history.push(history.initial([["#ff0000"], ["#00ff00"]]), ["#0000ff"])
        state = history.undo(state)
        save_session(state, path, now=1000)

        restored = load_session(path, now=1000 + 60)
        assert restored.entries == (["#ff0000"], ["#00ff00"], ["#0000ff"])
        assert restored.index == 1
        assert restored.can_redo

    @pytest.mark.integration
    def test_expired(self, temp_dir):
        """Test sessions older than max_age are ignored."""
        path = temp_dir / "session.json"
        save_session(history.initial([["#ff0000"]]), path, now=1000)
        assert load_session(path, max_age=3600, now=1000 + 3601) is None
        assert load_session(path, max_age=3600, now=1000 + 3600) is not None

    @pytest.mark.integration
    def test_missing(self, temp_dir):
        """Test no session file gives None."""
        assert load_session(temp_dir / "session.json") is None

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "data",
        [
            "garbage",
            {"entries": [["#ff0000"]], "index": 5, "saved_at": 1000},
            {"entries": [["red"]], "index": 0, "saved_at": 1000},
            {"entries": "nope", "index": 0, "saved_at": 1000},
            {"entries": [["#ff0000"]], "index": 0},
            {"entries": [["#ff0000"]], "index": -1, "saved_at": 1000},
        ],
    )
    def test_invalid_sessions_discarded(self, temp_dir, data):
        """Test structurally invalid sessions load as None."""
        path = temp_dir / "session.json"
        path.write_text(json.dumps(data))
        assert load_session(path, now=1000) is None

    @pytest.mark.integration
    def test_empty_history(self, temp_dir):
        """Test an empty history survives the round trip."""
        path = temp_dir / "session.json"
        save_session(history.empty(), path, now=5)
        assert load_session(path, now=5) == history.empty()
