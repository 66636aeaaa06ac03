"""JSON-file persistence for saved palettes and the undo history session.

Anything unreadable is discarded with a warning and treated as empty, so a
corrupt file never stops the editor from starting.
"""

import json
import logging
import os
import secrets
import time
from collections import namedtuple
from datetime import datetime, timezone
from pathlib import Path

from . import config, history
from .color import is_valid_hex

logger = logging.getLogger(__name__)

PALETTES_FILENAME = "palettes.json"
SESSION_FILENAME = "session.json"

SavedPalette = namedtuple("SavedPalette", ["id", "name", "colors", "saved_at"])


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


def _read_json(path):
    """Parsed JSON, or None if the file is missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Discarding unreadable %s: %s", path, e)
        return None


class PaletteStore:
    """Saved palettes kept as a JSON list in one file."""

    def __init__(self, path=None):
        self.path = Path(path) if path else config.data_dir() / PALETTES_FILENAME

    def _read(self):
        data = _read_json(self.path)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Discarding saved palettes in %s: expected a list", self.path)
            return []

        palettes = []
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("colors"), list):
                logger.warning("Skipping malformed saved palette in %s", self.path)
                continue
            palettes.append(
                SavedPalette(
                    str(item.get("id", "")),
                    str(item.get("name", "")),
                    list(item["colors"]),
                    str(item.get("saved_at", "")),
                )
            )
        return palettes

    def _write(self, palettes):
        _write_json(self.path, [p._asdict() for p in palettes])

    def list(self):
        return self._read()

    def save(self, colors, name=None):
        now = datetime.now(timezone.utc)
        saved = SavedPalette(
            id=f"{int(now.timestamp() * 1000):x}-{secrets.token_hex(3)}",
            name=name or f"Palette {now.astimezone():%Y-%m-%d %H:%M}",
            colors=list(colors),
            saved_at=now.isoformat(),
        )
        palettes = self._read()
        palettes.append(saved)
        self._write(palettes)
        logger.debug("Saved palette %s (%d colors)", saved.id, len(saved.colors))
        return saved

    def remove(self, palette_id):
        palettes = [p for p in self._read() if p.id != palette_id]
        self._write(palettes)

    def get(self, palette_id):
        for palette in self._read():
            if palette.id == palette_id:
                return palette
        return None


def session_path():
    return config.data_dir() / SESSION_FILENAME


def save_session(state, path=None, now=None):
    """Persist a palette HistoryState with a timestamp."""
    path = Path(path) if path else session_path()
    _write_json(
        path,
        {
            "entries": [list(entry) for entry in state.entries],
            "index": state.index,
            "saved_at": time.time() if now is None else now,
        },
    )


def _valid_session(data):
    if not isinstance(data, dict):
        return False
    entries = data.get("entries")
    index = data.get("index")
    if not isinstance(entries, list) or not isinstance(index, int) or isinstance(index, bool):
        return False
    if not isinstance(data.get("saved_at"), (int, float)):
        return False
    for entry in entries:
        if not isinstance(entry, list) or not all(is_valid_hex(c) for c in entry):
            return False
    return -1 <= index <= len(entries) - 1 and (index >= 0 or not entries)


def load_session(path=None, max_age=config.SESSION_MAX_AGE, now=None):
    """Restore a saved HistoryState.

    Returns:
        HistoryState, or None when there is no session, it has expired, or it
        does not hold valid palette snapshots
    """
    path = Path(path) if path else session_path()
    data = _read_json(path)
    if data is None:
        return None
    if not _valid_session(data):
        logger.warning("Discarding invalid session in %s", path)
        return None

    now = time.time() if now is None else now
    if now - data["saved_at"] > max_age:
        logger.debug("Session in %s expired", path)
        return None

    return history.initial(data["entries"], data["index"])
