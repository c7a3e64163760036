"""
Database module for the scrape state.
Provides a SQLite-backed key-value store with change notification.
"""

import json
import logging
import sqlite3
from collections.abc import Callable, Iterable
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any

from linkedin_leads import config

logger = logging.getLogger(__name__)

StateListener = Callable[[dict[str, tuple[Any, Any]]], None]

_listeners: list[StateListener] = []


@contextmanager
def _get_db():
    """Get database connection with proper cleanup."""
    db_path = Path(config.STATE_DB)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row  # Enable dict-like access
    try:
        _init_db(conn)
        yield conn
    finally:
        conn.close()


def _init_db(conn: sqlite3.Connection):
    """Initialize database schema."""
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS state (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            timestamp TEXT NOT NULL
        )
    """
    )
    conn.commit()


def get_state(keys: Iterable[str]) -> dict[str, Any]:
    """Get stored values for the given keys. Keys never set are left out."""
    keys = [str(key) for key in keys]
    if not keys:
        return {}
    with _get_db() as conn:
        placeholders = ", ".join("?" for _ in keys)
        rows = conn.execute(
            f"SELECT key, value FROM state WHERE key IN ({placeholders})", keys
        ).fetchall()
        return {row["key"]: json.loads(row["value"]) for row in rows}


def set_state(values: dict[str, Any], timestamp: str | None = None):
    """Store values and notify listeners about the keys whose value changed."""
    if timestamp is None:
        timestamp = datetime.now().isoformat()

    values = {str(key): value for key, value in values.items()}
    previous = get_state(values)

    with _get_db() as conn:
        conn.executemany(
            "INSERT OR REPLACE INTO state (key, value, timestamp) VALUES (?, ?, ?)",
            [(key, json.dumps(value), timestamp) for key, value in values.items()],
        )
        conn.commit()

    changes = {
        key: (previous.get(key), value)
        for key, value in values.items()
        if key not in previous or previous[key] != value
    }
    if changes:
        _notify(changes)


def clear_state():
    """Remove every stored key."""
    with _get_db() as conn:
        conn.execute("DELETE FROM state")
        conn.commit()


def on_state_changed(listener: StateListener):
    """Register a callback receiving {key: (old_value, new_value)} on every change."""
    _listeners.append(listener)


def remove_state_listener(listener: StateListener):
    if listener in _listeners:
        _listeners.remove(listener)


def _notify(changes: dict[str, tuple[Any, Any]]):
    for listener in list(_listeners):
        try:
            listener(changes)
        except Exception:
            logger.exception("State listener failed")
