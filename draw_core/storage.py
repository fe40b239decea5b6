# draw_core/storage.py
"""
Roster persistence. A store exposes `load() -> list[str]` and `save(list[str])`.

Writes are fire-and-forget: a failed save is logged and the in-memory roster
stays authoritative for the rest of the session.
"""
from __future__ import annotations
import json
import logging
import os
from typing import List, Optional, Protocol, Sequence

from .constants import STORAGE_KEY

logger = logging.getLogger(__name__)


class RosterStore(Protocol):
    def load(self) -> List[str]: ...

    def save(self, names: Sequence[str]) -> None: ...


def _coerce_names(value) -> List[str]:
    """Stored value -> list of names; anything malformed becomes []."""
    if not isinstance(value, list):
        return []
    if any(not isinstance(v, str) for v in value):
        return []
    return list(value)


class MemoryRosterStore:
    """Session-only store; nothing survives a restart."""

    def __init__(self, names: Optional[Sequence[str]] = None):
        self.names: List[str] = list(names or [])
        self.writes = 0

    def load(self) -> List[str]:
        return list(self.names)

    def save(self, names: Sequence[str]) -> None:
        self.names = list(names)
        self.writes += 1


class JsonFileRosterStore:
    """
    Key/value slot in a JSON file: {"teamMembers": ["Alice", "Bob"]}.
    Other keys in the file are preserved on save.
    """

    def __init__(self, path: str, key: str = STORAGE_KEY):
        self.path = path
        self.key = key

    def _read_all(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read roster storage %s: %s", self.path, e)
            return {}
        return obj if isinstance(obj, dict) else {}

    def load(self) -> List[str]:
        return _coerce_names(self._read_all().get(self.key))

    def save(self, names: Sequence[str]) -> None:
        data = self._read_all()
        data[self.key] = list(names)
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error("Failed to persist roster to %s: %s", self.path, e)
