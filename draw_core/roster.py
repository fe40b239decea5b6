# draw_core/roster.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from .constants import MAX_ROSTER
from .errors import DuplicateNameError, EmptyNameError, RosterFullError
from .storage import RosterStore

logger = logging.getLogger(__name__)


def _normalize_seed(names, max_size: int) -> List[str]:
    """Drop blank/duplicate entries from persisted data and cap at max_size."""
    out: List[str] = []
    for n in names:
        if not isinstance(n, str):
            continue
        n = n.strip()
        if not n or n in out:
            continue
        out.append(n)
    return out[:max_size]


class RosterManager:
    """
    Ordered, unique list of participant names plus the text-input buffer.

    Validation order for adds is empty -> full -> duplicate; the first
    violated rule is reported.
    """

    def __init__(self, store: RosterStore, max_size: int = MAX_ROSTER):
        self.store = store
        self.max_size = max_size
        self.members: List[str] = _normalize_seed(store.load(), max_size)
        self.name_buffer: str = ""

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_size

    @property
    def can_add(self) -> bool:
        return not self.is_full and bool(self.name_buffer.strip())

    def add_member(self, candidate: str) -> None:
        name = (candidate or "").strip()
        if not name:
            raise EmptyNameError()
        if self.is_full:
            raise RosterFullError(
                f"Maximum number of players reached ({self.max_size} players)."
            )
        if name in self.members:
            raise DuplicateNameError()

        self.members.append(name)
        self.name_buffer = ""
        self._persist()
        logger.info("Added player %r (%d/%d)", name, len(self.members), self.max_size)

    def remove_member(self, name: str, assignment: Optional[Dict[str, str]] = None) -> None:
        if name in self.members:
            self.members.remove(name)
            logger.info("Removed player %r", name)
        self._persist()
        if assignment is not None:
            assignment.pop(name, None)

    def _persist(self):
        # write failures are never surfaced to the user
        try:
            self.store.save(list(self.members))
        except Exception as e:
            logger.error("Roster store write failed: %s", e)
