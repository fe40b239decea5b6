# draw_core/session.py
"""
DrawSession ties the roster, the catalog and the current draw together and
turns raised DrawErrors into ActionResults plus a single error message.

Catalog loading is a small state machine: Idle -> Loading -> Ready | Error.
Each begin_load() bumps a generation counter; results for an older
generation are dropped.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional

import numpy as np

from .assignment import randomize
from .constants import ERROR, IDLE, LOADING, MAX_ROSTER, READY
from .errors import DrawError, NetworkError
from .models import ActionResult
from .roster import RosterManager
from .storage import RosterStore

logger = logging.getLogger(__name__)


class DrawSession:
    def __init__(self, store: RosterStore, max_roster: int = MAX_ROSTER,
                 rng: Optional[np.random.Generator] = None):
        self.roster_manager = RosterManager(store, max_size=max_roster)
        self.rng = rng
        self.catalog: List[str] = []
        self.assignment: Dict[str, str] = {}
        self.error_message: Optional[str] = None
        self.load_state: str = IDLE
        self.generation: int = 0

    # ---- read-only views ----
    @property
    def roster(self) -> List[str]:
        return list(self.roster_manager.members)

    @property
    def name_buffer(self) -> str:
        return self.roster_manager.name_buffer

    @name_buffer.setter
    def name_buffer(self, value: str):
        self.roster_manager.name_buffer = value or ""

    @property
    def can_add(self) -> bool:
        return self.roster_manager.can_add

    @property
    def can_randomize(self) -> bool:
        return bool(self.roster_manager.members)

    # ---- outcome bookkeeping ----
    def _ok(self) -> ActionResult:
        self.error_message = None
        return ActionResult(ok=True)

    def _fail(self, err: DrawError) -> ActionResult:
        self.error_message = err.message
        return ActionResult(ok=False, error=err.message)

    # ---- roster intents ----
    def add_member(self, name: Optional[str] = None) -> ActionResult:
        candidate = self.name_buffer if name is None else name
        try:
            self.roster_manager.add_member(candidate)
        except DrawError as e:
            logger.info("Add rejected for %r: %s", candidate, type(e).__name__)
            return self._fail(e)
        return self._ok()

    def submit_name(self, text: str) -> ActionResult:
        """Form submit: the typed text becomes the buffer and is added in one step."""
        self.name_buffer = text
        return self.add_member()

    def remove_member(self, name: str) -> ActionResult:
        self.roster_manager.remove_member(name, self.assignment)
        return self._ok()

    # ---- draw ----
    def randomize(self) -> ActionResult:
        try:
            drawn = randomize(self.roster_manager.members, self.catalog, self.rng)
        except DrawError as e:
            logger.info("Draw rejected: %s", type(e).__name__)
            return self._fail(e)
        self.assignment = drawn
        logger.info("Drew champions for %d players", len(drawn))
        return self._ok()

    # ---- catalog loading ----
    def begin_load(self) -> int:
        self.generation += 1
        self.load_state = LOADING
        return self.generation

    def _is_stale(self, token: int) -> bool:
        if token != self.generation:
            logger.warning("Discarding stale catalog result (generation %d, current %d)",
                           token, self.generation)
            return True
        return False

    def complete_load(self, token: int, entries) -> ActionResult:
        if self._is_stale(token):
            return ActionResult(ok=False, error="stale")
        self.catalog = list(entries)
        self.load_state = READY
        return self._ok()

    def fail_load(self, token: int, error: DrawError) -> ActionResult:
        if self._is_stale(token):
            return ActionResult(ok=False, error="stale")
        self.catalog = []
        self.load_state = ERROR
        return self._fail(error)

    def load_catalog(self, loader) -> ActionResult:
        token = self.begin_load()
        try:
            entries = loader.load()
        except NetworkError as e:
            return self.fail_load(token, e)
        return self.complete_load(token, entries)
