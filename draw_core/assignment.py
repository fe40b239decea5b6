# draw_core/assignment.py
from __future__ import annotations
import logging
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np

from .errors import EmptyCatalogError, EmptyRosterError

logger = logging.getLogger(__name__)

Catalog = Union[Sequence[str], AbstractSet[str]]


def materialize_catalog(catalog: Iterable[str]) -> List[str]:
    """Sets have no order of their own, so sort them; sequences keep load order."""
    if isinstance(catalog, (set, frozenset)):
        return sorted(catalog)
    return list(catalog)


def fisher_yates(items: Sequence[str], rng: np.random.Generator) -> List[str]:
    """
    Uniform random permutation of a copy of `items`:
    for i = n-1 .. 1, swap i with j drawn from [0, i].
    """
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def randomize(
    roster: Sequence[str],
    catalog: Catalog,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, str]:
    """
    Return {member -> catalog entry}. Member k gets shuffled[k % len(catalog)],
    so entries are reused when the roster outgrows the catalog.
    """
    if not roster:
        raise EmptyRosterError()
    entries = materialize_catalog(catalog)
    if not entries:
        raise EmptyCatalogError()

    if rng is None:
        rng = np.random.default_rng()
    shuffled = fisher_yates(entries, rng)

    assignment: Dict[str, str] = {}
    for k, member in enumerate(roster):
        assignment[member] = shuffled[k % len(shuffled)]

    logger.debug("Drew %d champions from a catalog of %d", len(assignment), len(entries))
    return assignment
