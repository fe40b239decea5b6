# draw_core/validation.py
from __future__ import annotations
from typing import Dict, List, Sequence

import numpy as np

from .assignment import fisher_yates, randomize

# chi-square critical values at p = 0.001, indexed by degrees of freedom
CHI2_CRITICAL_001 = {
    1: 10.828, 2: 13.816, 3: 16.266, 4: 18.467, 5: 20.515,
    6: 22.458, 7: 24.322, 8: 26.124, 9: 27.877, 10: 29.588,
    11: 31.264, 12: 32.909, 13: 34.528, 14: 36.123, 15: 37.697,
    16: 39.252, 17: 40.790, 18: 42.312, 19: 43.820,
}


def chi_square_uniform(counts: Sequence[int]) -> float:
    """Goodness-of-fit statistic of observed counts against a uniform expectation."""
    obs = np.asarray(counts, dtype=float)
    if obs.size == 0 or obs.sum() == 0:
        return 0.0
    expected = obs.sum() / obs.size
    return float(((obs - expected) ** 2 / expected).sum())


def draw_counts(catalog: List[str], trials: int, rng: np.random.Generator) -> Dict[str, int]:
    """Single-player draws repeated `trials` times; returns hits per entry."""
    counts = {c: 0 for c in catalog}
    for _ in range(trials):
        pick = randomize(["solo"], catalog, rng)["solo"]
        counts[pick] += 1
    return counts


def is_uniform(counts: Sequence[int]) -> bool:
    dof = len(counts) - 1
    if dof < 1:
        return True
    critical = CHI2_CRITICAL_001.get(dof)
    if critical is None:
        raise ValueError(f"No critical value tabulated for {dof} degrees of freedom")
    return chi_square_uniform(counts) <= critical


def run_self_test(seed: int | None = None, trials: int = 4000):
    """
    Run a basic suite of self-tests.
    """
    rng = np.random.default_rng(seed)
    results = {"tests": []}

    items = [f"C{i}" for i in range(8)]
    perm = fisher_yates(items, rng)
    results["tests"].append(("Shuffle is a permutation", sorted(perm) == sorted(items)))

    wrap = randomize(["A", "B", "C"], ["X", "Y"], rng)
    results["tests"].append(("Wraparound covers every player", set(wrap) == {"A", "B", "C"}))
    results["tests"].append(("Wraparound reuses an entry", len(set(wrap.values())) < 3))

    catalog = [f"C{i}" for i in range(10)]
    counts = draw_counts(catalog, trials, rng)
    stat = chi_square_uniform(list(counts.values()))
    results["tests"].append(
        (f"Uniform draws (chi2={stat:.2f}, df={len(catalog) - 1})", is_uniform(list(counts.values())))
    )
    return results
