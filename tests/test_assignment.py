import numpy as np
import pytest
from draw_core.assignment import fisher_yates, materialize_catalog, randomize
from draw_core.errors import EmptyCatalogError, EmptyRosterError
from draw_core.validation import chi_square_uniform, is_uniform

def test_shuffle_is_permutation_and_copy():
    items = ["a", "b", "c", "d", "e"]
    out = fisher_yates(items, np.random.default_rng(1))
    assert sorted(out) == sorted(items)
    assert items == ["a", "b", "c", "d", "e"]

def test_shuffle_single_and_empty():
    rng = np.random.default_rng(0)
    assert fisher_yates(["x"], rng) == ["x"]
    assert fisher_yates([], rng) == []

def test_materialize_sorts_sets_keeps_lists():
    assert materialize_catalog({"Zed", "Ahri", "Lux"}) == ["Ahri", "Lux", "Zed"]
    assert materialize_catalog(["Zed", "Ahri"]) == ["Zed", "Ahri"]

def test_wraparound_reuse():
    for seed in range(20):
        result = randomize(["A", "B", "C"], {"X", "Y"}, np.random.default_rng(seed))
        assert set(result) == {"A", "B", "C"}
        assert set(result.values()) <= {"X", "Y"}
        assert len(set(result.values())) < 3
        assert result["A"] == result["C"]

def test_distinct_when_catalog_is_large_enough():
    result = randomize(["A", "B", "C"], ["X", "Y", "Z", "W"], np.random.default_rng(3))
    assert len(set(result.values())) == 3

def test_empty_roster_fails_first():
    with pytest.raises(EmptyRosterError):
        randomize([], [])

def test_empty_catalog_fails():
    with pytest.raises(EmptyCatalogError):
        randomize(["A"], set())

def test_default_rng_is_used():
    result = randomize(["A"], ["X"])
    assert result == {"A": "X"}

def test_single_player_draw_is_uniform():
    rng = np.random.default_rng(20240601)
    catalog = [f"C{i}" for i in range(10)]
    counts = {c: 0 for c in catalog}
    for _ in range(5000):
        counts[randomize(["solo"], catalog, rng)["solo"]] += 1
    assert sum(counts.values()) == 5000
    assert is_uniform(list(counts.values()))

def test_chi_square_statistic():
    assert chi_square_uniform([10, 10, 10]) == 0.0
    assert chi_square_uniform([20, 0]) == pytest.approx(20.0)
    assert not is_uniform([100, 0, 0, 0])
