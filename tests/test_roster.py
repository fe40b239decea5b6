import pytest
from draw_core.roster import RosterManager
from draw_core.storage import MemoryRosterStore
from draw_core.errors import DuplicateNameError, EmptyNameError, RosterFullError

def _manager(names=None):
    return RosterManager(MemoryRosterStore(names))

def test_adds_keep_insertion_order():
    m = _manager()
    for n in ["Alice", "Bob", "Cara", "Dan", "Eve"]:
        m.add_member(n)
    assert m.members == ["Alice", "Bob", "Cara", "Dan", "Eve"]

def test_add_trims_and_clears_buffer():
    m = _manager()
    m.name_buffer = "  Alice "
    m.add_member(m.name_buffer)
    assert m.members == ["Alice"]
    assert m.name_buffer == ""

def test_add_persists_full_roster():
    store = MemoryRosterStore()
    m = RosterManager(store)
    m.add_member("Alice")
    m.add_member("Bob")
    assert store.names == ["Alice", "Bob"]
    assert store.writes == 2

def test_sixth_name_is_rejected():
    m = _manager(["A", "B", "C", "D", "E"])
    with pytest.raises(RosterFullError):
        m.add_member("F")
    assert len(m.members) == 5

def test_duplicate_is_rejected_and_case_sensitive():
    m = _manager(["Alice"])
    with pytest.raises(DuplicateNameError):
        m.add_member(" Alice ")
    assert m.members == ["Alice"]
    m.add_member("alice")
    assert m.members == ["Alice", "alice"]

def test_blank_name_is_rejected():
    m = _manager()
    with pytest.raises(EmptyNameError):
        m.add_member("   ")
    assert m.members == []

def test_full_wins_over_duplicate():
    m = _manager(["A", "B", "C", "D", "E"])
    with pytest.raises(RosterFullError):
        m.add_member("A")

def test_failed_add_keeps_buffer():
    m = _manager(["Alice"])
    m.name_buffer = "Alice"
    with pytest.raises(DuplicateNameError):
        m.add_member(m.name_buffer)
    assert m.name_buffer == "Alice"

def test_remove_absent_is_noop():
    m = _manager(["Alice"])
    m.remove_member("Zed")
    assert m.members == ["Alice"]

def test_remove_drops_assignment_entry():
    store = MemoryRosterStore(["Alice", "Bob"])
    m = RosterManager(store)
    assignment = {"Alice": "Ahri", "Bob": "Zed"}
    m.remove_member("Alice", assignment)
    assert m.members == ["Bob"]
    assert assignment == {"Bob": "Zed"}
    assert store.names == ["Bob"]

def test_can_add():
    m = _manager(["A", "B", "C", "D"])
    assert not m.can_add
    m.name_buffer = "E"
    assert m.can_add
    m.add_member("E")
    m.name_buffer = "F"
    assert not m.can_add

def test_seed_is_normalized():
    m = _manager(["A", " A ", "", "B", "C", "D", "E", "F"])
    assert m.members == ["A", "B", "C", "D", "E"]

class _BrokenStore(MemoryRosterStore):
    def save(self, names):
        raise OSError("disk full")

def test_store_failure_is_not_surfaced():
    m = RosterManager(_BrokenStore())
    m.add_member("Alice")
    assert m.members == ["Alice"]
