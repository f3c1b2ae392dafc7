import logging
import pickle
from threading import RLock

import pytest

from oiddb import DuplicatePolicy, OIDRegistry, create_registry, get_instance
from oiddb.core.registry import logger


def test_minimal_init() -> None:
    r = OIDRegistry()
    assert len(r) == 0
    assert r.registered_set_names == frozenset()
    assert r.snapshot() == {
        "oid_to_name": {},
        "name_to_oid": {},
        "short_to_name": {},
        "name_to_short": {},
        "alias_to_name": {},
        "registered_set_names": [],
    }
    assert r.to_json().startswith("{")


def test_init_with_lock() -> None:
    lock = RLock()
    r = OIDRegistry(lock=lock)
    assert r._lock is lock


def test_init_with_log_level() -> None:
    r = OIDRegistry(log_level=logging.DEBUG)
    assert r is not None
    assert logger.getEffectiveLevel() == logging.DEBUG
    OIDRegistry()
    assert logger.getEffectiveLevel() == logging.WARNING


def test_init_with_duplicate_policy() -> None:
    r = OIDRegistry(duplicate_policy=1)
    assert r._duplicate_policy is DuplicatePolicy.WARN


def test_init_with_invalid_duplicate_policy() -> None:
    with pytest.raises(ValueError):
        OIDRegistry(duplicate_policy=7)


def test_init_with_invalid_log_level() -> None:
    with pytest.raises(ValueError):
        OIDRegistry(log_level=-1)


def test_init_with_invalid_lock() -> None:
    with pytest.raises(TypeError):
        OIDRegistry(lock="not_a_lock")  # type: ignore


def test_init_with_non_callable_listener() -> None:
    with pytest.raises(TypeError):
        OIDRegistry(on_duplicate="print")  # type: ignore


def test_get_instance_is_shared() -> None:
    OIDRegistry.reset_instance()
    first = OIDRegistry.get_instance()
    assert get_instance() is first
    assert OIDRegistry.get_instance() is first
    assert len(first) == 0


def test_get_instance_accumulates_state() -> None:
    OIDRegistry.reset_instance()
    get_instance().register({"set_name": "a", "name_to_oid": {"x": "1.1"}})
    assert get_instance().name_to_oid("x") == "1.1"
    assert get_instance().is_registered("a")


def test_reset_instance_creates_new_registry() -> None:
    old = get_instance()
    old.register({"set_name": "b", "name_to_oid": {"y": "1.2"}})
    OIDRegistry.reset_instance()
    new = get_instance()
    assert new is not old
    assert new.name_to_oid("y") is None
    # registries handed out earlier keep their tables
    assert old.name_to_oid("y") == "1.2"


def test_create_registry_is_independent_of_shared_instance() -> None:
    OIDRegistry.reset_instance()
    r = create_registry()
    assert r is not get_instance()
    assert r.is_registered("crypto")
    assert r.is_registered("x509")
    assert not get_instance().is_registered("crypto")


def test_create_registry_without_builtin_sets() -> None:
    r = create_registry({"set_name": "mine", "name_to_oid": {"z": "1.3"}}, builtin=False)
    assert r.registered_set_names == frozenset({"mine"})


def test_reset_empties_registry() -> None:
    r = create_registry()
    assert len(r) > 0
    r.reset()
    assert len(r) == 0
    assert r.registered_set_names == frozenset()
    assert r.oid_to_name("2.5.4.3", strict=True) is None
    # a previously merged set name can be registered again after reset
    r.register({"set_name": "x509", "name_to_oid": {"commonName": "2.5.4.3"}})
    assert r.oid_to_name("2.5.4.3") == "commonName"


def test_pickle_round_trip_keeps_tables() -> None:
    r = create_registry(duplicate_policy=DuplicatePolicy.WARN)
    restored = pickle.loads(pickle.dumps(r))
    assert restored.snapshot() == r.snapshot()
    assert restored._duplicate_policy is DuplicatePolicy.WARN
    assert restored._lock is not r._lock
    assert restored.short_to_oid("CN") == "2.5.4.3"


def test_repr_lists_registered_sets() -> None:
    r = create_registry()
    assert repr(r).startswith("OIDRegistry(sets=['crypto', 'x509']")
