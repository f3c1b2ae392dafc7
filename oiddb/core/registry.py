import json
import logging
import threading
from threading import RLock
from typing import (
    Any,
    ClassVar,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Set,
    Union,
)

from oiddb._storage import TableProtocol
from oiddb._types import DataSetMapping
from oiddb.core.data_set import DataSet
from oiddb.core.events import (
    DuplicateCallback,
    DuplicateEvent,
    DuplicateKind,
    DuplicatePolicy,
)
from oiddb.core.utils import _make_default_table, is_lock_like, locked_method

logger = logging.getLogger(__name__)

DataSetLike = Union[DataSet, DataSetMapping]

_TABLE_NAMES = (
    "oid_to_name",
    "name_to_oid",
    "short_to_name",
    "name_to_short",
    "alias_to_name",
)


class OIDRegistry:
    """
    Thread-safe lookup registry between OIDs, canonical names, short
    attribute names and aliases.

    Data sets are merged with `register`; every table is first-wins, so an
    entry registered earlier is never replaced by a later one, and a data
    set whose name was already merged is skipped entirely. Lookups never
    raise: an unknown identifier is either echoed back or reported as None,
    depending on the lookup (see each method).

    A registry can be constructed and passed around explicitly, or the
    process-wide instance can be shared through `get_instance()`.

    Arguments:
        lock: Optional lock object to use for synchronization. If None,
            a new RLock is created.

    Examples:
        >>> registry = OIDRegistry()
        >>> registry.register([DataSet("dn", {"commonName": "2.5.4.3"},
        ...                            {"CN": "commonName"})])
        >>> registry.oid_to_short("2.5.4.3")
        'CN'
        >>> registry.oid_to_name("1.2.3.4")
        '1.2.3.4'
        >>> registry.oid_to_name("1.2.3.4", strict=True) is None
        True
    """

    _instance: ClassVar[Optional["OIDRegistry"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        *,
        lock: Optional[RLock] = None,
        log_level: int = logging.WARNING,
        duplicate_policy: int = DuplicatePolicy.IGNORE,
        on_duplicate: Optional[DuplicateCallback] = None,
    ) -> None:
        """
        Initialize an empty registry.

        Args:
            lock: An optional threading.RLock or similar object for thread safety.
            log_level: Logging level for the registry logger.
            duplicate_policy: What to do with entries dropped by the
                first-wins rule:
                0 - Drop silently (default)
                1 - Drop and log a warning
            on_duplicate: Optional callable receiving a DuplicateEvent for
                every dropped entry and every skipped data set.

        Raises:
            TypeError: If the provided lock does not implement the lock
                methods, or `on_duplicate` is not callable.
            ValueError: If log_level is not a valid logging level or
                duplicate_policy is unknown.

        Example:
            registry = OIDRegistry(log_level=logging.DEBUG, duplicate_policy=1)
        """
        if lock is not None and not is_lock_like(lock):
            raise TypeError("lock must be a threading.RLock or similar object")

        if not (50 >= log_level >= 0):
            raise ValueError("log_level must be a valid logging level between 0 and 50")

        if on_duplicate is not None and not callable(on_duplicate):
            raise TypeError("on_duplicate must be callable")

        self._lock: RLock = lock or RLock()
        self._duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._on_duplicate = on_duplicate
        self._oid_to_name: TableProtocol[str, str] = _make_default_table()
        self._name_to_oid: TableProtocol[str, str] = _make_default_table()
        self._short_to_name: TableProtocol[str, str] = _make_default_table()
        self._name_to_short: TableProtocol[str, str] = _make_default_table()
        self._alias_to_name: TableProtocol[str, str] = _make_default_table()
        self._set_names: Set[str] = set()
        logger.setLevel(log_level)

    @classmethod
    def get_instance(cls) -> "OIDRegistry":
        """
        Return the process-wide registry, creating it empty on first call.
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                logger.debug("Created shared %s", cls.__name__)
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """
        Forget the process-wide registry; the next get_instance() creates a
        new, empty one. Registries already handed out are left untouched.
        """
        with cls._instance_lock:
            cls._instance = None

    def register(self, data_sets: Union[DataSetLike, Iterable[DataSetLike]]) -> None:
        """
        Merge data sets into the registry, in order.

        A data set whose name was already merged is skipped. Within a data
        set, entries whose key already exists in the target table are
        dropped; existing values are never overwritten.

        Args:
            data_sets: A sequence of DataSet objects or plain mappings
                accepted by DataSet.from_dict. A single DataSet or mapping
                is also accepted.

        Raises:
            InvalidDataSetError: If a mapping cannot be converted to a
                DataSet. Nothing is merged in that case.
        """
        if isinstance(data_sets, (DataSet, Mapping)):
            data_sets = [data_sets]
        resolved: List[DataSet] = [
            ds if isinstance(ds, DataSet) else DataSet.from_dict(ds)
            for ds in data_sets
        ]
        with self._lock:
            for data_set in resolved:
                self._merge(data_set)

    def _merge(self, data_set: DataSet) -> None:
        set_name = data_set.set_name
        if set_name in self._set_names:
            logger.debug("Data set %r already registered, skipping", set_name)
            self._report(DuplicateEvent(DuplicateKind.DATA_SET, set_name, set_name))
            return

        added = 0
        for name, oid in data_set.oid_entries():
            if not self._name_to_oid.add(name, oid):
                self._dropped(
                    DuplicateKind.NAME, set_name, name, oid, self._name_to_oid
                )
                continue
            added += 1
            if not self._oid_to_name.add(oid, name):
                self._dropped(
                    DuplicateKind.OID, set_name, oid, name, self._oid_to_name
                )

        for short, name in data_set.short_entries():
            if not self._short_to_name.add(short, name):
                self._dropped(
                    DuplicateKind.SHORT, set_name, short, name, self._short_to_name
                )
                continue
            if not self._name_to_short.add(name, short):
                self._dropped(
                    DuplicateKind.NAME_SHORT,
                    set_name,
                    name,
                    short,
                    self._name_to_short,
                )

        for alias, name in data_set.alias_entries():
            if not self._alias_to_name.add(alias, name):
                self._dropped(
                    DuplicateKind.ALIAS, set_name, alias, name, self._alias_to_name
                )

        self._set_names.add(set_name)
        logger.debug(
            "Registered data set %r: %d of %d names, %d shorts, %d aliases",
            set_name,
            added,
            len(data_set.name_to_oid),
            len(data_set.short_to_name),
            len(data_set.alias_to_name),
        )

    def _dropped(
        self,
        kind: DuplicateKind,
        set_name: str,
        key: str,
        value: str,
        table: TableProtocol[str, str],
    ) -> None:
        self._report(DuplicateEvent(kind, set_name, key, value, table.get(key)))

    def _report(self, event: DuplicateEvent) -> None:
        if (
            self._duplicate_policy == DuplicatePolicy.WARN
            and event.kind is not DuplicateKind.DATA_SET
        ):
            logger.warning(
                "Dropped duplicate %s %r -> %r from data set %r (kept %r)",
                event.kind.value,
                event.key,
                event.value,
                event.set_name,
                event.existing,
            )
        if self._on_duplicate is None:
            return
        try:
            self._on_duplicate(event)
        except Exception:
            # a faulty listener must not change what was registered
            logger.exception("on_duplicate callback failed for %r", event)

    @locked_method
    def oid_to_name(self, oid: str, strict: bool = False) -> Optional[str]:
        """
        Return the canonical name for `oid`.

        Unknown OIDs are returned unchanged, or as None when `strict` is set.
        """
        return self._fallback(self._oid_to_name.get(oid), oid, strict)

    @locked_method
    def name_to_oid(self, name: str) -> Optional[str]:
        """
        Return the OID for a canonical name or an alias, or None if unknown.
        """
        resolved = self._alias_to_name.get(name, name)
        return self._name_to_oid.get(resolved)

    @locked_method
    def short_to_name(self, short: str, strict: bool = False) -> Optional[str]:
        """
        Return the canonical name for a short attribute name such as "CN".

        Unknown short names are returned unchanged, or as None when
        `strict` is set.
        """
        return self._fallback(self._short_to_name.get(short), short, strict)

    @locked_method
    def name_to_short(self, name: str, strict: bool = False) -> Optional[str]:
        """
        Return the short attribute name for a canonical name.

        A name without a short form is returned unchanged, or as None when
        `strict` is set.
        """
        return self._fallback(self._name_to_short.get(name), name, strict)

    @locked_method
    def oid_to_short(self, oid: str, strict: bool = False) -> Optional[str]:
        """
        Return the short attribute name for `oid`.

        An unknown OID is returned unchanged; a known OID whose name has no
        short form yields the canonical name. With `strict` set either miss
        yields None.
        """
        name = self._oid_to_name.get(oid)
        if name is None:
            return self._fallback(None, oid, strict)
        return self._fallback(self._name_to_short.get(name), name, strict)

    @locked_method
    def short_to_oid(self, short: str) -> Optional[str]:
        """
        Return the OID for a short attribute name, or None if either the
        short name or its canonical name is unknown.
        """
        name = self._short_to_name.get(short)
        if name is None:
            return None
        return self._name_to_oid.get(name)

    @locked_method
    def alias_to_name(self, alias: str) -> Optional[str]:
        """
        Return the canonical name an alias points to, or None.
        """
        return self._alias_to_name.get(alias)

    @staticmethod
    def _fallback(value: Optional[str], default: str, strict: bool) -> Optional[str]:
        if value is not None or strict:
            return value
        return default

    @property
    @locked_method
    def registered_set_names(self) -> frozenset:
        return frozenset(self._set_names)

    @locked_method
    def is_registered(self, set_name: str) -> bool:
        return set_name in self._set_names

    @locked_method
    def reset(self) -> None:
        """
        Empty every table and forget all registered data sets.
        """
        for table in self._tables().values():
            table.clear()
        self._set_names.clear()
        logger.debug("Registry reset")

    @locked_method
    def snapshot(self) -> Dict[str, Any]:
        """
        Return a copy of every table plus the sorted registered set names.
        """
        out: Dict[str, Any] = {
            name: table.to_dict() for name, table in self._tables().items()
        }
        out["registered_set_names"] = sorted(self._set_names)
        return out

    def to_json(self, **kwargs: Any) -> str:
        """
        Serialize the registry snapshot to a JSON string.
        """
        return json.dumps(self.snapshot(), **kwargs)

    def _tables(self) -> Dict[str, TableProtocol[str, str]]:
        return {name: getattr(self, f"_{name}") for name in _TABLE_NAMES}

    @locked_method
    def __len__(self) -> int:
        return len(self._name_to_oid)

    @locked_method
    def __contains__(self, identifier: object) -> bool:
        return (
            identifier in self._oid_to_name
            or identifier in self._name_to_oid
            or identifier in self._short_to_name
            or identifier in self._alias_to_name
        )

    @locked_method
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"sets={sorted(self._set_names)!r}, names={len(self._name_to_oid)})"
        )

    def __getstate__(self) -> Dict[str, Any]:
        # the lock and on_duplicate listener are not carried across pickling
        state = self.snapshot()
        state["duplicate_policy"] = int(self._duplicate_policy)
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._lock = RLock()
        self._duplicate_policy = DuplicatePolicy(state.get("duplicate_policy", 0))
        self._on_duplicate = None
        for name in _TABLE_NAMES:
            table = _make_default_table()
            table.update(state.get(name, {}))
            setattr(self, f"_{name}", table)
        self._set_names = set(state.get("registered_set_names", []))
