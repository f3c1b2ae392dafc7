from typing import Dict, Generic, Mapping, Optional

from oiddb._storage.base import AbstractTable
from oiddb._types import K, V


class MemoryTable(AbstractTable[K, V], Generic[K, V]):
    """A simple in-memory first-wins table backed by a dictionary."""

    def __init__(self) -> None:
        self._store: Dict[K, V] = {}

    def add(self, key: K, value: V) -> bool:
        if key in self._store:
            return False
        self._store[key] = value
        return True

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._store.get(key, default)

    def clear(self) -> None:
        self._store.clear()

    def to_dict(self) -> Dict[K, V]:
        return dict(self._store)

    def update(self, data: Mapping[K, V]) -> None:
        for k, v in data.items():
            self._store.setdefault(k, v)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
