from abc import ABC, abstractmethod
from typing import Dict, Generic, Mapping, Optional

from oiddb._types import K, V


class AbstractTable(ABC, Generic[K, V]):
    """Abstract base class for first-wins table implementations."""

    @abstractmethod
    def add(self, key: K, value: V) -> bool:
        """Insert `key` only if it is absent. Return True if it was inserted."""

    @abstractmethod
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[K, V]:
        pass

    @abstractmethod
    def update(self, data: Mapping[K, V]) -> None:
        """Bulk-load entries, keeping any value already present."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass
