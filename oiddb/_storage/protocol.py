from typing import (
    Dict,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)

from oiddb._types import K, V


@runtime_checkable
class TableProtocol(Protocol[K, V]):
    """Minimal protocol describing one string table used by OIDRegistry.

    Tables are insert-only from the registry's point of view: `add` never
    replaces an existing value. Only the members `oiddb.core.OIDRegistry`
    uses are listed here so the protocol stays small and permissive.
    """

    def add(self, key: K, value: V) -> bool:  # pragma: no cover - interface
        ...

    def get(
        self, key: K, default: Optional[V] = None
    ) -> Optional[V]:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...

    def to_dict(self) -> Dict[K, V]:  # pragma: no cover - interface
        ...

    def update(self, data: Mapping[K, V]) -> None:  # pragma: no cover - interface
        ...

    def __len__(self) -> int:  # pragma: no cover - interface
        ...

    def __contains__(self, key: object) -> bool:  # pragma: no cover - interface
        ...
