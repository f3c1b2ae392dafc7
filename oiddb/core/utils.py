import functools
from typing import TYPE_CHECKING, Any, Callable, cast

from oiddb._storage import MemoryTable, TableProtocol

if TYPE_CHECKING:
    from oiddb.core.registry import OIDRegistry

_LOCK_METHODS = ("__enter__", "__exit__", "acquire", "release")


def locked_method(method: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to lock method calls for thread safety."""

    @functools.wraps(method)
    def wrapper(self: "OIDRegistry", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def is_lock_like(lock: object) -> bool:
    return all(hasattr(lock, name) for name in _LOCK_METHODS)


def _make_default_table() -> TableProtocol[str, str]:
    """Create a default TableProtocol[str, str] instance.

    Localizes the cast from the concrete MemoryTable to the protocol.
    """
    return cast(TableProtocol[str, str], MemoryTable())
