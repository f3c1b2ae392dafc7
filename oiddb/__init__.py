"""oiddb — object identifier lookup registry.

This package exposes `OIDRegistry`, a thread-safe table set translating
between dotted OIDs, canonical names, RFC 4514 short attribute names and
informal aliases, together with two bundled data sets covering common
cryptographic algorithms and X.509 identifiers.
"""
from pathlib import Path
from typing import Any, Optional

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from oiddb.core import (
    DataSet,
    DuplicateEvent,
    DuplicateKind,
    DuplicatePolicy,
    OIDRegistry,
)
from oiddb.data import BUILTIN_DATA_SETS, CRYPTO, X509
from oiddb.exceptions import InvalidDataSetError, OIDDBError


def _read_version_file() -> Optional[str]:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf8").strip()
    except OSError:
        return None


def _get_version() -> str:
    # 1) Try to read installed distribution metadata
    try:
        return _pkg_version("oiddb")
    except PackageNotFoundError:
        pass

    # 2) Try the VERSION file that setuptools_scm can write at build time
    v = _read_version_file()
    if v:
        return v

    # 3) Fall back to a safe default
    return "0.0.0"


__version__ = _get_version()


def get_instance() -> OIDRegistry:
    """Return the process-wide registry (created empty on first call)."""
    return OIDRegistry.get_instance()


def create_registry(
    *data_sets: Any, builtin: bool = True, **kwargs: Any
) -> OIDRegistry:
    """
    Create a new, caller-owned registry.

    Args:
        *data_sets: Extra DataSet objects or mappings, registered after the
            bundled sets.
        builtin: Register the bundled CRYPTO and X509 sets first.
        **kwargs: Passed through to OIDRegistry.

    Example:
        registry = create_registry(my_data_set, duplicate_policy=1)
    """
    registry = OIDRegistry(**kwargs)
    if builtin:
        registry.register(BUILTIN_DATA_SETS)
    registry.register(data_sets)
    return registry


__all__ = [
    "OIDRegistry",
    "DataSet",
    "DuplicateEvent",
    "DuplicateKind",
    "DuplicatePolicy",
    "OIDDBError",
    "InvalidDataSetError",
    "BUILTIN_DATA_SETS",
    "CRYPTO",
    "X509",
    "get_instance",
    "create_registry",
    "__version__",
]
