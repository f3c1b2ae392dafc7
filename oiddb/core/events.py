from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional


class DuplicatePolicy(IntEnum):
    """What the registry does, besides dropping it, with a duplicate entry."""

    IGNORE = 0
    WARN = 1


class DuplicateKind(str, Enum):
    """Which table (or the data-set record) a dropped entry collided in."""

    DATA_SET = "data_set"
    NAME = "name"
    OID = "oid"
    SHORT = "short"
    NAME_SHORT = "name_short"
    ALIAS = "alias"


@dataclass(frozen=True)
class DuplicateEvent:
    """Describes one entry that registration dropped because its key existed.

    Attributes:
        kind: The table the key collided in.
        set_name: Name of the data set that offered the dropped entry.
        key: The colliding key (a name, OID, short name, alias or set name).
        value: The value that was offered and dropped.
        existing: The value kept in the table, if any.
    """

    kind: DuplicateKind
    set_name: str
    key: str
    value: Optional[str] = None
    existing: Optional[str] = None

    @property
    def conflicting(self) -> bool:
        """True when the dropped value differs from the one that was kept."""
        return self.value != self.existing


DuplicateCallback = Callable[[DuplicateEvent], None]

__all__ = ["DuplicatePolicy", "DuplicateKind", "DuplicateEvent", "DuplicateCallback"]
