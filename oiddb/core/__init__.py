from .data_set import DataSet
from .events import DuplicateEvent, DuplicateKind, DuplicatePolicy
from .registry import OIDRegistry

__all__ = [
    "DataSet",
    "DuplicateEvent",
    "DuplicateKind",
    "DuplicatePolicy",
    "OIDRegistry",
]
