from .memory import MemoryTable
from .protocol import TableProtocol

__all__ = ["MemoryTable", "TableProtocol"]
