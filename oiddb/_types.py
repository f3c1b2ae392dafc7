from typing import Mapping, Tuple, TypeVar

K = TypeVar("K", bound=str)
V = TypeVar("V", bound=str)

# DataSetMapping is the loose, not yet validated shape accepted by
# DataSet.from_dict and OIDRegistry.register.
DataSetMapping = Mapping[str, object]

# TableEntry is a single (key, value) pair read out of a data set.
TableEntry = Tuple[str, str]

__all__ = ["K", "V", "DataSetMapping", "TableEntry"]
