"""Identifier data sets bundled with oiddb."""
from typing import Tuple

from oiddb.core.data_set import DataSet
from oiddb.data.crypto import CRYPTO
from oiddb.data.x509 import X509

# registration order of the bundled sets
BUILTIN_DATA_SETS: Tuple[DataSet, ...] = (CRYPTO, X509)

__all__ = ["BUILTIN_DATA_SETS", "CRYPTO", "X509"]
