class OIDDBError(Exception):
    """Base class for errors raised by oiddb."""


class InvalidDataSetError(OIDDBError, ValueError):
    """Raised when a data set offered for registration is malformed."""


__all__ = ["OIDDBError", "InvalidDataSetError"]
