import enum


class ErrorKind(enum.Enum):
    """Failure classes for a single probe read; values are metric labels."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_DATA = "invalid_data"
    OTHER = "other"


class ProbeReadError(Exception):
    """A probe read failed with a known classification"""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind


def classify_error(exc):
    """Map an exception raised while sampling a probe to its ErrorKind"""
    if isinstance(exc, ProbeReadError):
        return exc.kind
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    # UnicodeDecodeError is a ValueError too
    if isinstance(exc, ValueError):
        return ErrorKind.INVALID_DATA
    return ErrorKind.OTHER
