from .errors import (
    EntryUnreadable,
    InvalidArgument,
    ListerError,
    RootInaccessible,
    TimestampUnavailable,
)
from .models import FileCandidate, RankedEntry, SortKey

__all__ = [
    "EntryUnreadable",
    "FileCandidate",
    "InvalidArgument",
    "ListerError",
    "RankedEntry",
    "RootInaccessible",
    "SortKey",
    "TimestampUnavailable",
]
