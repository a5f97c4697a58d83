"""grouperror — join independent errors into one prefixed, flattenable exception."""

from __future__ import annotations

from grouperror.domain.group import (
    Collectable,
    GroupError,
    PrefixedError,
    PrefixedGroup,
    collection,
    is_collectable,
    join,
    prefix,
)
from grouperror.domain.matching import as_error, is_error

__all__ = [
    "Collectable",
    "GroupError",
    "PrefixedError",
    "PrefixedGroup",
    "as_error",
    "collection",
    "is_collectable",
    "is_error",
    "join",
    "prefix",
]
