"""ErrorReport and ErrorEntry — a serializable snapshot of a flattened error.

The report is built from the leaves returned by :func:`collection`, so
each entry carries its fully prefixed message. The entry type names the
leaf's original exception class, not the prefixed view around it.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from grouperror.domain.group import PrefixedError, collection

logger = logging.getLogger(__name__)


class ErrorEntry(BaseModel):
    """One flattened leaf."""

    model_config = {"frozen": True}

    type: str
    message: str


class ErrorReport(BaseModel):
    """Flattened view of an error, ready for JSON output.

    Attributes:
        ok: True when there was no error at all.
        count: Number of leaf errors.
        errors: Leaves in flattening order.
    """

    model_config = {"frozen": True}

    ok: bool
    count: int = 0
    errors: list[ErrorEntry] = Field(default_factory=list)


def _type_name(err: BaseException) -> str:
    if isinstance(err, PrefixedError):
        err = err.origin
    cls = type(err)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def build_report(err: BaseException | None) -> ErrorReport:
    """Flatten *err* into an :class:`ErrorReport`."""
    if err is None:
        return ErrorReport(ok=True)
    entries = [ErrorEntry(type=_type_name(x), message=str(x)) for x in collection(err)]
    logger.debug("Built error report with %d entries", len(entries))
    return ErrorReport(ok=False, count=len(entries), errors=entries)
