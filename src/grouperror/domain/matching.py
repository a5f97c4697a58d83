"""Identity and type matching over nested exceptions.

``is_error`` and ``as_error`` walk an exception tree without flattening
it. A node is inspected in this order:

1. the node itself (identity/equality, or ``isinstance``)
2. its own ``matches(target)`` / ``extract(cls)`` hook, if present
3. members of a native ``BaseExceptionGroup``
4. the explicit cause (``raise ... from ...``)

Implicit context (``__context__``) is never followed.

Each node is visited at most once per top-level call. Hooks that call
back into ``is_error``/``as_error`` share the visited set of the walk
in progress, so cycles through groups terminate.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TypeVar

_E = TypeVar("_E", bound=BaseException)

_visited: ContextVar[set[int] | None] = ContextVar("grouperror_visited", default=None)


@contextmanager
def _walk() -> Iterator[set[int]]:
    """Visited set of the current walk, started here if none is active."""
    seen = _visited.get()
    if seen is not None:
        yield seen
        return
    seen = set()
    token = _visited.set(seen)
    try:
        yield seen
    finally:
        _visited.reset(token)


def _causes(err: BaseException, seen: set[int]) -> Iterator[BaseException]:
    """Yield *err* and its explicit causes not visited yet."""
    node: BaseException | None = err
    while node is not None and id(node) not in seen:
        seen.add(id(node))
        yield node
        node = node.__cause__


def is_error(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether *target* appears anywhere in the tree of *err*.

    Examples:
        >>> closed = OSError("file already closed")
        >>> is_error(closed, closed)
        True
        >>> is_error(None, None)
        True
    """
    if err is None or target is None:
        return err is target
    with _walk() as seen:
        for node in _causes(err, seen):
            if node is target or node == target:
                return True
            matches = getattr(node, "matches", None)
            if callable(matches) and matches(target):
                return True
            if isinstance(node, BaseExceptionGroup):
                if any(is_error(member, target) for member in node.exceptions):
                    return True
    return False


def as_error(err: BaseException | None, cls: type[_E]) -> _E | None:
    """Return the first exception in the tree of *err* that is a *cls*.

    Returns ``None`` when nothing matches.
    """
    if err is None:
        return None
    with _walk() as seen:
        for node in _causes(err, seen):
            if isinstance(node, cls):
                return node
            extract = getattr(node, "extract", None)
            if callable(extract):
                found = extract(cls)
                if found is not None:
                    return found
            if isinstance(node, BaseExceptionGroup):
                for member in node.exceptions:
                    found = as_error(member, cls)
                    if found is not None:
                        return found
    return None
