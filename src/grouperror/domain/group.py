"""GroupError — joining independent errors into one exception value.

A group holds an ordered tuple of member exceptions and a prefix. Its
message is the flattened list of leaf messages, one per line, each
carrying every ancestor prefix in outer-to-inner order::

    >>> err = prefix("validation: ", ValueError("invalid name"), None, ValueError("invalid age"))
    >>> print(err)
    validation: invalid name
    validation: invalid age

Any exception type can opt into flattening by exposing a zero-argument
``collection()`` method (see :class:`Collectable`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from grouperror.domain.matching import as_error, is_error


@runtime_checkable
class Collectable(Protocol):
    """Structural capability: an exception that exposes its members."""

    def collection(self) -> Sequence[BaseException]: ...


def is_collectable(err: object) -> bool:
    """Whether *err* exposes a callable ``collection()``.

    A plain data attribute named ``collection`` does not count.
    """
    return callable(getattr(err, "collection", None))


class PrefixedError(Exception):
    """View of *error* whose message starts with *prefix*.

    Created during flattening, never by callers. Identity and type
    matching are forwarded to the wrapped exception.
    """

    def __init__(self, prefix: str, error: BaseException) -> None:
        super().__init__(prefix, error)
        self._prefix = prefix
        self._error = error

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def error(self) -> BaseException:
        return self._error

    @property
    def origin(self) -> BaseException:
        """Innermost exception below any stacked views."""
        err: BaseException = self._error
        while isinstance(err, PrefixedError):
            err = err.error
        return err

    def __str__(self) -> str:
        return f"{self._prefix}{self._error}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._prefix!r}, {self._error!r})"

    def matches(self, target: BaseException) -> bool:
        return is_error(self._error, target)

    def extract(self, cls: type[BaseException]) -> BaseException | None:
        return as_error(self._error, cls)


class PrefixedGroup(PrefixedError):
    """Prefixed view over a collectable exception.

    Stays collectable itself, so the flattener keeps descending and each
    level adds exactly one prefix.
    """

    def collection(self) -> list[BaseException]:
        members = self._error.collection()  # type: ignore[attr-defined]
        return [prefixed(self._prefix, member) for member in members if member is not None]


def prefixed(prefix: str, error: BaseException) -> PrefixedError:
    """Wrap *error* in the view type matching its capability."""
    if is_collectable(error):
        return PrefixedGroup(prefix, error)
    return PrefixedError(prefix, error)


class GroupError(Exception):
    """An ordered, prefixed, immutable group of exceptions.

    Build instances with :func:`join` or :func:`prefix`, which return
    ``None`` instead of an empty group.

    Attributes:
        prefix: Prepended to every leaf message produced from this group.
        errors: Member exceptions in insertion order, never ``None``.
    """

    def __init__(self, prefix: str, errors: Sequence[BaseException]) -> None:
        members = tuple(errors)
        if not members:
            raise ValueError("GroupError requires at least one member")
        super().__init__(prefix, members)
        self._prefix = prefix
        self._errors = members

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return self._errors

    def __str__(self) -> str:
        return "\n".join(str(err) for err in collection(self))

    def __repr__(self) -> str:
        return f"GroupError(prefix={self._prefix!r}, errors={list(self._errors)!r})"

    def collection(self) -> list[BaseException]:
        """Members wrapped in this group's prefix, one level deep."""
        return [prefixed(self._prefix, err) for err in self._errors]

    def matches(self, target: BaseException) -> bool:
        """Whether *target* is found in any member, scanning in order."""
        return any(is_error(err, target) for err in self._errors)

    def extract(self, cls: type[BaseException]) -> BaseException | None:
        """First member (recursively) that is an instance of *cls*."""
        for err in self._errors:
            found = as_error(err, cls)
            if found is not None:
                return found
        return None


def join(*errors: BaseException | None) -> BaseException | None:
    """Join *errors* into a group, ignoring ``None``.

    Returns ``None`` when no errors are given.
    """
    return prefix("", *errors)


def prefix(prefix: str, *errors: BaseException | None) -> BaseException | None:
    """Join *errors* the same way as :func:`join` and prefix the group."""
    members = [err for err in errors if err is not None]
    if not members:
        return None
    return GroupError(prefix, members)


def collection(err: BaseException | None) -> list[BaseException]:
    """Flatten *err* into its leaf exceptions.

    Expands every exception exposing ``collection()``, recursively. Any
    other exception is a leaf, including wrappers whose cause is a group.

    Examples:
        >>> err = prefix("my group: ", ValueError("error1"), None, ValueError("error2"))
        >>> [str(x) for x in collection(err)]
        ['my group: error1', 'my group: error2']
        >>> collection(None)
        []
    """
    if err is None:
        return []
    if not is_collectable(err):
        return [err]
    leaves: list[BaseException] = []
    for member in err.collection():  # type: ignore[union-attr]
        leaves.extend(collection(member))
    return leaves
