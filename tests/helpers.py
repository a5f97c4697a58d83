"""Test helpers shared across grouperror test modules."""

from __future__ import annotations

from collections.abc import Sequence


class WrappedError(Exception):
    """Third-party style exception exposing the ``collection()`` capability."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def collection(self) -> Sequence[BaseException]:
        return [self.error]


def opaque_wrap(message: str, cause: BaseException) -> RuntimeError:
    """Plain wrapper chained to *cause*, as ``raise RuntimeError(...) from cause`` would build."""
    wrapper = RuntimeError(message)
    wrapper.__cause__ = cause
    return wrapper
