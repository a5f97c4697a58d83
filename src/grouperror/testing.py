"""Test assertion for grouped errors."""

from __future__ import annotations

from collections.abc import Sequence

from grouperror.domain.group import collection


def assert_error_group(err: BaseException | None, messages: Sequence[str]) -> None:
    """Assert that *err* flattens to exactly *messages*, in order.

    With no *messages*, asserts that *err* is None. Every mismatch is
    reported, not only the first one.
    """
    __tracebackhide__ = True

    if not messages:
        if err is not None:
            raise AssertionError(f"Received unexpected error:\n{err}")
        return

    errs = collection(err)
    actual = [str(x) for x in errs]
    failures: list[str] = []

    for expected, got in zip(messages, actual):
        if expected != got:
            failures.append(
                f"Error message not equal:\nexpected: {expected!r}\nactual  : {got!r}"
            )

    if len(actual) != len(messages):
        failure = f"{actual!r} should have {len(messages)} item(s), but has {len(actual)}"
        if err is not None:
            failure += f"\n{err}"
        failures.append(failure)

    if failures:
        raise AssertionError("\n\n".join(failures))
