"""Text/JSON output helpers.

Human output lists one flattened leaf per line, optionally numbered.
Machine output is the JSON dump of :class:`ErrorReport`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grouperror.domain.group import collection
from grouperror.output.report import build_report

if TYPE_CHECKING:
    from grouperror.config.settings import GroupErrorSettings


def format_error(
    err: BaseException | None,
    *,
    numbered: bool = False,
    json_output: bool = False,
    separator: str = "\n",
) -> str:
    """Format *err* for display.

    Args:
        err: The error to format, or None.
        numbered: Prefix each line with its 1-based position.
        json_output: If True, return JSON; otherwise return human-readable text.
        separator: Line separator for human-readable text.
    """
    if json_output:
        return build_report(err).model_dump_json(indent=2)
    lines = [str(x) for x in collection(err)]
    if numbered:
        lines = [f"{i}. {line}" for i, line in enumerate(lines, start=1)]
    return separator.join(lines)


def render(err: BaseException | None, settings: GroupErrorSettings | None = None) -> str:
    """Format *err* using the options from *settings* (env defaults if omitted)."""
    if settings is None:
        from grouperror.config.settings import GroupErrorSettings

        settings = GroupErrorSettings()
    return format_error(
        err,
        numbered=settings.numbered,
        json_output=settings.json_output,
        separator=settings.separator,
    )
