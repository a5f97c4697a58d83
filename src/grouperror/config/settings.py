"""Output and logging settings — init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``GROUPERROR_*`` prefix
  3. Code defaults

Settings drive the output layer and logging only. ``str(group)`` always
joins leaf messages with a newline, whatever is configured here.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class GroupErrorSettings(BaseSettings):
    """Settings for rendering groups and configuring logging.

    Attributes:
        numbered: Prefix each rendered line with ``"<n>. "``.
        json_output: Render the structured report as JSON instead of text.
        separator: Line separator for human output.
        verbose: Enable DEBUG-level logging for the ``grouperror`` logger.
        log_json: Use the JSON log renderer.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GROUPERROR_",
    }

    numbered: bool = False
    json_output: bool = False
    separator: str = "\n"
    verbose: bool = False
    log_json: bool = False
