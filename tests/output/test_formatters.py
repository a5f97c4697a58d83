"""Tests for the text/JSON output formatters."""

from __future__ import annotations

import json

import pytest

from grouperror import prefix
from grouperror.config.settings import GroupErrorSettings
from grouperror.output.formatters import format_error, render


@pytest.fixture
def user_error() -> BaseException:
    err = prefix(
        "validation: ",
        ValueError("invalid name"),
        None,
        None,
        ValueError("invalid age"),
    )
    err = prefix("could not create new user: ", RuntimeError("unexpected error"), err)
    return prefix("operation failed: ", err)  # type: ignore[return-value]


class TestFormatError:
    def test_human_matches_str(self, user_error: BaseException) -> None:
        assert format_error(user_error) == str(user_error)

    def test_numbered(self, user_error: BaseException) -> None:
        assert format_error(user_error, numbered=True) == (
            "1. operation failed: could not create new user: unexpected error\n"
            "2. operation failed: could not create new user: validation: invalid name\n"
            "3. operation failed: could not create new user: validation: invalid age"
        )

    def test_separator(self, user_error: BaseException) -> None:
        out = format_error(user_error, separator=" | ")
        assert out.count(" | ") == 2
        assert "\n" not in out

    def test_none_human(self) -> None:
        assert format_error(None) == ""

    def test_json(self, user_error: BaseException) -> None:
        parsed = json.loads(format_error(user_error, json_output=True))
        assert parsed["ok"] is False
        assert parsed["count"] == 3
        assert parsed["errors"][0]["type"] == "RuntimeError"

    def test_none_json(self) -> None:
        parsed = json.loads(format_error(None, json_output=True))
        assert parsed == {"ok": True, "count": 0, "errors": []}


class TestRender:
    def test_uses_settings(self, user_error: BaseException) -> None:
        settings = GroupErrorSettings(numbered=True, separator="; ")
        out = render(user_error, settings)
        assert out.startswith("1. operation failed: ")
        assert "; 2. " in out

    def test_defaults_from_env(
        self, user_error: BaseException, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GROUPERROR_JSON_OUTPUT", "true")
        parsed = json.loads(render(user_error))
        assert parsed["count"] == 3

    def test_plain_defaults(
        self, user_error: BaseException, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for name in ("NUMBERED", "JSON_OUTPUT", "SEPARATOR"):
            monkeypatch.delenv(f"GROUPERROR_{name}", raising=False)
        assert render(user_error) == str(user_error)
