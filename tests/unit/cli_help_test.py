"""Tests that -h is accepted as a help flag on all CLI commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from forge_validation.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["constraint"],
        ["constraint", "NotNull"],
        ["constraint", "Min"],
        ["new-constraint"],
        ["validation"],
        ["validation", "setup"],
    ],
    ids=["root", "constraint", "constraint-notnull", "constraint-min", "new-constraint", "validation", "setup"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])
    assert "Usage" in result.output
