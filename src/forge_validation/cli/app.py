from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from forge_validation.cli.constraint import constraint_app
from forge_validation.cli.validation import validation_app
from forge_validation.config import configure_logging, get_project_dir

app = typer.Typer(
    name="forge-validation",
    help="Add Bean Validation constraints to Java sources and manage the validation setup of a Maven project.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(constraint_app, name="constraint")
app.add_typer(constraint_app, name="new-constraint", hidden=True)
app.add_typer(validation_app, name="validation")


@dataclass
class CliState:
    project_dir: Path


@app.callback()
def _global_options(
    ctx: typer.Context,
    project: Annotated[
        Path | None,
        typer.Option("--project", "-p", envvar="FORGE_PROJECT_DIR", help="Root directory of the Maven project."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    configure_logging(verbose)
    ctx.obj = CliState(project_dir=project if project is not None else get_project_dir())


def main() -> None:
    app()
