"""Commands that attach constraint annotations to the selected Java resource."""

from typing import Annotated

import typer

from forge_validation.cli.common import console, fail, get_project
from forge_validation.config import get_current_resource, get_project_dir
from forge_validation.core.constraints import ConstraintCommands
from forge_validation.core.errors import ForgeValidationError
from forge_validation.core.resources import parse_resource
from forge_validation.models import ConstraintKind
from forge_validation.project.maven import MavenProject

constraint_app = typer.Typer(help="Add a constraint to a Java class, field or method.", no_args_is_help=True)


def _complete_properties(ctx: typer.Context, incomplete: str) -> list[str]:
    selection = ctx.params.get("resource") or get_current_resource()
    if not selection:
        return []
    project_dir = ctx.find_root().params.get("project") or get_project_dir()
    try:
        commands = ConstraintCommands(MavenProject(project_dir), parse_resource(selection))
        names = commands.list_properties()
    except (ForgeValidationError, OSError):
        return []
    return [name for name in names if name.startswith(incomplete)]


ResourceOption = Annotated[
    str,
    typer.Option(
        "--resource",
        "-r",
        envvar="FORGE_CURRENT_RESOURCE",
        help="Selected resource: path/Foo.java, path/Foo.java#field or path/Foo.java#method().",
    ),
]
OnOption = Annotated[
    str | None,
    typer.Option("--on", help="Property of the current class to constrain.", autocompletion=_complete_properties),
]
MessageOption = Annotated[str | None, typer.Option("--message", help="Constraint violation message.")]


def _add(
    ctx: typer.Context,
    kind: ConstraintKind,
    resource: str,
    on: str | None,
    message: str | None,
    value: int | None = None,
) -> None:
    try:
        commands = ConstraintCommands(get_project(ctx), parse_resource(resource))
        console.print(commands.add_constraint(kind, on=on, message=message, value=value), markup=False)
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc


@constraint_app.command("Null")
def null(ctx: typer.Context, resource: ResourceOption, on: OnOption = None, message: MessageOption = None) -> None:
    """Add a @Null constraint."""
    _add(ctx, ConstraintKind.NULL, resource, on, message)


@constraint_app.command("NotNull")
def not_null(ctx: typer.Context, resource: ResourceOption, on: OnOption = None, message: MessageOption = None) -> None:
    """Add a @NotNull constraint."""
    _add(ctx, ConstraintKind.NOT_NULL, resource, on, message)


@constraint_app.command("AssertTrue")
def assert_true(
    ctx: typer.Context, resource: ResourceOption, on: OnOption = None, message: MessageOption = None
) -> None:
    """Add an @AssertTrue constraint."""
    _add(ctx, ConstraintKind.ASSERT_TRUE, resource, on, message)


@constraint_app.command("AssertFalse")
def assert_false(
    ctx: typer.Context, resource: ResourceOption, on: OnOption = None, message: MessageOption = None
) -> None:
    """Add an @AssertFalse constraint."""
    _add(ctx, ConstraintKind.ASSERT_FALSE, resource, on, message)


@constraint_app.command("Min")
def min_(
    ctx: typer.Context,
    resource: ResourceOption,
    min_value: Annotated[int, typer.Option("--minValue", "--min-value", help="Minimum value (inclusive).")],
    on: OnOption = None,
    message: MessageOption = None,
) -> None:
    """Add a @Min constraint."""
    _add(ctx, ConstraintKind.MIN, resource, on, message, min_value)


@constraint_app.command("Max")
def max_(
    ctx: typer.Context,
    resource: ResourceOption,
    max_value: Annotated[int, typer.Option("--maxValue", "--max-value", help="Maximum value (inclusive).")],
    on: OnOption = None,
    message: MessageOption = None,
) -> None:
    """Add a @Max constraint."""
    _add(ctx, ConstraintKind.MAX, resource, on, message, max_value)


@constraint_app.command("properties")
def properties(ctx: typer.Context, resource: ResourceOption) -> None:
    """List the properties of the current class."""
    try:
        names = ConstraintCommands(get_project(ctx), parse_resource(resource)).list_properties()
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc
    for name in names:
        console.print(name, markup=False)
