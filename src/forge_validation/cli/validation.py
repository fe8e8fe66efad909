"""Commands that manage the validation facet of the project."""

from typing import Annotated

import typer
from rich.markup import escape
from rich.syntax import Syntax

from forge_validation.cli.common import console, fail, get_project
from forge_validation.core.descriptor import export_as_string
from forge_validation.core.errors import ForgeValidationError
from forge_validation.core.facet import BEAN_VALIDATION_API, ValidationFacet
from forge_validation.core.providers import BVProvider, get_validation_provider, setup_validation

validation_app = typer.Typer(help="Set up Bean Validation in the project.", no_args_is_help=True)


@validation_app.command("setup")
def setup(
    ctx: typer.Context,
    provider: Annotated[BVProvider, typer.Option(help="Bean Validation implementation.")] = (
        BVProvider.HIBERNATE_VALIDATOR
    ),
) -> None:
    """Install the validation API, a provider and a default validation.xml."""
    try:
        facet = setup_validation(get_project(ctx), provider)
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc
    console.print(f"[green]Installed[/green] {escape(get_validation_provider(provider).name)}")
    console.print(f"[green]Configured[/green] {escape(str(facet.get_config_file()))}")


@validation_app.command("install")
def install(ctx: typer.Context) -> None:
    """Add the validation API dependency to the project."""
    facet = ValidationFacet(get_project(ctx))
    try:
        already_installed = facet.is_installed()
        facet.install()
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc
    if already_installed:
        console.print(f"{escape(str(BEAN_VALIDATION_API))} is already installed.")
    else:
        console.print(f"[green]Added[/green] {escape(str(BEAN_VALIDATION_API))}")


@validation_app.command("status")
def status(ctx: typer.Context) -> None:
    """Show whether the validation facet is installed."""
    facet = ValidationFacet(get_project(ctx))
    try:
        installed = facet.is_installed()
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc
    if installed:
        console.print("[green]Validation is installed.[/green]")
    else:
        console.print("[yellow]Validation is not installed.[/yellow]")
    config_state = "present" if facet.get_config_file().exists() else "missing"
    console.print(f"Configuration {escape(str(facet.get_config_file()))}: {config_state}")


@validation_app.command("config")
def config(ctx: typer.Context) -> None:
    """Print the project's validation.xml."""
    facet = ValidationFacet(get_project(ctx))
    try:
        descriptor = facet.get_config()
    except (ForgeValidationError, OSError) as exc:
        raise fail(exc) from exc
    if descriptor is None:
        console.print(f"[yellow]No configuration found at {escape(str(facet.get_config_file()))}[/yellow]")
        return
    console.print(Syntax(export_as_string(descriptor), "xml"))
