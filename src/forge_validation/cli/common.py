from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from forge_validation.config import get_project_dir
from forge_validation.project.maven import MavenProject

console = Console()


def get_project(ctx: typer.Context) -> MavenProject:
    state = ctx.find_root().obj
    project_dir: Path = getattr(state, "project_dir", None) or get_project_dir()
    return MavenProject(project_dir)


def fail(exc: Exception) -> typer.Exit:
    console.print(f"[red]{escape(str(exc))}[/red]")
    return typer.Exit(1)
