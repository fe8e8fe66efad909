import logging
import os
from pathlib import Path

from rich.logging import RichHandler


def get_project_dir() -> Path:
    return Path(os.getenv("FORGE_PROJECT_DIR", "."))


def get_current_resource() -> str | None:
    return os.getenv("FORGE_CURRENT_RESOURCE") or None


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
