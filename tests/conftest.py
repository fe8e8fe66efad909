"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from forge_validation.project import InMemoryProject, MavenProject

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_TESTS_ROOT)
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Sample Maven project
# ---------------------------------------------------------------------------

_FIXTURES = _TESTS_ROOT / "fixtures"

CUSTOMER_PATH = Path("src/main/java/com/example/Customer.java")


def customer_source() -> str:
    return (_FIXTURES / "Customer.java").read_text(encoding="utf-8")


def pom_source() -> str:
    return (_FIXTURES / "pom.xml").read_text(encoding="utf-8")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a Maven project directory with a pom.xml and one Java class."""
    (tmp_path / "pom.xml").write_text(pom_source(), encoding="utf-8")
    customer = tmp_path / CUSTOMER_PATH
    customer.parent.mkdir(parents=True)
    customer.write_text(customer_source(), encoding="utf-8")
    return tmp_path


@pytest.fixture
def customer_file(project_dir: Path) -> Path:
    return project_dir / CUSTOMER_PATH


@pytest.fixture
def maven_project(project_dir: Path) -> MavenProject:
    return MavenProject(project_dir)


@pytest.fixture
def in_memory_project(project_dir: Path) -> InMemoryProject:
    return InMemoryProject(project_dir)


@pytest.fixture
def java_parser() -> Parser:
    """Return a tree-sitter parser for Java."""
    return get_parser("java")


@pytest.fixture
def customer_text() -> str:
    return customer_source()
