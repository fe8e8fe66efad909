"""Unit tests for the pom.xml backed project."""

from pathlib import Path

import pytest

from forge_validation.core.errors import DescriptorError
from forge_validation.core.java_source import JavaSource
from forge_validation.models import Dependency, ScopeType
from forge_validation.project import MavenProject


def test_reads_declared_dependencies(maven_project: MavenProject) -> None:
    assert maven_project.get_dependencies() == [
        Dependency(group_id="junit", artifact_id="junit", version="4.8.2", scope=ScopeType.TEST)
    ]


def test_add_dependency_keeps_default_namespace(maven_project: MavenProject) -> None:
    maven_project.add_dependency(Dependency(group_id="g", artifact_id="a", version="1", scope=ScopeType.PROVIDED))

    text = maven_project.pom_file.read_text(encoding="utf-8")
    assert 'xmlns="http://maven.apache.org/POM/4.0.0"' in text
    assert "ns0:" not in text
    assert "<scope>provided</scope>" in text
    assert maven_project.has_dependency(Dependency(group_id="g", artifact_id="a", version="1"))


def test_add_dependency_creates_dependencies_element(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text(
        "<project><modelVersion>4.0.0</modelVersion><artifactId>bare</artifactId></project>", encoding="utf-8"
    )
    project = MavenProject(tmp_path)

    project.add_dependency(Dependency(group_id="g", artifact_id="a"))

    assert project.get_dependencies() == [Dependency(group_id="g", artifact_id="a")]


def test_missing_pom_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        MavenProject(tmp_path).get_dependencies()


def test_malformed_pom_raises(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text("<project>", encoding="utf-8")
    with pytest.raises(DescriptorError):
        MavenProject(tmp_path).get_dependencies()


def test_java_resource_relative_to_source_folder(maven_project: MavenProject) -> None:
    source = maven_project.get_java_resource("com/example/Customer.java")
    assert source.name == "Customer"


def test_java_resource_relative_to_root(maven_project: MavenProject) -> None:
    source = maven_project.get_java_resource("src/main/java/com/example/Customer.java")
    assert source.path == maven_project.source_folder / "com" / "example" / "Customer.java"


def test_save_java_source_writes_text(maven_project: MavenProject, customer_file: Path) -> None:
    source = JavaSource(customer_file, "public class Customer {}\n")
    assert maven_project.save_java_source(source) == customer_file
    assert customer_file.read_text(encoding="utf-8") == "public class Customer {}\n"


def test_save_java_source_requires_backing_file(maven_project: MavenProject) -> None:
    source = JavaSource(maven_project.source_folder / "Gone.java", "public class Gone {}\n")
    with pytest.raises(FileNotFoundError):
        maven_project.save_java_source(source)
    assert not source.path.exists()
