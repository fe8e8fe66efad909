"""Maven project layout backed by the filesystem and ``pom.xml``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path

from forge_validation.core.errors import DescriptorError
from forge_validation.core.java_source import JavaSource
from forge_validation.models import Dependency, ScopeType

logger = logging.getLogger(__name__)

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
_SOURCE_FOLDER = Path("src") / "main" / "java"
_RESOURCE_FOLDER = Path("src") / "main" / "resources"


class FileSystemProject:
    """Sources and resources laid out the Maven way under ``root``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def source_folder(self) -> Path:
        return self._root / _SOURCE_FOLDER

    @property
    def resource_folder(self) -> Path:
        return self._root / _RESOURCE_FOLDER

    def get_resource(self, relative_path: str) -> Path:
        return self.resource_folder / relative_path

    def get_java_resource(self, path: str | Path) -> JavaSource:
        candidate = Path(path)
        if not candidate.is_absolute():
            in_root = self._root / candidate
            candidate = in_root if in_root.exists() else self.source_folder / candidate
        return JavaSource.from_file(candidate)

    def save_java_source(self, source: JavaSource) -> Path:
        if not source.path.is_file():
            raise FileNotFoundError(f"File not found: {source.path}")
        source.path.write_text(source.text, encoding="utf-8")
        logger.debug("Saved %s", source.path)
        return source.path


class MavenProject(FileSystemProject):
    @property
    def pom_file(self) -> Path:
        return self.root / "pom.xml"

    def _read_pom(self) -> ET.ElementTree:
        if not self.pom_file.is_file():
            raise FileNotFoundError(f"File not found: {self.pom_file}")
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            return ET.parse(self.pom_file, parser=parser)
        except ET.ParseError as exc:
            raise DescriptorError(f"Malformed POM {self.pom_file}: {exc}") from exc

    def get_dependencies(self) -> list[Dependency]:
        root = self._read_pom().getroot()
        tag = _tagger(root)
        container = root.find(tag("dependencies"))
        if container is None:
            return []
        return [_read_dependency(element, tag) for element in container.findall(tag("dependency"))]

    def has_dependency(self, dependency: Dependency) -> bool:
        return any(dependency.matches(existing) for existing in self.get_dependencies())

    def add_dependency(self, dependency: Dependency) -> None:
        tree = self._read_pom()
        root = tree.getroot()
        tag = _tagger(root)
        container = root.find(tag("dependencies"))
        if container is None:
            container = ET.SubElement(root, tag("dependencies"))

        element = ET.SubElement(container, tag("dependency"))
        ET.SubElement(element, tag("groupId")).text = dependency.group_id
        ET.SubElement(element, tag("artifactId")).text = dependency.artifact_id
        if dependency.version:
            ET.SubElement(element, tag("version")).text = dependency.version
        if dependency.scope:
            ET.SubElement(element, tag("scope")).text = dependency.scope.value

        ET.register_namespace("", POM_NAMESPACE)
        ET.indent(tree, space="    ")
        tree.write(self.pom_file, encoding="UTF-8", xml_declaration=True)
        logger.debug("Added dependency %s to %s", dependency, self.pom_file)


def _tagger(root: ET.Element) -> Callable[[str], str]:
    namespace = root.tag[1:].split("}", 1)[0] if root.tag.startswith("{") else ""

    def tag(name: str) -> str:
        return f"{{{namespace}}}{name}" if namespace else name

    return tag


def _read_dependency(element: ET.Element, tag: Callable[[str], str]) -> Dependency:
    def child_text(name: str) -> str | None:
        child = element.find(tag(name))
        return child.text.strip() if child is not None and child.text else None

    scope = child_text("scope")
    return Dependency(
        group_id=child_text("groupId") or "",
        artifact_id=child_text("artifactId") or "",
        version=child_text("version"),
        scope=ScopeType(scope) if scope in {s.value for s in ScopeType} else None,
    )
