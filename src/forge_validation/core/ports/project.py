from pathlib import Path
from typing import Protocol

from forge_validation.core.java_source import JavaSource
from forge_validation.models import Dependency


class DependencyFacet(Protocol):
    def get_dependencies(self) -> list[Dependency]: ...

    def has_dependency(self, dependency: Dependency) -> bool: ...

    def add_dependency(self, dependency: Dependency) -> None: ...


class ResourceFacet(Protocol):
    @property
    def resource_folder(self) -> Path: ...

    def get_resource(self, relative_path: str) -> Path: ...


class JavaSourceFacet(Protocol):
    @property
    def source_folder(self) -> Path: ...

    def get_java_resource(self, path: str | Path) -> JavaSource: ...

    def save_java_source(self, source: JavaSource) -> Path: ...


class Project(DependencyFacet, ResourceFacet, JavaSourceFacet, Protocol):
    @property
    def root(self) -> Path: ...
