from pathlib import Path

from forge_validation.models import Dependency
from forge_validation.project.maven import FileSystemProject


class InMemoryProject(FileSystemProject):
    """Filesystem sources and resources with a dependency list kept in memory."""

    def __init__(self, root: str | Path, dependencies: list[Dependency] | None = None) -> None:
        super().__init__(root)
        self.dependencies: list[Dependency] = list(dependencies or [])

    def get_dependencies(self) -> list[Dependency]:
        return list(self.dependencies)

    def has_dependency(self, dependency: Dependency) -> bool:
        return any(dependency.matches(existing) for existing in self.dependencies)

    def add_dependency(self, dependency: Dependency) -> None:
        self.dependencies.append(dependency)
