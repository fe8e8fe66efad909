from forge_validation.project.maven import POM_NAMESPACE, FileSystemProject, MavenProject
from forge_validation.project.memory import InMemoryProject

__all__ = [
    "POM_NAMESPACE",
    "FileSystemProject",
    "InMemoryProject",
    "MavenProject",
]
