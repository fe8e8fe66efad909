"""The resource a command operates on: a Java file or one of its members."""

from dataclasses import dataclass
from pathlib import Path

from forge_validation.core.errors import ResourceError
from forge_validation.core.java_source import JavaMember, JavaSource
from forge_validation.core.ports.project import JavaSourceFacet


@dataclass(frozen=True)
class JavaResource:
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class JavaFieldResource:
    path: Path
    field_name: str

    @property
    def name(self) -> str:
        return self.field_name


@dataclass(frozen=True)
class JavaMethodResource:
    path: Path
    method_name: str

    @property
    def name(self) -> str:
        return self.method_name


Resource = JavaResource | JavaFieldResource | JavaMethodResource


def parse_resource(selection: str) -> Resource:
    """Parse ``path/Foo.java``, ``path/Foo.java#field`` or ``path/Foo.java#method()``."""
    path_part, _, member = selection.strip().partition("#")
    path = Path(path_part)
    if path.suffix != ".java":
        raise ResourceError(f"Not a Java source file: {path_part}")
    if not member:
        return JavaResource(path)
    if member.endswith("()"):
        return JavaMethodResource(path, member.removesuffix("()"))
    return JavaFieldResource(path, member)


def get_java_source(sources: JavaSourceFacet, resource: Resource) -> JavaSource:
    return sources.get_java_resource(resource.path)


def resolve_member(source: JavaSource, resource: Resource) -> JavaMember:
    """Return the member of ``source`` that ``resource`` itself points at."""
    if isinstance(resource, JavaFieldResource):
        member = source.get_field(resource.field_name)
    elif isinstance(resource, JavaMethodResource):
        member = source.get_method(resource.method_name)
    else:
        return source.type_declaration()

    if member is None:
        raise ResourceError(f"{source.name} has no member named '{resource.name}'")
    return member
