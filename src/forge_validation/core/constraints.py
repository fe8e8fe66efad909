from forge_validation.core.errors import PropertyNotFoundError
from forge_validation.core.java_source import JavaMember, JavaSource
from forge_validation.core.ports.project import Project
from forge_validation.core.resources import Resource, get_java_source, resolve_member
from forge_validation.models import Constraint, ConstraintKind


class ConstraintCommands:
    """Adds Bean Validation constraints to the currently selected Java resource.

    Each command appends one annotation, saves the source file and returns a
    confirmation line. A failed save leaves the in-memory source unchanged.
    """

    def __init__(self, project: Project, current_resource: Resource) -> None:
        self._project = project
        self._current_resource = current_resource

    @property
    def current_resource(self) -> Resource:
        return self._current_resource

    def _load_source(self) -> JavaSource:
        return get_java_source(self._project, self._current_resource)

    def _resolve_target(self, source: JavaSource, on: str | None) -> JavaMember:
        if on is None:
            return resolve_member(source, self._current_resource)
        member = source.get_field(on)
        if member is None:
            raise PropertyNotFoundError(on, source.name)
        return member

    def list_properties(self) -> list[str]:
        return [f.name for f in self._load_source().fields()]

    def add_constraint(
        self,
        kind: ConstraintKind | str,
        on: str | None = None,
        message: str | None = None,
        value: int | None = None,
    ) -> str:
        constraint = Constraint(kind=ConstraintKind(kind), message=message, value=value)
        source = self._load_source()
        target = self._resolve_target(source, on)

        with source.staged():
            source.add_annotation(target, constraint)
            self._project.save_java_source(source)

        display_name = on if on is not None else self._current_resource.name
        return f"{constraint.kind.value} has been added on {display_name}"

    def add_null(self, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.NULL, on, message)

    def add_not_null(self, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.NOT_NULL, on, message)

    def add_assert_true(self, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.ASSERT_TRUE, on, message)

    def add_assert_false(self, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.ASSERT_FALSE, on, message)

    def add_min(self, min_value: int, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.MIN, on, message, min_value)

    def add_max(self, max_value: int, on: str | None = None, message: str | None = None) -> str:
        return self.add_constraint(ConstraintKind.MAX, on, message, max_value)
