"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from forge_validation.models import Constraint, ConstraintKind, Dependency, ScopeType, ValidationDescriptor


class TestConstraintModel:
    """Tests for the Constraint model."""

    @pytest.mark.parametrize("kind", [ConstraintKind.MIN, ConstraintKind.MAX])
    def test_bounded_kinds_require_a_value(self, kind: ConstraintKind) -> None:
        with pytest.raises(ValidationError):
            Constraint(kind=kind)

    def test_value_is_dropped_for_unbounded_kinds(self) -> None:
        constraint = Constraint(kind=ConstraintKind.NOT_NULL, value=3)
        assert constraint.value is None

    def test_kind_accepts_annotation_name(self) -> None:
        constraint = Constraint(kind="AssertFalse")  # type: ignore[arg-type]
        assert constraint.kind is ConstraintKind.ASSERT_FALSE

    def test_unknown_kind_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Constraint(kind="Size")  # type: ignore[arg-type]

    def test_qualified_name(self) -> None:
        assert ConstraintKind.NOT_NULL.qualified_name == "javax.validation.constraints.NotNull"


class TestDependencyModel:
    """Tests for the Dependency model."""

    def test_matches_ignores_scope(self) -> None:
        provided = Dependency(group_id="g", artifact_id="a", version="1", scope=ScopeType.PROVIDED)
        unscoped = Dependency(group_id="g", artifact_id="a", version="1")
        assert provided.matches(unscoped)

    def test_matches_requires_exact_version(self) -> None:
        assert not Dependency(group_id="g", artifact_id="a", version="1").matches(
            Dependency(group_id="g", artifact_id="a", version="1.0")
        )

    def test_str_shows_coordinates_and_scope(self) -> None:
        dependency = Dependency(group_id="g", artifact_id="a", version="1", scope=ScopeType.TEST)
        assert str(dependency) == "g:a:1 (test)"


def test_descriptor_defaults_are_empty() -> None:
    descriptor = ValidationDescriptor()
    assert descriptor.default_provider is None
    assert descriptor.constraint_mappings == []
    assert descriptor.properties == {}
