from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

CONSTRAINTS_PACKAGE = "javax.validation.constraints"


class ConstraintKind(StrEnum):
    NULL = "Null"
    NOT_NULL = "NotNull"
    ASSERT_TRUE = "AssertTrue"
    ASSERT_FALSE = "AssertFalse"
    MIN = "Min"
    MAX = "Max"

    @property
    def takes_value(self) -> bool:
        return self in (ConstraintKind.MIN, ConstraintKind.MAX)

    @property
    def qualified_name(self) -> str:
        return f"{CONSTRAINTS_PACKAGE}.{self.value}"


class Constraint(BaseModel):
    """A constraint annotation to append to a Java member."""

    kind: ConstraintKind
    message: str | None = None
    value: int | None = None

    @model_validator(mode="after")
    def _check_value(self) -> "Constraint":
        if self.kind.takes_value:
            if self.value is None:
                raise ValueError(f"{self.kind} requires an integer value")
        else:
            self.value = None
        return self


class ScopeType(StrEnum):
    COMPILE = "compile"
    PROVIDED = "provided"
    RUNTIME = "runtime"
    TEST = "test"
    SYSTEM = "system"
    IMPORT = "import"


class Dependency(BaseModel):
    group_id: str
    artifact_id: str
    version: str | None = None
    scope: ScopeType | None = None

    def matches(self, other: "Dependency") -> bool:
        return (self.group_id, self.artifact_id, self.version) == (other.group_id, other.artifact_id, other.version)

    def __str__(self) -> str:
        coordinates = ":".join(p for p in (self.group_id, self.artifact_id, self.version) if p)
        return f"{coordinates} ({self.scope})" if self.scope else coordinates


class ValidationDescriptor(BaseModel):
    default_provider: str | None = None
    message_interpolator: str | None = None
    traversable_resolver: str | None = None
    constraint_validator_factory: str | None = None
    constraint_mappings: list[str] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("default_provider", "message_interpolator", "traversable_resolver", "constraint_validator_factory")
    @classmethod
    def _strip_class_name(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    @field_validator("constraint_mappings")
    @classmethod
    def _strip_mappings(cls, value: list[str]) -> list[str]:
        return [mapping.strip() for mapping in value]

    @field_validator("properties")
    @classmethod
    def _strip_properties(cls, value: dict[str, str]) -> dict[str, str]:
        return {name.strip(): text.strip() for name, text in value.items()}
