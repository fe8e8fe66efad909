"""Bean Validation implementations that a project can be set up with."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from forge_validation.core.facet import ValidationFacet
from forge_validation.core.ports.project import Project
from forge_validation.models import Dependency, ValidationDescriptor


class BVProvider(StrEnum):
    HIBERNATE_VALIDATOR = "hibernate-validator"
    APACHE_BEAN_VALIDATION = "apache-bean-validation"


@dataclass(frozen=True)
class ValidationProvider:
    name: str
    dependencies: tuple[Dependency, ...]
    default_descriptor: ValidationDescriptor = field(default_factory=ValidationDescriptor)


def _hibernate_validator() -> ValidationProvider:
    return ValidationProvider(
        name="Hibernate Validator",
        dependencies=(
            Dependency(group_id="org.hibernate", artifact_id="hibernate-validator", version="4.2.0.Final"),
        ),
        default_descriptor=ValidationDescriptor(
            default_provider="org.hibernate.validator.HibernateValidator",
            message_interpolator="org.hibernate.validator.messageinterpolation.ResourceBundleMessageInterpolator",
            traversable_resolver="org.hibernate.validator.engine.resolver.DefaultTraversableResolver",
            constraint_validator_factory="org.hibernate.validator.engine.ConstraintValidatorFactoryImpl",
        ),
    )


def _apache_bean_validation() -> ValidationProvider:
    return ValidationProvider(
        name="Apache Bean Validation",
        dependencies=(
            Dependency(group_id="org.apache.bval", artifact_id="org.apache.bval.bundle", version="0.3-incubating"),
        ),
        default_descriptor=ValidationDescriptor(
            default_provider="org.apache.bval.jsr303.ApacheValidationProvider",
            message_interpolator="org.apache.bval.jsr303.DefaultMessageInterpolator",
            traversable_resolver="org.apache.bval.jsr303.resolver.DefaultTraversableResolver",
            constraint_validator_factory="org.apache.bval.jsr303.DefaultConstraintValidatorFactory",
        ),
    )


_PROVIDERS: dict[BVProvider, Callable[[], ValidationProvider]] = {
    BVProvider.HIBERNATE_VALIDATOR: _hibernate_validator,
    BVProvider.APACHE_BEAN_VALIDATION: _apache_bean_validation,
}


def get_validation_provider(provider: BVProvider | str) -> ValidationProvider:
    try:
        factory = _PROVIDERS[BVProvider(provider)]
    except ValueError:
        supported = [p.value for p in BVProvider]
        raise ValueError(f"Unknown validation provider '{provider}'. Supported: {supported}") from None
    return factory()


def setup_validation(project: Project, provider: BVProvider | str = BVProvider.HIBERNATE_VALIDATOR) -> ValidationFacet:
    """Install the validation facet together with a provider and its default configuration.

    An existing ``validation.xml`` is kept as is.
    """
    implementation = get_validation_provider(provider)
    facet = ValidationFacet(project)
    facet.install()

    for dependency in implementation.dependencies:
        if not project.has_dependency(dependency):
            project.add_dependency(dependency)

    if not facet.get_config_file().exists():
        facet.save_config(implementation.default_descriptor)
    return facet
