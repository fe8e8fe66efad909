import logging
from pathlib import Path

from forge_validation.core.descriptor import export_as_string, import_descriptor
from forge_validation.core.ports.project import Project
from forge_validation.models import Dependency, ScopeType, ValidationDescriptor

logger = logging.getLogger(__name__)

CONFIG_FILE = "META-INF/validation.xml"

BEAN_VALIDATION_API = Dependency(
    group_id="javax.validation",
    artifact_id="validation-api",
    version="1.0.0.GA",
    scope=ScopeType.PROVIDED,
)


class ValidationFacet:
    """Tracks whether a project is set up for Bean Validation.

    Installation is derived from the build descriptor: the facet is
    installed when the project declares the validation API dependency.
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    @property
    def project(self) -> Project:
        return self._project

    def is_installed(self) -> bool:
        return self._project.has_dependency(BEAN_VALIDATION_API)

    def install(self) -> bool:
        if not self.is_installed():
            self._project.add_dependency(BEAN_VALIDATION_API)
            logger.info("Installed %s", BEAN_VALIDATION_API)
        return True

    def get_config_file(self) -> Path:
        return self._project.get_resource(CONFIG_FILE)

    def get_config(self) -> ValidationDescriptor | None:
        config_file = self.get_config_file()
        if not config_file.exists():
            return None
        with config_file.open("rb") as stream:
            return import_descriptor(stream)

    def save_config(self, descriptor: ValidationDescriptor) -> Path:
        config_file = self.get_config_file()
        if not config_file.exists():
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.touch()
        config_file.write_text(export_as_string(descriptor), encoding="utf-8")
        logger.debug("Wrote validation descriptor to %s", config_file)
        return config_file
