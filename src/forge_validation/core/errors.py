class ForgeValidationError(Exception):
    """Base class for failures reported to the command line."""


class PropertyNotFoundError(ForgeValidationError, LookupError):
    def __init__(self, property_name: str, class_name: str) -> None:
        super().__init__(f"The current class '{class_name}' has no property named '{property_name}'")
        self.property_name = property_name
        self.class_name = class_name


class ResourceError(ForgeValidationError, ValueError):
    """The selected resource cannot be resolved to a Java source or member."""


class DescriptorError(ForgeValidationError, ValueError):
    """An XML document (validation.xml or pom.xml) could not be read."""
