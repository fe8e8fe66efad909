"""Import and export of ``META-INF/validation.xml`` descriptors."""

import xml.etree.ElementTree as ET
from typing import IO

from forge_validation.core.errors import DescriptorError
from forge_validation.models import ValidationDescriptor

VALIDATION_NAMESPACE = "http://jboss.org/xml/ns/javax/validation/configuration"
_XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
_SCHEMA_LOCATION = f"{VALIDATION_NAMESPACE} validation-configuration-1.0.xsd"

# Element order follows the validation-configuration-1.0 schema.
_SIMPLE_ELEMENTS = (
    ("default-provider", "default_provider"),
    ("message-interpolator", "message_interpolator"),
    ("traversable-resolver", "traversable_resolver"),
    ("constraint-validator-factory", "constraint_validator_factory"),
)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def import_descriptor(source: str | bytes | IO[bytes] | IO[str]) -> ValidationDescriptor:
    try:
        if isinstance(source, (str, bytes)):
            root = ET.fromstring(source)
        else:
            root = ET.parse(source).getroot()
    except ET.ParseError as exc:
        raise DescriptorError(f"Malformed validation descriptor: {exc}") from exc

    if _local_name(root.tag) != "validation-config":
        raise DescriptorError(f"Expected a validation-config document, got <{_local_name(root.tag)}>")

    fields: dict[str, str] = {}
    mappings: list[str] = []
    properties: dict[str, str] = {}
    simple = dict(_SIMPLE_ELEMENTS)
    for element in root:
        name = _local_name(element.tag)
        text = (element.text or "").strip()
        if name in simple:
            fields[simple[name]] = text
        elif name == "constraint-mapping":
            mappings.append(text)
        elif name == "property":
            properties[element.get("name", "")] = text

    return ValidationDescriptor(**fields, constraint_mappings=mappings, properties=properties)


def export_as_string(descriptor: ValidationDescriptor) -> str:
    def tag(name: str) -> str:
        return f"{{{VALIDATION_NAMESPACE}}}{name}"

    ET.register_namespace("", VALIDATION_NAMESPACE)
    ET.register_namespace("xsi", _XSI_NAMESPACE)
    root = ET.Element(tag("validation-config"), {f"{{{_XSI_NAMESPACE}}}schemaLocation": _SCHEMA_LOCATION})

    for element_name, attribute in _SIMPLE_ELEMENTS:
        value = getattr(descriptor, attribute)
        if value is not None:
            ET.SubElement(root, tag(element_name)).text = value
    for mapping in descriptor.constraint_mappings:
        ET.SubElement(root, tag("constraint-mapping")).text = mapping
    for name, value in descriptor.properties.items():
        ET.SubElement(root, tag("property"), {"name": name}).text = value

    ET.indent(root, space="   ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'
