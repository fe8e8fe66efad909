"""Unit tests for resource selection."""

from pathlib import Path

import pytest

from forge_validation.core.errors import ResourceError
from forge_validation.core.java_source import JavaSource
from forge_validation.core.resources import (
    JavaFieldResource,
    JavaMethodResource,
    JavaResource,
    parse_resource,
    resolve_member,
)


def test_parse_file_selection() -> None:
    resource = parse_resource("src/main/java/com/example/Customer.java")
    assert resource == JavaResource(Path("src/main/java/com/example/Customer.java"))
    assert resource.name == "Customer.java"


def test_parse_field_selection() -> None:
    resource = parse_resource("Customer.java#name")
    assert resource == JavaFieldResource(Path("Customer.java"), "name")
    assert resource.name == "name"


def test_parse_method_selection() -> None:
    resource = parse_resource("Customer.java#getName()")
    assert resource == JavaMethodResource(Path("Customer.java"), "getName")
    assert resource.name == "getName"


def test_parse_rejects_non_java_files() -> None:
    with pytest.raises(ResourceError):
        parse_resource("pom.xml")


def test_resolve_member(customer_text: str) -> None:
    source = JavaSource(Path("Customer.java"), customer_text)

    assert resolve_member(source, JavaResource(Path("Customer.java"))).kind == "type"
    assert resolve_member(source, JavaFieldResource(Path("Customer.java"), "id")).name == "id"
    assert resolve_member(source, JavaMethodResource(Path("Customer.java"), "getName")).kind == "method"
    with pytest.raises(ResourceError):
        resolve_member(source, JavaMethodResource(Path("Customer.java"), "setName"))
