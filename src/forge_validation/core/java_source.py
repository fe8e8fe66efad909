import contextlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from forge_validation.core.errors import ResourceError
from forge_validation.models import Constraint

logger = logging.getLogger(__name__)

MemberKind = Literal["type", "field", "method"]

_TYPE_DECLARATIONS = frozenset(
    {
        "class_declaration",
        "interface_declaration",
        "enum_declaration",
        "record_declaration",
        "annotation_type_declaration",
    }
)
_FIELD_DECLARATIONS = frozenset({"field_declaration", "constant_declaration"})
_ANNOTATION_NODES = frozenset({"marker_annotation", "annotation"})
_COMMENT_NODES = frozenset({"line_comment", "block_comment"})

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}
_JAVA_UNESCAPES = {escaped[1]: raw for raw, escaped in _JAVA_ESCAPES.items()}


def quote_java_string(value: str) -> str:
    return '"' + "".join(_JAVA_ESCAPES.get(ch, ch) for ch in value) + '"'


def unquote_java_string(literal: str) -> str:
    if len(literal) < 2 or not (literal.startswith('"') and literal.endswith('"')):
        return literal
    body = literal[1:-1]
    chars: list[str] = []
    i = 0
    while i < len(body):
        if body[i] == "\\" and i + 1 < len(body):
            chars.append(_JAVA_UNESCAPES.get(body[i + 1], body[i + 1]))
            i += 2
        else:
            chars.append(body[i])
            i += 1
    return "".join(chars)


def render_annotation(constraint: Constraint, qualified: bool = False) -> str:
    """Render a constraint as Java annotation source, e.g. ``@Min(value = 5, message = "m")``.

    With ``qualified`` the annotation type is written with its package.
    """
    name = constraint.kind.qualified_name if qualified else constraint.kind.value
    if constraint.message is None:
        if constraint.value is None:
            return f"@{name}"
        return f"@{name}({constraint.value})"

    arguments = [f"message = {quote_java_string(constraint.message)}"]
    if constraint.value is not None:
        arguments.insert(0, f"value = {constraint.value}")
    return f"@{name}({', '.join(arguments)})"


@dataclass(frozen=True)
class Annotation:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def literal_value(self) -> str | None:
        return self.attributes.get("value")

    def string_value(self, name: str) -> str | None:
        raw = self.attributes.get(name)
        return unquote_java_string(raw) if raw is not None else None


@dataclass(frozen=True)
class JavaMember:
    kind: MemberKind
    name: str
    declaring_type: str
    annotations: tuple[Annotation, ...] = ()

    def annotations_named(self, name: str) -> list[Annotation]:
        return [a for a in self.annotations if a.name == name or a.name.endswith(f".{name}")]


def _text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _node_name(node: Node) -> str:
    name = node.child_by_field_name("name")
    return _text(name) if name is not None else ""


def _modifiers(node: Node) -> Node | None:
    for child in node.children:
        if child.type == "modifiers":
            return child
    return None


def _annotation_nodes(node: Node) -> list[Node]:
    modifiers = _modifiers(node)
    if modifiers is None:
        return []
    return [child for child in modifiers.children if child.type in _ANNOTATION_NODES]


def _read_annotation(node: Node) -> Annotation:
    attributes: dict[str, str] = {}
    arguments = node.child_by_field_name("arguments")
    if arguments is not None:
        for child in arguments.named_children:
            if child.type in _COMMENT_NODES:
                continue
            if child.type == "element_value_pair":
                key = child.child_by_field_name("key")
                value = child.child_by_field_name("value")
                if key is not None and value is not None:
                    attributes[_text(key)] = _text(value)
            else:
                attributes["value"] = _text(child)
    return Annotation(name=_node_name(node), attributes=attributes)


def _declarator_names(node: Node) -> list[str]:
    return [_node_name(child) for child in node.children_by_field_name("declarator")]


def _body_members(type_node: Node) -> list[Node]:
    body = type_node.child_by_field_name("body")
    if body is None:
        return []
    members: list[Node] = []
    for child in body.named_children:
        if child.type == "enum_body_declarations":
            members.extend(child.named_children)
        else:
            members.append(child)
    return members


def _statement_name(node: Node, keyword: str) -> str:
    body = _text(node).strip().removeprefix(keyword).removesuffix(";").strip()
    return "".join(body.split())


class JavaSource:
    """In-memory view of one Java source file.

    The text is parsed with tree-sitter on demand and re-parsed after every
    edit, so member lookups always reflect the current text.
    """

    def __init__(self, path: str | Path, text: str) -> None:
        self.path = Path(path)
        self._text = text
        self._tree: Tree | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> "JavaSource":
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        return cls(file_path, text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def tree(self) -> Tree:
        if self._tree is None:
            self._tree = get_parser("java").parse(self._text.encode("utf-8"))
        return self._tree

    def _set_text(self, text: str) -> None:
        self._text = text
        self._tree = None

    @contextlib.contextmanager
    def staged(self) -> Iterator["JavaSource"]:
        """Roll the text back to its current state if the block raises."""
        snapshot = self._text
        try:
            yield self
        except Exception:
            logger.debug("Rolling back unsaved changes to %s", self.path)
            self._set_text(snapshot)
            raise

    # -- structure --------------------------------------------------------

    @property
    def package(self) -> str | None:
        for child in self.tree.root_node.children:
            if child.type == "package_declaration":
                for name in child.named_children:
                    if name.type in ("scoped_identifier", "identifier"):
                        return _text(name)
        return None

    @property
    def imports(self) -> list[str]:
        names: list[str] = []
        for child in self.tree.root_node.children:
            if child.type == "import_declaration" and not any(c.type == "static" for c in child.children):
                names.append(_statement_name(child, "import"))
        return names

    def _type_node(self) -> Node:
        types = [c for c in self.tree.root_node.children if c.type in _TYPE_DECLARATIONS]
        if not types:
            raise ResourceError(f"No type declaration found in {self.path}")
        for node in types:
            if _node_name(node) == self.path.stem:
                return node
        return types[0]

    @property
    def name(self) -> str:
        return _node_name(self._type_node())

    def _member(self, kind: MemberKind, name: str, node: Node) -> JavaMember:
        return JavaMember(
            kind=kind,
            name=name,
            declaring_type=self.name,
            annotations=tuple(_read_annotation(a) for a in _annotation_nodes(node)),
        )

    def type_declaration(self) -> JavaMember:
        node = self._type_node()
        return self._member("type", _node_name(node), node)

    def fields(self) -> list[JavaMember]:
        members: list[JavaMember] = []
        for node in _body_members(self._type_node()):
            if node.type in _FIELD_DECLARATIONS:
                members.extend(self._member("field", name, node) for name in _declarator_names(node))
        return members

    def methods(self) -> list[JavaMember]:
        return [
            self._member("method", _node_name(node), node)
            for node in _body_members(self._type_node())
            if node.type == "method_declaration"
        ]

    def get_field(self, name: str) -> JavaMember | None:
        return next((f for f in self.fields() if f.name == name), None)

    def get_method(self, name: str) -> JavaMember | None:
        return next((m for m in self.methods() if m.name == name), None)

    def _locate(self, member: JavaMember) -> Node:
        type_node = self._type_node()
        if member.kind == "type":
            return type_node
        for node in _body_members(type_node):
            if member.kind == "field" and node.type in _FIELD_DECLARATIONS and member.name in _declarator_names(node):
                return node
            if member.kind == "method" and node.type == "method_declaration" and _node_name(node) == member.name:
                return node
        raise ResourceError(f"{self.name} has no {member.kind} named '{member.name}'")

    # -- edits ------------------------------------------------------------

    def _insert(self, at: int, insertion: bytes) -> None:
        source = self._text.encode("utf-8")
        self._set_text((source[:at] + insertion + source[at:]).decode("utf-8"))

    def has_import(self, qualified_name: str) -> bool:
        package_name = qualified_name.rpartition(".")[0]
        imports = self.imports
        return qualified_name in imports or f"{package_name}.*" in imports or self.package == package_name

    def conflicting_import(self, qualified_name: str) -> str | None:
        """Return a single-type import of another type with the same simple name."""
        simple_name = qualified_name.rpartition(".")[2]
        for name in self.imports:
            if name != qualified_name and name.rpartition(".")[2] == simple_name:
                return name
        return None

    def add_import(self, qualified_name: str) -> None:
        if self.has_import(qualified_name) or self.conflicting_import(qualified_name) is not None:
            return
        statement = f"import {qualified_name};".encode()
        root = self.tree.root_node
        imports = [c for c in root.children if c.type == "import_declaration"]
        packages = [c for c in root.children if c.type == "package_declaration"]
        if imports:
            self._insert(imports[-1].end_byte, b"\n" + statement)
        elif packages:
            self._insert(packages[0].end_byte, b"\n\n" + statement)
        else:
            self._insert(0, statement + b"\n\n")

    def add_annotation(self, member: JavaMember, constraint: Constraint) -> JavaMember:
        """Append ``constraint`` to the member's annotations and import its type.

        Existing annotations of the same kind are left alone; a second call
        adds a second annotation.
        """
        node = self._locate(member)
        source = self._text.encode("utf-8")
        line_start = source.rfind(b"\n", 0, node.start_byte) + 1
        indent = source[line_start : node.start_byte]
        if not indent.isspace():
            indent = b""

        qualified_name = constraint.kind.qualified_name
        clash = not self.has_import(qualified_name) and self.conflicting_import(qualified_name) is not None
        annotation = render_annotation(constraint, qualified=clash).encode("utf-8")
        existing = _annotation_nodes(node)
        if existing:
            self._insert(existing[-1].end_byte, b"\n" + indent + annotation)
        else:
            self._insert(node.start_byte, annotation + b"\n" + indent)
        if not clash:
            self.add_import(qualified_name)

        logger.debug("Added %s to %s %s in %s", constraint.kind, member.kind, member.name, self.path)
        return self._member(member.kind, member.name, self._locate(member))
