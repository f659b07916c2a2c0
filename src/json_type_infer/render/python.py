"""DataclassRenderer: emits a Python module of ``@dataclass`` classes.

Nested composites become inner classes, so the module mirrors the type tree
and sibling branches may reuse a class name without clashing. References to a
nested class are qualified by the enclosing class chain (``Person.Address``):
with ``from __future__ import annotations`` the annotations stay strings, and
``typing.get_type_hints`` resolves them against the module globals.

Every field is optional and defaults to ``None``; a sample document says
nothing about which keys are always present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar, assert_never

from json_type_infer.render.identifiers import (
    PYTHON_RULES,
    NameAllocator,
    pascal_case,
    snake_case,
)
from json_type_infer.typetree.nodes import (
    CompositeType,
    ListType,
    NamedType,
    ScalarKind,
    ScalarType,
    TypeRef,
    TypeTree,
)

__all__ = ["DataclassRenderer"]

logger = logging.getLogger(__name__)

_BUILTIN: dict[ScalarKind, str] = {
    ScalarKind.INTEGER: "int",
    ScalarKind.LONG: "int",
    ScalarKind.BOOLEAN: "bool",
    ScalarKind.DOUBLE: "float",
    ScalarKind.STRING: "str",
    ScalarKind.ANY_OBJECT: "Any",
}

# Names the generated class bodies look up at runtime or in annotations.
# A field with one of these names would shadow it inside the class namespace.
_RESERVED_FIELD_NAMES = frozenset(
    {"Any", "bool", "dataclass", "field", "float", "int", "list", "str"}
)

_MODULE_DOCSTRING = '"""Data classes generated from an example JSON document."""'


def python_class_name(name: str) -> str:
    """The Python spelling of a composite name; a pure function of ``name``."""
    ident = PYTHON_RULES.to_identifier(name, pascal_case, "Type")
    return f"{ident}_" if ident == "Any" else ident


@dataclass(frozen=True)
class DataclassRenderer:
    """Renders a TypeTree as a Python module.

    Fields keep their JSON key as the attribute name when it is a legal,
    non-reserved identifier. Otherwise the key is snake-cased and recorded in
    ``field(metadata={"json_key": ...})``.

    Attributes:
        package_name: Optional dotted package; only affects ``relative_path``.
        indent:       Spaces per indentation level.
        docstring:    Emit a module docstring.
    """

    package_name: str | None = None
    indent: int = 4
    docstring: bool = True
    language: ClassVar[str] = "python"

    def __post_init__(self) -> None:
        if self.indent < 1:
            msg = f"indent must be >= 1, got {self.indent}"
            raise ValueError(msg)
        if self.package_name:
            for segment in self.package_name.split("."):
                if not PYTHON_RULES.is_valid(segment):
                    msg = f"invalid Python package name: {self.package_name!r}"
                    raise ValueError(msg)

    def render(self, tree: TypeTree) -> str:
        root_name = python_class_name(tree.root.name)
        emitter = _PythonEmitter(" " * self.indent, root_name)
        emitter.emit_class(tree.root, level=0, qualname=root_name)

        out: list[str] = []
        if self.docstring:
            out += [_MODULE_DOCSTRING, ""]
        out += ["from __future__ import annotations", ""]
        dataclass_names = "dataclass, field" if emitter.uses_field else "dataclass"
        out.append(f"from dataclasses import {dataclass_names}")
        if emitter.uses_any:
            out.append("from typing import Any")
        out += ["", ""]
        out += emitter.lines
        logger.debug("Rendered %d Python line(s) for %s", len(out), root_name)
        return "\n".join(out) + "\n"

    def relative_path(self, tree: TypeTree) -> PurePosixPath:
        parts = self.package_name.split(".") if self.package_name else []
        module = PYTHON_RULES.to_identifier(
            snake_case(tree.root.name), snake_case, "types"
        )
        return PurePosixPath(*parts, f"{module}.py")


@dataclass
class _PythonEmitter:
    indent: str
    root_name: str
    lines: list[str] = field(default_factory=list)
    uses_any: bool = False
    uses_field: bool = False

    def emit_class(self, composite: CompositeType, level: int, qualname: str) -> None:
        pad = self.indent * level
        member_pad = pad + self.indent
        class_name = python_class_name(composite.name)
        self.lines.append(f"{pad}@dataclass")
        self.lines.append(f"{pad}class {class_name}:")

        if not composite.fields and not composite.nested_types:
            self.lines.append(f"{member_pad}pass")
            return

        reserved = {
            *_RESERVED_FIELD_NAMES,
            self.root_name,
            *(python_class_name(nested.name) for nested in composite.nested_types),
        }
        names = NameAllocator(PYTHON_RULES, snake_case, "field", reserved=reserved)
        for fd in composite.fields:
            ident = names.allocate(fd.name)
            annotation = self.annotation(fd.type, qualname)
            if ident == fd.name:
                default = "None"
            else:
                self.uses_field = True
                default = f"field(default=None, metadata={{'json_key': {fd.name!r}}})"
            self.lines.append(f"{member_pad}{ident}: {annotation} = {default}")

        for nested in composite.nested_types:
            self.lines.append("")
            nested_qualname = f"{qualname}.{python_class_name(nested.name)}"
            self.emit_class(nested, level + 1, nested_qualname)

    def annotation(self, type_ref: TypeRef, qualname: str) -> str:
        if isinstance(type_ref, ScalarType) and type_ref.kind is ScalarKind.ANY_OBJECT:
            self.uses_any = True
            return "Any"
        return f"{self.python_type(type_ref, qualname)} | None"

    def python_type(self, type_ref: TypeRef, qualname: str) -> str:
        match type_ref:
            case ScalarType(kind=kind):
                if kind is ScalarKind.ANY_OBJECT:
                    self.uses_any = True
                return _BUILTIN[kind]
            case ListType(element=element):
                return f"list[{self.python_type(element, qualname)}]"
            case NamedType(name=name):
                return f"{qualname}.{python_class_name(name)}"
            case _:
                assert_never(type_ref)
