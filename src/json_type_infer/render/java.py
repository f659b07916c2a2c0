"""JavaRenderer: emits a Java source file for a TypeTree.

Layout follows what JavaPoet produces for a class builder: a ``package`` line,
sorted imports (``java.lang`` skipped), the root as a ``public class``, one
package-private field per ``FieldDef`` and one ``public static class`` per
nested composite, members separated by blank lines, two-space indentation.

Example output for ``{"name": "Ann", "address": {"city": "NY"}}``::

    package com.example;

    public class Person {
      String name;

      Address address;

      public static class Address {
        String city;
      }
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar, assert_never

from json_type_infer.render.identifiers import (
    JAVA_RULES,
    NameAllocator,
    camel_case,
    pascal_case,
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

__all__ = ["JavaRenderer"]

logger = logging.getLogger(__name__)

_BOXED: dict[ScalarKind, str] = {
    ScalarKind.INTEGER: "Integer",
    ScalarKind.LONG: "Long",
    ScalarKind.BOOLEAN: "Boolean",
    ScalarKind.DOUBLE: "Double",
    ScalarKind.STRING: "String",
    ScalarKind.ANY_OBJECT: "Object",
}

_LIST_IMPORT = "java.util.List"
_JSON_PROPERTY_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"


def java_class_name(name: str) -> str:
    """The Java spelling of a composite name; a pure function of ``name``."""
    return JAVA_RULES.to_identifier(name, pascal_case, "Type")


@dataclass(frozen=True)
class JavaRenderer:
    """Renders a TypeTree as one Java compilation unit.

    Fields keep their JSON key as the Java name when it is a legal identifier.
    Otherwise the key is camel-cased and the field annotated with Jackson's
    ``@JsonProperty`` so the mapping back to the document is not lost.

    Attributes:
        package_name: Dotted package; empty string for the default package.
        indent:       One level of indentation.
    """

    package_name: str = "com.example"
    indent: str = "  "
    language: ClassVar[str] = "java"

    def __post_init__(self) -> None:
        if self.package_name:
            for segment in self.package_name.split("."):
                if not JAVA_RULES.is_valid(segment):
                    msg = f"invalid Java package name: {self.package_name!r}"
                    raise ValueError(msg)

    def render(self, tree: TypeTree) -> str:
        emitter = _JavaEmitter(self.indent)
        emitter.emit_class(tree.root, level=0, modifiers="public")

        out: list[str] = []
        if self.package_name:
            out += [f"package {self.package_name};", ""]
        if emitter.imports:
            out += [f"import {name};" for name in sorted(emitter.imports)]
            out.append("")
        out += emitter.lines
        logger.debug("Rendered %d Java line(s) for %s", len(out), tree.root.name)
        return "\n".join(out) + "\n"

    def relative_path(self, tree: TypeTree) -> PurePosixPath:
        parts = self.package_name.split(".") if self.package_name else []
        return PurePosixPath(*parts, f"{java_class_name(tree.root.name)}.java")


@dataclass
class _JavaEmitter:
    indent: str
    lines: list[str] = field(default_factory=list)
    imports: set[str] = field(default_factory=set)

    def emit_class(self, composite: CompositeType, level: int, modifiers: str) -> None:
        pad = self.indent * level
        member_pad = pad + self.indent
        self.lines.append(f"{pad}{modifiers} class {java_class_name(composite.name)} {{")

        names = NameAllocator(JAVA_RULES, camel_case, "field")
        first_member = True
        for fd in composite.fields:
            if not first_member:
                self.lines.append("")
            first_member = False
            ident = names.allocate(fd.name)
            if ident != fd.name:
                self.imports.add(_JSON_PROPERTY_IMPORT)
                self.lines.append(f"{member_pad}@JsonProperty({json.dumps(fd.name)})")
            self.lines.append(f"{member_pad}{self.java_type(fd.type)} {ident};")

        for nested in composite.nested_types:
            if not first_member:
                self.lines.append("")
            first_member = False
            self.emit_class(nested, level + 1, "public static")

        self.lines.append(f"{pad}}}")

    def java_type(self, type_ref: TypeRef) -> str:
        match type_ref:
            case ScalarType(kind=kind):
                return _BOXED[kind]
            case ListType(element=element):
                self.imports.add(_LIST_IMPORT)
                return f"List<{self.java_type(element)}>"
            case NamedType(name=name):
                return java_class_name(name)
            case _:
                assert_never(type_ref)
