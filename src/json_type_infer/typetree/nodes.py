"""Type-tree data types produced by the inference engine.

A field's declared type is a ``TypeRef``: a scalar kind, a list of another
``TypeRef``, or a reference to a ``CompositeType`` defined in the owning
composite's ``nested_types``. All classes are frozen; collections are tuples,
so a finished tree can be shared freely.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TypeAlias

__all__ = [
    "ANY_OBJECT",
    "CompositeType",
    "FieldDef",
    "ListType",
    "NamedType",
    "ScalarKind",
    "ScalarType",
    "TypeRef",
    "TypeTree",
]


class ScalarKind(StrEnum):
    """The primitive value categories a field can hold.

    StrEnum values are the lowercased member names:
    - INTEGER    -> "integer"    : 32-bit integer literal
    - LONG       -> "long"       : 64-bit integer literal
    - BOOLEAN    -> "boolean"
    - DOUBLE     -> "double"     : any literal with a fraction or exponent
    - STRING     -> "string"
    - ANY_OBJECT -> "any_object" : null, or an element type nothing is known about
    """

    INTEGER = auto()
    LONG = auto()
    BOOLEAN = auto()
    DOUBLE = auto()
    STRING = auto()
    ANY_OBJECT = auto()

    @property
    def display(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))


@dataclass(frozen=True, slots=True)
class ScalarType:
    kind: ScalarKind

    @property
    def display(self) -> str:
        return self.kind.display


@dataclass(frozen=True, slots=True)
class ListType:
    """An ordered sequence whose elements all have type ``element``."""

    element: TypeRef

    @property
    def display(self) -> str:
        return f"List<{self.element.display}>"


@dataclass(frozen=True, slots=True)
class NamedType:
    """A reference to a composite in the owning composite's ``nested_types``."""

    name: str

    @property
    def display(self) -> str:
        return self.name


TypeRef: TypeAlias = ScalarType | ListType | NamedType

ANY_OBJECT = ScalarType(ScalarKind.ANY_OBJECT)


@dataclass(frozen=True, slots=True)
class FieldDef:
    """A named, typed field. ``name`` is the JSON key, unmodified."""

    name: str
    type: TypeRef


@dataclass(frozen=True, slots=True)
class CompositeType:
    """A record-like type with ordered fields and the composites it owns.

    Attributes:
        name:         Type name. Unique only among the types that share an owner,
                      and not even there when two keys capitalize to the same
                      name (see ``TypeTree.name_collisions``).
        fields:       Fields in JSON key order.
        nested_types: Composites derived from this type's fields, in
                      first-discovery order.
    """

    name: str
    fields: tuple[FieldDef, ...] = ()
    nested_types: tuple[CompositeType, ...] = ()

    def field(self, name: str) -> FieldDef:
        """Return the field called ``name``; raises ``KeyError`` if absent."""
        for fd in self.fields:
            if fd.name == name:
                return fd
        raise KeyError(name)

    def nested(self, name: str) -> CompositeType:
        """Return the first directly-nested composite called ``name``."""
        for composite in self.nested_types:
            if composite.name == name:
                return composite
        raise KeyError(name)

    def walk(self, prefix: str = "") -> Iterator[tuple[str, CompositeType]]:
        """Yield ``(qualified_name, composite)`` for this type and every descendant.

        Pre-order, nested types in declaration order. Qualified names join the
        enclosing names with ``.``, e.g. ``"Person.Address"``.
        """
        qualname = f"{prefix}.{self.name}" if prefix else self.name
        yield qualname, self
        for composite in self.nested_types:
            yield from composite.walk(qualname)


@dataclass(frozen=True, slots=True)
class TypeTree:
    """The complete result of inferring one document."""

    root: CompositeType

    def composites(self) -> list[CompositeType]:
        return [composite for _, composite in self.root.walk()]

    def name_collisions(self) -> list[str]:
        """Return qualified names that more than one sibling composite shares.

        Collisions are a tolerated property of the naming rule (``address`` and
        ``Address`` both derive ``Address``); renderers emit them as-is.
        """
        collisions: list[str] = []
        for qualname, composite in self.root.walk():
            counts = Counter(nested.name for nested in composite.nested_types)
            collisions.extend(
                f"{qualname}.{name}" for name, count in counts.items() if count > 1
            )
        return collisions
