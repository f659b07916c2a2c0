"""TypeInferencer: derives a composite type hierarchy from one example document.

Field inference and list inference are mutually recursive functions over the
closed ``JsonValue`` union. Nothing is accumulated in a shared builder: every
recursive call returns the composites it derived, and the caller attaches them
to its own ``nested_types``.

Policies:

- Blank keys are dropped.
- ``null`` becomes ``AnyObject``; it never produces a composite.
- An empty list becomes ``List<AnyObject>``.
- A list is typed from its **first element only**. Later elements are never
  consulted, so a list mixing objects and scalars, or objects of different
  shapes, is typed after whatever comes first.
- A list of lists recurses with the same key, so ``[[{"a": 1}]]`` under
  ``items`` yields ``List<List<ItemsElem>>``.
- Derived names are not checked for collisions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, assert_never

from json_type_infer.errors import DepthExceededError, InvalidInputError
from json_type_infer.inference.config import InferenceConfig
from json_type_infer.typetree.naming import composite_name, element_name, is_blank
from json_type_infer.typetree.nodes import (
    ANY_OBJECT,
    CompositeType,
    FieldDef,
    ListType,
    NamedType,
    ScalarKind,
    ScalarType,
    TypeRef,
    TypeTree,
)
from json_type_infer.values import (
    JsonArray,
    JsonBool,
    JsonFloat,
    JsonInt,
    JsonLong,
    JsonNull,
    JsonObject,
    JsonScalar,
    JsonString,
    JsonValue,
    pointer_child,
)

__all__ = ["FieldInference", "TypeInferencer"]

logger = logging.getLogger(__name__)


class FieldInference(NamedTuple):
    """A field's definition plus the composites derived while typing it."""

    field: FieldDef
    nested_types: tuple[CompositeType, ...]


@dataclass
class TypeInferencer:
    """Infers a ``CompositeType`` tree from a JSON object.

    The inferencer holds no per-call state; one instance can serve any number
    of calls, from any number of threads.

    Depth accounting: the root object is depth 1 and every object or array
    below it adds one. A container deeper than ``config.max_depth`` raises
    ``DepthExceededError``.

    Example::
        inferencer = TypeInferencer()
        person = inferencer.infer(parse_document('{"address": {"city": "NY"}}'), "Person")
        # person.fields        -> (FieldDef("address", NamedType("Address")),)
        # person.nested_types  -> (CompositeType("Address", (FieldDef("city", String),)),)
    """

    config: InferenceConfig = field(default_factory=InferenceConfig)

    def infer(self, root: JsonValue, root_name: str) -> CompositeType:
        """Infer the composite type of ``root``, named ``root_name`` verbatim.

        Raises:
            InvalidInputError:  ``root`` is not a ``JsonObject`` or ``root_name``
                                is blank.
            DepthExceededError: ``root`` nests deeper than ``config.max_depth``.
        """
        if not isinstance(root, JsonObject):
            msg = f"root value must be a JSON object, got {type(root).__name__}"
            raise InvalidInputError(msg)
        if is_blank(root_name):
            msg = "root name must not be blank"
            raise InvalidInputError(msg)
        return self._derive_composite(root_name, root, path="", depth=1)

    def infer_tree(self, root: JsonValue, root_name: str) -> TypeTree:
        return TypeTree(self.infer(root, root_name))

    def infer_field(
        self,
        key: str,
        value: JsonValue,
        *,
        path: str = "",
        depth: int = 1,
    ) -> FieldInference | None:
        """Type one ``key``/``value`` member of an object.

        Args:
            key:   The member's key; becomes the field name unchanged.
            value: The member's value.
            path:  JSON Pointer of the enclosing object.
            depth: Depth of the enclosing object.

        Returns:
            The field and the composites it derived, or ``None`` for a blank key.
        """
        if is_blank(key):
            logger.debug("Skipping blank key at %r", path or "/")
            return None
        type_ref, nested = self._infer_value(
            key, value, pointer_child(path, key), depth
        )
        return FieldInference(FieldDef(key, type_ref), nested)

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _infer_value(
        self,
        key: str,
        value: JsonValue,
        path: str,
        depth: int,
    ) -> tuple[TypeRef, tuple[CompositeType, ...]]:
        match value:
            case JsonObject():
                composite = self._derive_composite(
                    composite_name(key), value, path, depth + 1
                )
                return NamedType(composite.name), (composite,)
            case JsonArray():
                return self._infer_list(key, value, path, depth + 1)
            case _:
                return _scalar_type(value), ()

    def _infer_list(
        self,
        key: str,
        array: JsonArray,
        path: str,
        depth: int,
    ) -> tuple[ListType, tuple[CompositeType, ...]]:
        self._check_depth(depth, path)
        if not array.items:
            return ListType(ANY_OBJECT), ()

        first = array.items[0]
        first_path = pointer_child(path, 0)
        match first:
            case JsonObject():
                name = element_name(key, self.config.element_suffix)
                composite = self._derive_composite(name, first, first_path, depth + 1)
                return ListType(NamedType(composite.name)), (composite,)
            case JsonArray():
                inner, nested = self._infer_list(key, first, first_path, depth + 1)
                return ListType(inner), nested
            case _:
                return ListType(_scalar_type(first)), ()

    def _derive_composite(
        self,
        name: str,
        obj: JsonObject,
        path: str,
        depth: int,
    ) -> CompositeType:
        self._check_depth(depth, path)
        fields: list[FieldDef] = []
        nested: list[CompositeType] = []
        for key, value in obj.items():
            inferred = self.infer_field(key, value, path=path, depth=depth)
            if inferred is None:
                continue
            fields.append(inferred.field)
            nested.extend(inferred.nested_types)

        logger.debug(
            "Derived composite %s at %r: %d field(s), %d nested type(s)",
            name,
            path or "/",
            len(fields),
            len(nested),
        )
        return CompositeType(name, tuple(fields), tuple(nested))

    def _check_depth(self, depth: int, path: str) -> None:
        if depth > self.config.max_depth:
            raise DepthExceededError(self.config.max_depth, path)


def _scalar_type(value: JsonScalar) -> ScalarType:
    match value:
        case JsonNull():
            return ANY_OBJECT
        case JsonBool():
            return ScalarType(ScalarKind.BOOLEAN)
        case JsonInt():
            return ScalarType(ScalarKind.INTEGER)
        case JsonLong():
            return ScalarType(ScalarKind.LONG)
        case JsonFloat():
            return ScalarType(ScalarKind.DOUBLE)
        case JsonString():
            return ScalarType(ScalarKind.STRING)
        case _:
            assert_never(value)
