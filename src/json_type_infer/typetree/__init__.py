"""Typetree subpackage: the data model produced by inference.

Re-exports the public API for the typetree module:
- ScalarKind / ScalarType / ListType / NamedType: the TypeRef variants
- FieldDef, CompositeType, TypeTree: the composite hierarchy
- composite_name, element_name: naming rules for derived composites
"""

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
    "composite_name",
    "element_name",
    "is_blank",
]
