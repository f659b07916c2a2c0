"""json-type-infer - class hierarchies inferred from an example JSON document."""

from __future__ import annotations

from json_type_infer.api import generate, infer, infer_tree, render
from json_type_infer.errors import DepthExceededError, InferenceError, InvalidInputError
from json_type_infer.inference import InferenceConfig, TypeInferencer
from json_type_infer.parsing import load_document, parse_document
from json_type_infer.typetree import (
    CompositeType,
    FieldDef,
    ListType,
    NamedType,
    ScalarKind,
    ScalarType,
    TypeTree,
)
from json_type_infer.values import to_json_value

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompositeType",
    "DepthExceededError",
    "FieldDef",
    "InferenceConfig",
    "InferenceError",
    "InvalidInputError",
    "ListType",
    "NamedType",
    "ScalarKind",
    "ScalarType",
    "TypeInferencer",
    "TypeTree",
    "generate",
    "infer",
    "infer_tree",
    "load_document",
    "parse_document",
    "render",
    "to_json_value",
]
