"""Inference subpackage: the recursive type-inference engine.

- InferenceConfig: immutable engine parameters (depth limit, element suffix)
- TypeInferencer: turns a JsonObject into a CompositeType / TypeTree
- FieldInference: result of typing a single object member
"""

from json_type_infer.inference.config import InferenceConfig
from json_type_infer.inference.inferencer import FieldInference, TypeInferencer

__all__ = ["FieldInference", "InferenceConfig", "TypeInferencer"]
