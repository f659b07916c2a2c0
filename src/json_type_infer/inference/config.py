"""InferenceConfig: immutable knobs for the type-inference engine."""

from __future__ import annotations

from dataclasses import dataclass

from json_type_infer.values import DEFAULT_MAX_DEPTH

__all__ = ["InferenceConfig"]


@dataclass(frozen=True, slots=True)
class InferenceConfig:
    """Immutable configuration for ``TypeInferencer``.

    Attributes:
        max_depth: Maximum nesting of objects and arrays (the root object counts
            as 1). Deeper documents raise ``DepthExceededError`` instead of
            exhausting the interpreter stack.
        element_suffix: Appended to the capitalized key to name the composite
            derived from a list's first element (``items`` -> ``ItemsElem``).
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    element_suffix: str = "Elem"

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if not self.element_suffix.strip():
            msg = "element_suffix must not be blank"
            raise ValueError(msg)
