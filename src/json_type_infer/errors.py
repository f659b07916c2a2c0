"""Domain errors raised by json-type-infer.

Only conditions that depend on the *input document* get a dedicated class.
Programming errors (unsupported Python values, bad configuration, unknown
renderer language) use the builtin ``TypeError`` / ``ValueError``.
"""

from __future__ import annotations

__all__ = ["DepthExceededError", "InferenceError", "InvalidInputError"]


class InferenceError(Exception):
    """Base class for every error raised while reading or inferring a document."""


class InvalidInputError(InferenceError, ValueError):
    """The document or root name cannot be turned into a type tree.

    Raised for a non-object root value, a blank root name, malformed JSON text,
    integer literals outside the signed 64-bit range, and unreadable input.
    """


class DepthExceededError(InferenceError):
    """The document nests objects/arrays deeper than the configured limit.

    Attributes:
        limit: The ``max_depth`` that was exceeded.
        path:  JSON Pointer of the container that crossed the limit.
    """

    def __init__(self, limit: int, path: str = "") -> None:
        self.limit = limit
        self.path = path
        where = f" at {path!r}" if path else ""
        super().__init__(f"JSON nesting exceeds max_depth={limit}{where}")
