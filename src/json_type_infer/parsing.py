"""Reading example documents from text and files.

The standard library ``json`` module does the parsing; ``to_json_value``
classifies the result. Input must be RFC 8259 JSON: the ``NaN`` and ``Infinity``
literals the decoder would otherwise accept are rejected. A key repeated inside
one object keeps the position of its first occurrence and the value of its
last, matching ``dict`` semantics.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from json_type_infer.errors import DepthExceededError, InvalidInputError
from json_type_infer.values import DEFAULT_MAX_DEPTH, JsonValue, to_json_value

__all__ = ["load_document", "parse_document"]

logger = logging.getLogger(__name__)


def parse_document(
    text: str | bytes,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> JsonValue:
    """Parse JSON text into a ``JsonValue`` tree.

    Args:
        text:      JSON text. ``bytes`` are decoded as UTF-8 (a BOM is accepted).
        max_depth: Maximum container nesting accepted.

    Raises:
        InvalidInputError:  Malformed JSON, undecodable bytes, or a number
                            literal too long to convert.
        DepthExceededError: Nesting deeper than ``max_depth`` (or deeper than
                            the interpreter's parser can recurse).
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"JSON input is not valid UTF-8: {exc}") from exc

    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Malformed JSON: {exc}") from exc
    except InvalidInputError:
        raise
    except ValueError as exc:
        # int() refuses literals beyond sys.get_int_max_str_digits()
        raise InvalidInputError(f"Unsupported JSON number: {exc}") from exc
    except RecursionError as exc:
        raise DepthExceededError(max_depth) from exc

    return to_json_value(raw, max_depth=max_depth)


def _reject_constant(name: str) -> None:
    raise InvalidInputError(f"Malformed JSON: {name} is not a JSON number")


def load_document(
    path: str | Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> JsonValue:
    """Read and parse the JSON file at ``path``.

    Raises:
        FileNotFoundError:  ``path`` does not exist.
        InvalidInputError:  The file cannot be read or is not valid JSON.
        DepthExceededError: Nesting deeper than ``max_depth``.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise InvalidInputError(f"Cannot read {path}: {exc}") from exc

    logger.debug("Parsing %s (%d bytes)", path, len(data))
    return parse_document(data, max_depth=max_depth)
