"""Render subpackage: turning a TypeTree into host-language source text.

Two renderers ship with the package, both satisfying the ``TypeRenderer``
Protocol structurally:

- ``JavaRenderer``: a public class with ``public static`` inner classes
- ``DataclassRenderer``: a Python module of nested ``@dataclass`` classes

``get_renderer`` looks a renderer up by language name.
"""

from __future__ import annotations

from typing import Any

from json_type_infer.protocols import TypeRenderer
from json_type_infer.render.java import JavaRenderer
from json_type_infer.render.python import DataclassRenderer

__all__ = [
    "DataclassRenderer",
    "JavaRenderer",
    "available_languages",
    "get_renderer",
]

_RENDERERS: dict[str, type[JavaRenderer] | type[DataclassRenderer]] = {
    JavaRenderer.language: JavaRenderer,
    DataclassRenderer.language: DataclassRenderer,
}


def available_languages() -> list[str]:
    """Return the language names ``get_renderer`` accepts, sorted."""
    return sorted(_RENDERERS)


def get_renderer(language: str, **options: Any) -> TypeRenderer:
    """Create the renderer for ``language`` with renderer-specific ``options``.

    Raises:
        ValueError: Unknown language, or options the renderer rejects.
    """
    try:
        renderer_cls = _RENDERERS[language.lower()]
    except KeyError:
        msg = (
            f"unknown language {language!r}; "
            f"expected one of {', '.join(available_languages())}"
        )
        raise ValueError(msg) from None
    try:
        return renderer_cls(**options)
    except TypeError as exc:
        msg = f"invalid options for {language!r} renderer: {exc}"
        raise ValueError(msg) from exc
