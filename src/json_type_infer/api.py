"""Public API functions for json-type-infer.

This module provides the four user-facing functions: infer, infer_tree, render,
and generate. Each call creates a fresh TypeInferencer / renderer, so calls
never share state.
"""

from __future__ import annotations

from typing import Any

from json_type_infer.inference import InferenceConfig, TypeInferencer
from json_type_infer.render import get_renderer
from json_type_infer.typetree import CompositeType, TypeTree
from json_type_infer.values import JsonValue, to_json_value

__all__ = ["generate", "infer", "infer_tree", "render"]


def infer(
    root: JsonValue,
    root_name: str,
    config: InferenceConfig | None = None,
) -> CompositeType:
    """Infer the composite type hierarchy of a parsed JSON object.

    Args:
        root:      A ``JsonObject`` (see ``parse_document`` / ``to_json_value``).
        root_name: Name of the root composite, used verbatim.
        config:    Engine parameters. Defaults to ``InferenceConfig()`` when None.

    Returns:
        The root ``CompositeType``; nested composites hang off ``nested_types``.

    Raises:
        InvalidInputError:  ``root`` is not an object or ``root_name`` is blank.
        DepthExceededError: ``root`` nests deeper than ``config.max_depth``.
    """
    inferencer = TypeInferencer(config=config or InferenceConfig())
    return inferencer.infer(root, root_name)


def infer_tree(
    document: Any,
    root_name: str,
    config: InferenceConfig | None = None,
) -> TypeTree:
    """Infer a ``TypeTree`` from a ``JsonValue`` or a plain Python JSON value.

    Plain values (``dict``, ``list``, ``str``, ``int``, ``float``, ``bool``,
    ``None``) are converted with ``to_json_value`` first, under the same depth
    limit the engine applies.
    """
    config = config or InferenceConfig()
    root = to_json_value(document, max_depth=config.max_depth)
    return TypeTree(infer(root, root_name, config=config))


def render(tree: TypeTree, language: str = "java", **options: Any) -> str:
    """Render ``tree`` as source text of ``language``.

    Args:
        tree:     The inferred type tree.
        language: ``"java"`` or ``"python"``.
        options:  Renderer options, e.g. ``package_name="org.acme"``.
    """
    return get_renderer(language, **options).render(tree)


def generate(
    document: Any,
    root_name: str,
    language: str = "java",
    config: InferenceConfig | None = None,
    **options: Any,
) -> str:
    """Infer types from ``document`` and render them in one call.

    Example::
        generate({"name": "Ann", "age": 30}, "Person", language="python")
    """
    tree = infer_tree(document, root_name, config=config)
    return render(tree, language, **options)
