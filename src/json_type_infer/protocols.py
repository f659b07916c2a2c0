"""TypeRenderer Protocol for the json-type-infer renderer extension point.

Defines the structural interface all renderers must satisfy. Users can plug in
a renderer for another language without inheriting from any base class: any
class with conformant ``render`` and ``relative_path`` methods passes
``isinstance`` checks.

Example::

    from pathlib import PurePosixPath

    from json_type_infer.protocols import TypeRenderer
    from json_type_infer.typetree import TypeTree

    class OutlineRenderer:
        language = "outline"

        def render(self, tree: TypeTree) -> str:
            return "\\n".join(name for name, _ in tree.root.walk()) + "\\n"

        def relative_path(self, tree: TypeTree) -> PurePosixPath:
            return PurePosixPath(f"{tree.root.name}.txt")

    assert isinstance(OutlineRenderer(), TypeRenderer)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import PurePosixPath

    from json_type_infer.typetree import TypeTree


@runtime_checkable
class TypeRenderer(Protocol):
    """Structural protocol for type-tree renderers.

    A renderer must:
    - Emit one top-level type for ``tree.root`` and one inner type per entry of
      each composite's ``nested_types``, fields typed per their ``TypeRef``.
    - Map scalar kinds to the language's boxed/nullable scalar types, lists to
      its generic sequence type and ``AnyObject`` to its broadest type.
    - Return the path, relative to an output directory, that the source belongs
      at (package directories included).
    """

    language: str

    def render(self, tree: TypeTree) -> str: ...

    def relative_path(self, tree: TypeTree) -> PurePosixPath: ...
