"""Name derivation for composites discovered during inference.

Names are derived from the JSON key alone: no collision detection, no
sanitisation. Renderers turn names that are not valid identifiers in their
language into ones that are.
"""

from __future__ import annotations

__all__ = ["composite_name", "element_name", "is_blank"]


def is_blank(text: str | None) -> bool:
    """True for ``None``, the empty string, and whitespace-only strings."""
    return text is None or not text.strip()


def composite_name(key: str) -> str:
    """Upper-case the first character of ``key`` and keep the rest unchanged.

    Example::
        composite_name("address")   # "Address"
        composite_name("userInfo")  # "UserInfo"
    """
    return key[:1].upper() + key[1:]


def element_name(key: str, suffix: str = "Elem") -> str:
    """Name of the composite derived from the first element of list ``key``."""
    return composite_name(key) + suffix
