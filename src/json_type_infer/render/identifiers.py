"""Turning JSON keys and derived type names into target-language identifiers.

Names that are already valid identifiers are kept verbatim, so generated code
mirrors the document wherever it can. Anything else is split into words and
re-joined in the requested case:

- camelCase (e.g. "camelCase" -> "camel case")
- PascalCase (e.g. "PascalCase" -> "pascal case")
- snake_case and kebab-case (e.g. "user-name" -> "user name")
- acronyms (e.g. "APIKey" -> "api key", "URLParser" -> "url parser")
- digit boundaries (e.g. "address2" -> "address 2", "v2Config" -> "v 2 config")
- any other punctuation or whitespace acts as a separator

Word splitting is memoised in a module-level LRU cache: documents repeat the
same keys many times across list elements and nested objects.
"""

from __future__ import annotations

import keyword
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from cachetools import LRUCache, cached

__all__ = [
    "JAVA_RULES",
    "PYTHON_RULES",
    "IdentifierRules",
    "NameAllocator",
    "camel_case",
    "pascal_case",
    "snake_case",
    "split_words",
]

# Matches every run of non-word characters and underscores
_SEP = re.compile(r"[\W_]+")

# Matches camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Matches acronym runs: uppercase letters before an uppercase+lowercase pair
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Letter/digit boundaries in both directions. Applied twice: each match consumes
# both characters, so the opposite boundary of an isolated digit ("2C" in
# "v2Config") only becomes visible after the first substitution.
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")

_JAVA_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_JAVA_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_$]")

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "false", "final", "finally", "float", "for",
        "goto", "if", "implements", "import", "instanceof", "int", "interface",
        "long", "native", "new", "null", "package", "private", "protected",
        "public", "return", "short", "static", "strictfp", "super", "switch",
        "synchronized", "this", "throw", "throws", "transient", "true", "try",
        "void", "volatile", "while", "_",
    }
)  # fmt: skip


@cached(cache=LRUCache(maxsize=4096))
def split_words(text: str) -> tuple[str, ...]:
    """Split ``text`` into lowercase words.

    Example::
        split_words("userName")    # ("user", "name")
        split_words("APIKey")      # ("api", "key")
        split_words("first-name")  # ("first", "name")
    """
    s = _SEP.sub(" ", text)
    s = _UPPER_LOWER.sub(r"\1 \2", s)
    s = _UPPER_RUN.sub(r"\1 \2", s)
    s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
    s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
    return tuple(s.lower().split())


def snake_case(text: str) -> str:
    return "_".join(split_words(text))


def camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def _is_python_identifier(name: str) -> bool:
    return name.isidentifier()


def _is_java_identifier(name: str) -> bool:
    return _JAVA_IDENTIFIER.fullmatch(name) is not None


def _strip_java_invalid(name: str) -> str:
    return _JAVA_INVALID_CHARS.sub("", name)


def _keep(name: str) -> str:
    return name


def _never(name: str) -> bool:
    return False


def _is_double_underscore(name: str) -> bool:
    # Dunders shadow class machinery; other "__x" names are mangled per class
    return name.startswith("__")


@dataclass(frozen=True, slots=True)
class IdentifierRules:
    """What counts as an identifier in one target language.

    Attributes:
        keywords:        Reserved words that cannot be used as identifiers.
        is_identifier:   Lexical check, ignoring keywords.
        strip_invalid:   Removes characters the language never allows.
        is_reserved:     Names that are lexically fine but must not be declared,
                         e.g. Python names starting with a double underscore.
        keyword_suffix:  Appended to a name that clashes with a reserved word.
        counter_sep:     Placed between a name and its disambiguating counter.
    """

    keywords: frozenset[str]
    is_identifier: Callable[[str], bool]
    strip_invalid: Callable[[str], str] = _keep
    is_reserved: Callable[[str], bool] = _never
    keyword_suffix: str = "_"
    counter_sep: str = "_"

    def is_valid(self, name: str) -> bool:
        return (
            self.is_identifier(name)
            and name not in self.keywords
            and not self.is_reserved(name)
        )

    def to_identifier(
        self,
        text: str,
        case: Callable[[str], str],
        fallback: str,
    ) -> str:
        """Return ``text`` if it is a valid identifier, else a converted form.

        Conversion re-cases the words of ``text`` with ``case``, prefixes an
        underscore when the result starts with a digit, uses ``fallback`` when
        nothing usable is left, and appends ``keyword_suffix`` to reserved words.
        """
        if self.is_valid(text):
            return text
        candidate = self.strip_invalid(case(text))
        if candidate[:1].isdigit():
            candidate = f"_{candidate}"
        if not self.is_identifier(candidate):
            candidate = fallback
        if candidate in self.keywords:
            candidate += self.keyword_suffix
        return candidate


PYTHON_RULES = IdentifierRules(
    keywords=frozenset(keyword.kwlist),
    is_identifier=_is_python_identifier,
    is_reserved=_is_double_underscore,
)

JAVA_RULES = IdentifierRules(
    keywords=JAVA_KEYWORDS,
    is_identifier=_is_java_identifier,
    strip_invalid=_strip_java_invalid,
    counter_sep="",
)


class NameAllocator:
    """Hands out unique identifiers within one scope (e.g. one class body).

    Args:
        rules:    Identifier rules of the target language.
        case:     Re-casing applied to names that are not valid identifiers.
        fallback: Used when a name has no usable characters at all.
        reserved: Names the scope must never hand out (e.g. names the
                  generated code itself refers to).
    """

    def __init__(
        self,
        rules: IdentifierRules,
        case: Callable[[str], str],
        fallback: str,
        reserved: Iterable[str] = (),
    ) -> None:
        self._rules = rules
        self._case = case
        self._fallback = fallback
        self._reserved = frozenset(reserved)
        self._used: set[str] = set()

    def allocate(self, raw: str) -> str:
        """Return a unique identifier for ``raw`` and mark it as used."""
        candidate = self._rules.to_identifier(raw, self._case, self._fallback)
        if candidate in self._reserved:
            candidate += self._rules.keyword_suffix
        base = candidate
        counter = 2
        while candidate in self._used or candidate in self._reserved:
            candidate = f"{base}{self._rules.counter_sep}{counter}"
            counter += 1
        self._used.add(candidate)
        return candidate
