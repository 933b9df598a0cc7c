"""Turn raw enum values into safe, unique member keys.

``to_member_key`` splits a value into ASCII letter/digit runs and joins them
in PascalCase::

    "in-progress" -> "InProgress"
    "v2_beta"     -> "V2Beta"
    "123"         -> "_123"
    "class"       -> "Class_"
    "---"         -> "Value"

Keys are then made unique within one enum by ``KeyAllocator``.
"""

import re
from collections.abc import Iterable

FALLBACK_KEY = "Value"

# Keywords and commonly reserved names, in the casing keys are produced in
RESERVED_IDENTIFIERS: frozenset[str] = frozenset(
    {
        "Default", "Class", "Function", "Var", "Let", "Const", "Enum",
        "Export", "Import", "Type", "Interface", "Extends", "Implements",
        "Public", "Private", "Protected", "New", "Delete", "Return",
        "Switch", "Case", "For", "While", "If", "Else", "Try", "Catch",
        "Finally", "Throw", "In", "Of", "This", "Super",
        "Null", "True", "False", "Void", "Any", "Never", "Unknown",
    },
)

_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def split_words(value: str) -> list[str]:
    """Return the maximal ASCII letter/digit runs of ``value``."""
    return _WORD_PATTERN.findall(value)


def to_member_key(value: str, reserved: frozenset[str] = RESERVED_IDENTIFIERS) -> str:
    """Normalize a raw enum value into an identifier-style key.

    Args:
        value: Enum value as declared in the document.
        reserved: Keys that get a trailing underscore.

    Returns:
        Non-empty PascalCase key that does not start with a digit.
    """
    words = split_words(value.strip())
    if not words:
        return FALLBACK_KEY

    key = "".join(word.lower().capitalize() for word in words)

    if key[0].isdigit():
        key = "_" + key

    if key in reserved:
        key += "_"

    return key


def extend_reserved(extra: Iterable[str]) -> frozenset[str]:
    """Return the reserved set widened by configured words."""
    return RESERVED_IDENTIFIERS | frozenset(extra)


class KeyAllocator:
    """Hands out unique keys for the members of a single enum.

    The first occurrence of a key is returned unchanged. Later occurrences
    get ``_1``, ``_2``, ... in declaration order, so the first member's key
    never depends on what follows it. Create one allocator per enum.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}
        self.collisions = 0

    def allocate(self, key: str) -> str:
        """Return ``key`` or a suffixed variant not yet handed out."""
        if key not in self._seen:
            self._seen[key] = 0
            return key

        self._seen[key] += 1
        self.collisions += 1
        return f"{key}_{self._seen[key]}"
