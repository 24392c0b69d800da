"""Selector model: fragment kinds and combinator tokens."""

from __future__ import annotations

from enum import Enum, StrEnum


class FragmentKind(Enum):
    """Kinds of simple selector fragments, declared in their required order.

    The declaration order is the rank: a compound selector must list its
    fragments with non-decreasing rank.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        """Render *value* in this kind's CSS syntax (no escaping)."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """Tokens that join two selectors into a complex selector."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
