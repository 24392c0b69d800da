"""Selector builder error types."""

from __future__ import annotations

from object_tasks.selector.model import FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base class for errors raised while building a selector."""


class OrderViolation(SelectorError):
    """Raised when a fragment ranks lower than the fragment before it."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind):
        self.kind = kind
        self.previous = previous
        super().__init__(ORDER_MESSAGE)


class DuplicateViolation(SelectorError):
    """Raised when element, id or pseudo-element is appended twice."""

    def __init__(self, kind: FragmentKind):
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)
