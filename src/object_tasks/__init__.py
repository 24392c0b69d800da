"""Object utilities and a fluent CSS selector builder."""

from object_tasks.objects import (
    Circle,
    ParseError,
    Rectangle,
    SerializerConfig,
    from_json,
    get_json,
)
from object_tasks.selector import (
    Combinator,
    DuplicateViolation,
    FragmentKind,
    OrderViolation,
    SelectorBuilder,
    SelectorError,
    facade,
)

__all__ = [
    # objects
    "Rectangle",
    "Circle",
    "get_json",
    "from_json",
    "ParseError",
    "SerializerConfig",
    # selector
    "facade",
    "SelectorBuilder",
    "SelectorError",
    "OrderViolation",
    "DuplicateViolation",
    "Combinator",
    "FragmentKind",
]
