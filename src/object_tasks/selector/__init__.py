from object_tasks.selector import facade
from object_tasks.selector.builder import SelectorBuilder
from object_tasks.selector.errors import (
    DuplicateViolation,
    OrderViolation,
    SelectorError,
)
from object_tasks.selector.model import Combinator, FragmentKind

__all__ = [
    "facade",
    "SelectorBuilder",
    "SelectorError",
    "OrderViolation",
    "DuplicateViolation",
    "Combinator",
    "FragmentKind",
]
