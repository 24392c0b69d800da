"""Entry points that start a new selector chain.

Each function returns a fresh :class:`SelectorBuilder` holding one fragment::

    from object_tasks.selector import facade as css

    css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
"""

from __future__ import annotations

from object_tasks.selector.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    selector1: SelectorBuilder, combinator: str, selector2: SelectorBuilder
) -> SelectorBuilder:
    """Join two built selectors with *combinator* into a new builder."""
    return SelectorBuilder().combine(
        selector1.stringify(), combinator, selector2.stringify()
    )


def __getattr__(name: str):
    # ``class`` is a keyword; ``getattr(facade, "class")`` reaches class_.
    if name == "class":
        return class_
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
