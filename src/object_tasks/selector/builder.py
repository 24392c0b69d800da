"""Fluent CSS selector builder with ordering and uniqueness checks.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class may repeat.  Compound selectors are
joined into complex ones with :meth:`SelectorBuilder.combine`.

A builder that has raised is left in a partial state and should be
discarded.
"""

from __future__ import annotations

import logging
from collections import Counter

from object_tasks.selector.errors import DuplicateViolation, OrderViolation
from object_tasks.selector.model import FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and renders them with :meth:`stringify`."""

    def __init__(self) -> None:
        self.text = ""
        self.kinds_seen: list[FragmentKind] = []
        self.counts: Counter[FragmentKind] = Counter()

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        selector1: SelectorBuilder | str,
        combinator: str,
        selector2: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Append ``"<selector1> <combinator> <selector2>"`` verbatim."""
        self.text += f"{selector1} {combinator} {selector2}"
        return self

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"

    def __getattr__(self, name: str):
        # ``class`` is a keyword, so ``getattr(builder, "class")`` is the only
        # way to reach it by its CSS name.
        if name == "class":
            return self.class_
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    # --- internals ------------------------------------------------------------

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self.kinds_seen.append(kind)
        self._check_order(kind)

        if kind.unique:
            self.counts[kind] += 1
            if self.counts[kind] > 1:
                logger.debug("Rejected duplicate %s fragment %r", kind.value, value)
                raise DuplicateViolation(kind)

        self.text += kind.render(value)
        return self

    def _check_order(self, kind: FragmentKind) -> None:
        # Comparing with the neighbour covers the whole sequence as long as no
        # earlier append was rejected.
        if len(self.kinds_seen) < 2:
            return
        previous = self.kinds_seen[-2]
        if kind.rank < previous.rank:
            logger.debug(
                "Rejected %s fragment after %s", kind.value, previous.value
            )
            raise OrderViolation(kind, previous)
