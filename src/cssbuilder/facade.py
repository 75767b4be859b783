"""The selector builder facade: the entry point client code uses."""

from __future__ import annotations

from .selector import CombinatorExpression, CompoundSelector, Selector


class SelectorBuilder:
    """Creates selectors without exposing the concrete selector classes.

    Each part method starts a new compound selector, which can then be
    extended by chaining:

        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'

    combine() joins two finished selectors; nest it on the right to build
    longer chains.
    """

    __slots__ = ()

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(self, selector1: Selector, combinator: str, selector2: Selector) -> CombinatorExpression:
        """Join two selectors with one of ' ', '>', '+', '~'."""
        return CombinatorExpression(selector1, combinator, selector2)


# Global builder instance
builder: SelectorBuilder = SelectorBuilder()
