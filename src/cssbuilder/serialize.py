"""CSS serialization utilities for cssbuilder selectors."""

from __future__ import annotations

from .selector import DESCENDANT, CombinatorExpression, CompoundSelector, PartKind, Selector, SelectorPart

# Text placed before and after each part's value
_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


def _part_to_css(part: SelectorPart) -> str:
    prefix, suffix = _AFFIXES[part.kind]
    return f"{prefix}{part.value}{suffix}"


def _compound_to_css(compound: CompoundSelector) -> str:
    # Rank groups; insertion order within a group
    groups: dict[PartKind, list[str]] = {kind: [] for kind in _AFFIXES}
    for part in compound.parts:
        groups[part.kind].append(_part_to_css(part))
    return "".join("".join(groups[kind]) for kind in sorted(groups))


def _combinator_to_css(combinator: str) -> str:
    if combinator == DESCENDANT:
        return " "
    return f" {combinator} "


def to_css(selector: Selector) -> str:
    """Convert a selector to its canonical CSS text."""
    if isinstance(selector, CompoundSelector):
        return _compound_to_css(selector)
    if not isinstance(selector, CombinatorExpression):
        raise TypeError(f"Cannot serialize {type(selector).__name__} as a selector")

    # Right spine is walked iteratively, left operands recursively
    parts: list[str] = []
    node: Selector = selector
    while isinstance(node, CombinatorExpression):
        parts.append(to_css(node.left))
        parts.append(_combinator_to_css(node.combinator))
        node = node.right
    parts.append(_compound_to_css(node))
    return "".join(parts)
