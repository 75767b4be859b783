from .facade import SelectorBuilder, builder
from .selector import (
    COMBINATORS,
    CombinatorExpression,
    CompoundSelector,
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    PartKind,
    Selector,
    SelectorError,
    SelectorPart,
)
from .serialize import to_css

__all__ = [
    "COMBINATORS",
    "CombinatorExpression",
    "CompoundSelector",
    "DuplicateSingletonError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorPart",
    "builder",
    "to_css",
]
