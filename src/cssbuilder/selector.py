# CSS selector construction for cssbuilder
# Builds compound and complex selectors part by part; see serialize.py for output

from __future__ import annotations

import enum

from .errors import generate_error_message


class PartKind(enum.IntEnum):
    """Kinds of selector parts. The value is the canonical rank."""

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Kinds allowed at most once per compound selector
SINGLETON_KINDS: frozenset[PartKind] = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

DESCENDANT: str = " "
COMBINATORS: tuple[str, ...] = (DESCENDANT, ">", "+", "~")


class SelectorError(ValueError):
    """Raised when a selector cannot be built as requested."""

    code: str = ""

    kind: PartKind | None
    detail: str | None

    def __init__(self, detail: str | None = None, *, kind: PartKind | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = generate_error_message(self.code, detail) if self.code else (detail or "")
        super().__init__(message)


class OrderViolationError(SelectorError):
    """A part was added after a part of higher rank."""

    code = "order-violation"

    def __init__(self, kind: PartKind) -> None:
        super().__init__(kind.label, kind=kind)


class DuplicateSingletonError(SelectorError):
    """A second element, id or pseudo-element was added."""

    code = "duplicate-singleton"

    def __init__(self, kind: PartKind) -> None:
        super().__init__(kind.label, kind=kind)


class InvalidCombinatorError(SelectorError):
    """The combinator token is not one of ' ', '>', '+', '~'."""

    code = "invalid-combinator"

    def __init__(self, token: object) -> None:
        super().__init__(str(token))


class SelectorPart:
    """One fragment of a compound selector, e.g. the `main` of `#main`."""

    __slots__ = ("kind", "value")

    kind: PartKind
    value: str

    def __init__(self, kind: PartKind, value: str) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def rank(self) -> int:
        return int(self.kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorPart):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"SelectorPart({self.kind.label}, {self.value!r})"


class CompoundSelector:
    """A sequence of selector parts for one element position (e.g., a#nav.menu:hover).

    Parts must be added in canonical order: element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may appear
    once; the others may repeat.

    Add methods mutate the selector and return it, so calls chain:

        CompoundSelector().element("a").class_("external").pseudo_class("hover")

    Two call sites holding the same instance share its mutations. Use copy()
    to fork a chain.
    """

    __slots__ = ("_highest_rank", "_parts")

    _parts: list[SelectorPart]
    _highest_rank: PartKind

    def __init__(self) -> None:
        self._parts = []
        self._highest_rank = PartKind.NONE

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        return tuple(self._parts)

    @property
    def highest_rank(self) -> PartKind:
        return self._highest_rank

    def _add(self, kind: PartKind, value: str) -> CompoundSelector:
        if not isinstance(value, str):
            raise TypeError(f"{kind.label} value must be a str, not {type(value).__name__}")

        # No mutation until both checks pass
        if kind in SINGLETON_KINDS and any(part.kind is kind for part in self._parts):
            raise DuplicateSingletonError(kind)
        if kind < self._highest_rank:
            raise OrderViolationError(kind)

        self._parts.append(SelectorPart(kind, value))
        self._highest_rank = max(self._highest_rank, kind)
        return self

    def element(self, value: str) -> CompoundSelector:
        return self._add(PartKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self._add(PartKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self._add(PartKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        """Add an attribute part. The value is the text between the brackets, e.g. 'href$=".png"'."""
        return self._add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Add a pseudo-class. Functional arguments are passed through, e.g. 'nth-of-type(even)'."""
        return self._add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self._add(PartKind.PSEUDO_ELEMENT, value)

    def copy(self) -> CompoundSelector:
        clone = CompoundSelector()
        clone._parts = list(self._parts)
        clone._highest_rank = self._highest_rank
        return clone

    def stringify(self) -> str:
        from .serialize import to_css

        return to_css(self)

    __str__ = stringify

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        # An empty compound is still a selector
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundSelector):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CompoundSelector({self._parts!r})"


class CombinatorExpression:
    """Two selectors joined by a combinator (e.g., `ul > li`).

    The right-hand side may itself be a CombinatorExpression, which is how
    longer chains are built: `a > b + c` is combine(a, '>', combine(b, '+', c)).
    """

    __slots__ = ("combinator", "left", "right")

    left: Selector
    combinator: str
    right: Selector

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        for operand in (left, right):
            if not isinstance(operand, (CompoundSelector, CombinatorExpression)):
                raise TypeError(f"combinator operands must be selectors, not {type(operand).__name__}")
        if combinator not in COMBINATORS:
            raise InvalidCombinatorError(combinator)

        object.__setattr__(self, "left", left)
        object.__setattr__(self, "combinator", combinator)
        object.__setattr__(self, "right", right)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def stringify(self) -> str:
        from .serialize import to_css

        return to_css(self)

    __str__ = stringify

    def __repr__(self) -> str:
        return f"CombinatorExpression({self.left!r}, {self.combinator!r}, {self.right!r})"


# Type alias for anything the builder hands back
Selector = CompoundSelector | CombinatorExpression
