#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .errors import generate_error_message
from .facade import builder
from .selector import CompoundSelector, Selector, SelectorError

_COMBINATOR: str = "combinator"


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


class _AppendStep(argparse.Action):
    """Records (method, value) pairs in command-line order under one dest."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps = list(getattr(namespace, self.dest, None) or [])
        steps.append((self.const, values))
        setattr(namespace, self.dest, steps)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from its parts and print it.",
        epilog=(
            "Options are applied in the order given. --combinator closes the current\n"
            "compound selector and starts the next one.\n"
            "\n"
            "Examples:\n"
            "  cssbuilder -i main -c container -c editable\n"
            "  cssbuilder -e a -a 'href$=\".png\"' -p focus\n"
            "  cssbuilder -e ul -k '>' -e li -p first-child\n"
            "  cssbuilder -e tr -k ' ' -e td\n"
            "\n"
            "If you don't have the 'cssbuilder' command available, use:\n"
            "  python -m cssbuilder ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for flags, method, help_text in (
        (("-e", "--element"), "element", "Element (type) selector, e.g. div"),
        (("-i", "--id"), "id", "Id selector, rendered as #VALUE"),
        (("-c", "--class"), "class_", "Class selector, rendered as .VALUE (repeatable)"),
        (("-a", "--attr"), "attr", "Attribute selector, rendered as [VALUE] (repeatable)"),
        (("-p", "--pseudo-class"), "pseudo_class", "Pseudo-class, rendered as :VALUE (repeatable)"),
        (("-P", "--pseudo-element"), "pseudo_element", "Pseudo-element, rendered as ::VALUE"),
        (("-k", "--combinator"), _COMBINATOR, "One of ' ', '>', '+', '~'; starts a new compound selector"),
    ):
        parser.add_argument(*flags, dest="steps", action=_AppendStep, const=method, metavar="VALUE", help=help_text)

    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.steps:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def build_selector(steps: Sequence[tuple[str, str]]) -> Selector:
    """Build a selector from (method, value) steps, folding combinators to the right."""
    compounds: list[CompoundSelector] = []
    combinators: list[str] = []
    current: CompoundSelector | None = None

    for method, value in steps:
        if method == _COMBINATOR:
            if current is None:
                raise SelectorError(generate_error_message("missing-compound", value))
            compounds.append(current)
            combinators.append(value)
            current = None
            continue
        target = builder if current is None else current
        current = getattr(target, method)(value)

    if current is None:
        detail = combinators[-1] if combinators else None
        raise SelectorError(generate_error_message("missing-compound", detail))

    selector: Selector = current
    for compound, combinator in zip(reversed(compounds), reversed(combinators)):
        selector = builder.combine(compound, combinator, selector)
    return selector


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    try:
        selector = build_selector(args.steps)
    except SelectorError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(selector.stringify())
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
