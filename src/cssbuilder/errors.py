"""Centralized error message definitions for selector construction errors.

Every error raised while building a selector carries a short kebab-case code;
this module turns those codes into the human-readable text users see.
"""

from __future__ import annotations


def generate_error_message(code: str, detail: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        detail: Optional part kind or token to include in the message for context

    Returns:
        Human-readable error message string
    """
    messages = {
        # Compound selector errors
        "duplicate-singleton": (
            "Element, id and pseudo-element should not occur more then one time inside the selector"
            f" (got a second {detail})"
        ),
        "order-violation": (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
            f" (got {detail} too late)"
        ),
        # Combinator errors
        "invalid-combinator": f"Invalid combinator {detail!r} (expected one of ' ', '>', '+', '~')",
        # CLI errors
        "missing-compound": f"Combinator {detail!r} must sit between two compound selectors",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)
