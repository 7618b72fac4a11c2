"""This module defines custom exceptions raised while building and formatting dates."""

from typing import Any


class ChronoformatError(Exception):
    """Base exception for every error raised by the chronoformat library."""

    pass


class UnsupportedStyleError(ChronoformatError):
    """Raised when a date is rendered with a style selector that has no canonical template."""

    def __init__(self, style: Any) -> None:
        """Initializes the error with the rejected style.

        Args:
            style: The style selector that was not recognized.
        """
        self.style = style
        super().__init__(f"Unsupported date style: {style!r}. Expected one of SHORT or LONG.")


class MalformedTemplateError(ChronoformatError):
    """Raised when a format template contains a token delimiter that is never closed."""

    def __init__(self, template: str, position: int) -> None:
        """Initializes the error with the template and the offending delimiter position.

        Args:
            template: The template text being compiled.
            position: The index of the unterminated '%' delimiter.
        """
        self.template = template
        self.position = position
        super().__init__(f"Unterminated token delimiter at position {position} in template {template!r}.")


class InvalidDateError(ChronoformatError):
    """Raised when a concrete date is built from fields that do not name a real calendar day."""

    pass
