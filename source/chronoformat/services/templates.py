"""This module provides a small template engine for rendering values through named tokens.

A template is plain text in which tokens are written between percent signs,
such as ``%NAME%``. A `TemplateFormatter` renders a value by replacing each
token with the output of the matching renderer in its token table. Tokens the
table does not know are kept verbatim, so templates written for a richer
token table still render on an older one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from chronoformat.exceptions.formatting import MalformedTemplateError
from chronoformat.providers.logging import LoggingProvider

TOKEN_DELIMITER = "%"

T = TypeVar("T")


class TemplateSegment(BaseModel):
    """One piece of a compiled template: either literal text or a token name."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_token: bool = False

    def render_verbatim(self) -> str:
        """Returns the segment as it was written in the template.

        Returns:
            The literal text, or the token wrapped in its delimiters.
        """
        if self.is_token:
            return f"{TOKEN_DELIMITER}{self.text}{TOKEN_DELIMITER}"
        return self.text


class Template:
    """An immutable, pre-parsed format template."""

    __slots__ = ("_source", "_segments")

    def __init__(self, source: str, segments: tuple[TemplateSegment, ...]) -> None:
        """Initializes the template. Use `Template.compile` to build one from text.

        Args:
            source: The original template text.
            segments: The parsed literal and token segments, in order.
        """
        self._source = source
        self._segments = segments

    @classmethod
    def compile(cls, source: str) -> Template:
        """Parses template text into literal and token segments.

        An empty token (``%%``) is kept as a token with an empty name; no
        token table maps it, so it renders verbatim.

        Args:
            source: The template text.

        Returns:
            The compiled template.

        Raises:
            MalformedTemplateError: If a '%' opens a token that is never closed.
        """
        segments: list[TemplateSegment] = []
        position = 0
        while position < len(source):
            opening = source.find(TOKEN_DELIMITER, position)
            if opening == -1:
                segments.append(TemplateSegment(text=source[position:]))
                break
            if opening > position:
                segments.append(TemplateSegment(text=source[position:opening]))
            closing = source.find(TOKEN_DELIMITER, opening + 1)
            if closing == -1:
                LoggingProvider().get_logger().warning(f"Rejected template {source!r}: unterminated token at {opening}.")
                raise MalformedTemplateError(source, opening)
            segments.append(TemplateSegment(text=source[opening + 1 : closing], is_token=True))
            position = closing + 1

        return cls(source, tuple(segments))

    @property
    def source(self) -> str:
        """The original template text."""
        return self._source

    @property
    def segments(self) -> tuple[TemplateSegment, ...]:
        """The parsed segments, in order."""
        return self._segments

    @property
    def token_names(self) -> tuple[str, ...]:
        """The token names used by the template, in order of appearance."""
        return tuple(segment.text for segment in self._segments if segment.is_token)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)

    def __repr__(self) -> str:
        return f"Template({self._source!r})"


class Formatter(ABC, Generic[T]):
    """Turns a value into text."""

    @abstractmethod
    def apply(self, value: T) -> str:
        """Renders a value.

        Args:
            value: The value to render.

        Returns:
            The rendered text.
        """


class Formattable(ABC, Generic[T]):
    """A value that knows how to build formatters for itself."""

    @abstractmethod
    def formatter(self, template: str) -> Formatter[T]:
        """Builds a reusable formatter for this kind of value.

        Args:
            template: The template text the formatter is bound to.

        Returns:
            A formatter that renders values of this kind.
        """

    def format(self, fmt: Formatter[T] | str) -> str:
        """Renders this value with a formatter or a template string.

        Args:
            fmt: A formatter, or a template string used to build one.

        Returns:
            The rendered text.
        """
        if isinstance(fmt, str):
            fmt = self.formatter(fmt)
        return fmt.apply(self)  # type: ignore[arg-type]


class TemplateFormatter(Formatter[T]):
    """A formatter that renders a compiled template through a token table."""

    def __init__(self, template: str | Template, tokens: Mapping[str, Callable[[T], str]]) -> None:
        """Initializes the formatter and compiles its template.

        Args:
            template: The template text, or an already compiled template.
            tokens: Maps each token name to the function that renders it.

        Raises:
            MalformedTemplateError: If the template text has an unterminated token.
        """
        self._template = template if isinstance(template, Template) else Template.compile(template)
        self._tokens = dict(tokens)

    @property
    def template(self) -> Template:
        """The compiled template this formatter is bound to."""
        return self._template

    def apply(self, value: T) -> str:
        """Renders a value by substituting every known token.

        Args:
            value: The value to render.

        Returns:
            The rendered text, with unknown tokens left verbatim.
        """
        parts = []
        for segment in self._template.segments:
            renderer = self._tokens.get(segment.text) if segment.is_token else None
            if renderer is None:
                parts.append(segment.render_verbatim())
            else:
                parts.append(renderer(value))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._template.source!r})"
