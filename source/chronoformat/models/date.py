"""This module defines the generic date capability and its ordering rules.

A `Date` is any immutable value that can report its year, day of year, day of
month, month and weekday. Ordering and formatting are implemented once here,
against those accessors, so concrete date types only provide storage.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from chronoformat.models.calendar import Language, Month, WeekDay
from chronoformat.models.styles import DateStyle
from chronoformat.services.templates import Formattable

if TYPE_CHECKING:
    from chronoformat.services.date_formatter import DateFormatter


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare(a: Date, b: Date) -> int:
    """Orders two dates by year, then by day of year.

    Args:
        a: The first date.
        b: The second date.

    Returns:
        -1 if `a` is earlier than `b`, 1 if it is later, and 0 if both name the same day.
    """
    if a.year < b.year:
        return -1
    if b.year < a.year:
        return 1
    return _sign(a.day_of_year - b.day_of_year)


def is_before(a: Date, b: Date) -> bool:
    """Checks whether `a` falls before `b`."""
    return compare(a, b) < 0


def is_after(a: Date, b: Date) -> bool:
    """Checks whether `a` falls after `b`."""
    return compare(a, b) > 0


class Date(Formattable["Date"]):
    """A generic, immutable calendar date.

    Implementers provide the five accessors below and must keep `day_of_year`
    and `(month, day_of_month)` pointing at the same calendar day.
    """

    @property
    @abstractmethod
    def year(self) -> int:
        """The proleptic calendar year."""

    @property
    @abstractmethod
    def day_of_year(self) -> int:
        """The 1-based ordinal day within the year."""

    @property
    @abstractmethod
    def day_of_month(self) -> int:
        """The 1-based day within the month."""

    @property
    @abstractmethod
    def month(self) -> Month:
        """The month of the year."""

    @property
    @abstractmethod
    def day_of_week(self) -> WeekDay:
        """The day of the week."""

    def compare_to(self, other: Date) -> int:
        """Orders this date against another one. See `compare`."""
        return compare(self, other)

    def is_before(self, other: Date) -> bool:
        """Checks whether this date falls before another one."""
        return compare(self, other) < 0

    def is_after(self, other: Date) -> bool:
        """Checks whether this date falls after another one."""
        return compare(self, other) > 0

    def to_string(self, style: DateStyle, language: Language | None = None) -> str:
        """Renders this date with one of the canonical templates.

        Args:
            style: The canonical style to use.
            language: The language of month and weekday names. Defaults to the configured one.

        Returns:
            The rendered date.

        Raises:
            UnsupportedStyleError: If `style` is not SHORT or LONG.
        """
        from chronoformat.services.date_formatter import to_string

        return to_string(self, style, language)

    def formatter(self, template: str) -> DateFormatter:
        """Builds a reusable formatter bound to an arbitrary template.

        Args:
            template: The template text.

        Returns:
            A formatter for dates.

        Raises:
            MalformedTemplateError: If the template has an unterminated token.
        """
        from chronoformat.services.date_formatter import DateFormatter

        return DateFormatter(template)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash((self.year, self.day_of_year))
