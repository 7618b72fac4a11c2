"""This module renders dates through templates and owns the canonical date formats.

Supported tokens:

    %Y%        year, unpadded
    %yyyy%     year, zero-padded to four digits
    %D%        day of month, unpadded
    %dd%       day of month, zero-padded to two digits
    %mm%       month number, zero-padded to two digits
    %MONTH%    full month name
    %WEEKDAY%  full weekday name

Any other token is left in the output exactly as written.
"""

from __future__ import annotations

from collections.abc import Callable

from chronoformat.exceptions.formatting import UnsupportedStyleError
from chronoformat.models.calendar import Language
from chronoformat.models.date import Date
from chronoformat.models.styles import DateStyle
from chronoformat.providers.config import ConfigProvider
from chronoformat.providers.logging import LoggingProvider
from chronoformat.providers.strings import pad_left
from chronoformat.services.templates import Template, TemplateFormatter

LONG_DATE_TEMPLATE = "%WEEKDAY%, %D% %MONTH% %Y%"
SHORT_DATE_TEMPLATE = "%dd%-%mm%-%yyyy%"


def _zero_pad(number: int, width: int) -> str:
    if number < 0:
        return "-" + pad_left(-number, "0", width)
    return pad_left(number, "0", width)


class DateFormatter(TemplateFormatter[Date]):
    """Renders any `Date` through a template using the date token table."""

    def __init__(self, template: str | Template, language: Language | str | None = None) -> None:
        """Initializes the formatter.

        Args:
            template: The template text, or an already compiled template.
            language: The language of month and weekday names. When omitted,
                the configured `DATE_LANGUAGE` is read each time a date is rendered.

        Raises:
            MalformedTemplateError: If the template has an unterminated token.
        """
        self._language = Language(language) if language else None
        super().__init__(template, self._build_tokens())

    @property
    def language(self) -> Language:
        """The language used for month and weekday names."""
        if self._language is not None:
            return self._language
        return ConfigProvider.get_config().DATE_LANGUAGE

    def _build_tokens(self) -> dict[str, Callable[[Date], str]]:
        return {
            "Y": lambda date: str(date.year),
            "yyyy": lambda date: _zero_pad(date.year, 4),
            "D": lambda date: str(date.day_of_month),
            "dd": lambda date: _zero_pad(date.day_of_month, 2),
            "mm": lambda date: _zero_pad(int(date.month), 2),
            "MONTH": lambda date: date.month.display_name(self.language),
            "WEEKDAY": lambda date: date.day_of_week.display_name(self.language),
        }

    def with_language(self, language: Language | str) -> DateFormatter:
        """Returns a formatter for the same template in a fixed language.

        Args:
            language: The language of month and weekday names.

        Returns:
            This formatter if it is already fixed to that language, otherwise a new one.
        """
        if self._language is not None and Language(language) == self._language:
            return self
        return DateFormatter(self.template, language)

    def __repr__(self) -> str:
        language = self._language.value if self._language is not None else None
        return f"DateFormatter({self.template.source!r}, language={language!r})"


LONG_DATE = DateFormatter(LONG_DATE_TEMPLATE)
SHORT_DATE = DateFormatter(SHORT_DATE_TEMPLATE)


def formatter_for(template: str) -> DateFormatter:
    """Builds a reusable date formatter bound to an arbitrary template.

    Args:
        template: The template text.

    Returns:
        The date formatter.

    Raises:
        MalformedTemplateError: If the template has an unterminated token.
    """
    return DateFormatter(template)


def to_string(date: Date, style: DateStyle | str, language: Language | str | None = None) -> str:
    """Renders a date with one of the canonical templates.

    Args:
        date: The date to render.
        style: SHORT for '26-07-2020', LONG for 'Sunday, 26 July 2020'.
        language: The language of month and weekday names. Defaults to the
            configured `DATE_LANGUAGE` at the time of the call.

    Returns:
        The rendered date.

    Raises:
        UnsupportedStyleError: If `style` is not SHORT or LONG.
    """
    if style == DateStyle.SHORT:
        formatter = SHORT_DATE
    elif style == DateStyle.LONG:
        formatter = LONG_DATE
    else:
        LoggingProvider().get_logger().warning(f"Rejected unsupported date style {style!r}.")
        raise UnsupportedStyleError(style)

    if language is not None:
        formatter = formatter.with_language(language)
    return formatter.apply(date)
