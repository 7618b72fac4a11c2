"""String helpers and a generic calendar date with template-based formatting.

The most common entry points are re-exported here so callers can write
``from chronoformat import IsoDate, DateStyle, to_string``.
"""

from chronoformat.exceptions.formatting import (
    ChronoformatError,
    InvalidDateError,
    MalformedTemplateError,
    UnsupportedStyleError,
)
from chronoformat.models.calendar import Language, Month, WeekDay
from chronoformat.models.date import Date, compare, is_after, is_before
from chronoformat.models.iso_date import IsoDate
from chronoformat.models.styles import DateStyle
from chronoformat.providers.strings import char_sequence, pad_left, pad_right, repeat
from chronoformat.services.date_formatter import (
    LONG_DATE,
    LONG_DATE_TEMPLATE,
    SHORT_DATE,
    SHORT_DATE_TEMPLATE,
    DateFormatter,
    formatter_for,
    to_string,
)

__all__ = [
    "ChronoformatError",
    "Date",
    "DateFormatter",
    "DateStyle",
    "InvalidDateError",
    "IsoDate",
    "LONG_DATE",
    "LONG_DATE_TEMPLATE",
    "Language",
    "MalformedTemplateError",
    "Month",
    "SHORT_DATE",
    "SHORT_DATE_TEMPLATE",
    "UnsupportedStyleError",
    "WeekDay",
    "char_sequence",
    "compare",
    "formatter_for",
    "is_after",
    "is_before",
    "pad_left",
    "pad_right",
    "repeat",
    "to_string",
]
