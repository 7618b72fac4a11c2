"""This module defines the enumerations for calendar months, weekdays and display languages."""

from enum import IntEnum, StrEnum

from chronoformat.constants.calendar_names import (
    ENGLISH_MONTH_NAMES,
    ENGLISH_WEEKDAY_NAMES,
    PORTUGUESE_MONTH_NAMES,
    PORTUGUESE_WEEKDAY_NAMES,
)


class Language(StrEnum):
    """Supported languages for month and weekday display names."""

    ENGLISH = "en"
    PORTUGUESE = "pt"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value


_MONTH_NAMES: dict[Language, tuple[str, ...]] = {
    Language.ENGLISH: ENGLISH_MONTH_NAMES,
    Language.PORTUGUESE: PORTUGUESE_MONTH_NAMES,
}

_WEEKDAY_NAMES: dict[Language, tuple[str, ...]] = {
    Language.ENGLISH: ENGLISH_WEEKDAY_NAMES,
    Language.PORTUGUESE: PORTUGUESE_WEEKDAY_NAMES,
}


class Month(IntEnum):
    """The twelve months of the year, valued by their ordinal (January is 1)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def display_name(self, language: Language = Language.ENGLISH) -> str:
        """Returns the full name of the month.

        Args:
            language: The language of the returned name.

        Returns:
            The month name, e.g. 'July' or 'julho'.
        """
        return _MONTH_NAMES[Language(language)][self.value - 1]


class WeekDay(IntEnum):
    """The seven days of the week, valued by their ISO number (Monday is 1)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def display_name(self, language: Language = Language.ENGLISH) -> str:
        """Returns the full name of the weekday.

        Args:
            language: The language of the returned name.

        Returns:
            The weekday name, e.g. 'Sunday' or 'domingo'.
        """
        return _WEEKDAY_NAMES[Language(language)][self.value - 1]
