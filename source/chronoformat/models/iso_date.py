"""This module provides a concrete proleptic Gregorian date."""

from __future__ import annotations

from datetime import date as _date

from chronoformat.exceptions.formatting import InvalidDateError
from chronoformat.models.calendar import Month, WeekDay
from chronoformat.models.date import Date


class IsoDate(Date):
    """A `Date` backed by `datetime.date`, covering the years 1 to 9999."""

    __slots__ = ("_value",)

    def __init__(self, year: int, month: int | Month, day: int) -> None:
        """Initializes the date from its calendar fields.

        Args:
            year: The calendar year.
            month: The month, as a `Month` or its number (1-12).
            day: The day of the month.

        Raises:
            InvalidDateError: If the fields do not name a real calendar day.
        """
        try:
            self._value = _date(year, int(month), day)
        except (TypeError, ValueError) as e:
            raise InvalidDateError(f"Invalid date {year}-{month}-{day}: {e}") from e

    @classmethod
    def from_date(cls, value: _date) -> IsoDate:
        """Builds an `IsoDate` from a standard library date.

        Args:
            value: The date to wrap. A `datetime` is truncated to its date.

        Returns:
            The equivalent `IsoDate`.
        """
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> IsoDate:
        """Builds an `IsoDate` from a year and an ordinal day within it.

        Args:
            year: The calendar year.
            day_of_year: The 1-based day within the year.

        Returns:
            The matching `IsoDate`.

        Raises:
            InvalidDateError: If the year has no such day.
        """
        try:
            first = _date(year, 1, 1)
            last = _date(year, 12, 31).timetuple().tm_yday
        except (TypeError, ValueError) as e:
            raise InvalidDateError(f"Invalid year {year}: {e}") from e
        if not 1 <= day_of_year <= last:
            raise InvalidDateError(f"Year {year} has no day {day_of_year}; expected 1 to {last}.")
        return cls.from_date(_date.fromordinal(first.toordinal() + day_of_year - 1))

    @classmethod
    def today(cls) -> IsoDate:
        """Returns the current local date."""
        return cls.from_date(_date.today())

    @property
    def year(self) -> int:
        """The calendar year."""
        return self._value.year

    @property
    def day_of_year(self) -> int:
        """The 1-based ordinal day within the year."""
        return self._value.timetuple().tm_yday

    @property
    def day_of_month(self) -> int:
        """The 1-based day within the month."""
        return self._value.day

    @property
    def month(self) -> Month:
        """The month of the year."""
        return Month(self._value.month)

    @property
    def day_of_week(self) -> WeekDay:
        """The day of the week."""
        return WeekDay(self._value.isoweekday())

    def to_date(self) -> _date:
        """Returns the backing standard library date."""
        return self._value

    def __repr__(self) -> str:
        return f"IsoDate({self._value.year}, {self._value.month}, {self._value.day})"

    def __str__(self) -> str:
        return self._value.isoformat()
