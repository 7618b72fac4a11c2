"""This module defines the enumeration of canonical date styles."""

from enum import StrEnum, auto


class DateStyle(StrEnum):
    """Selects one of the canonical date templates."""

    @staticmethod
    def _generate_next_value_(
        name: str,
        _start: int,
        _count: int,
        _last_values: list[str],
    ) -> str:
        """Returns the member name so values read the same as the names.

        Args:
            name: The enum member name being assigned.
            _start: The first automatic value (unused).
            _count: Number of existing members (unused).
            _last_values: Previously assigned values (unused).

        Returns:
            The member name.
        """
        return name

    SHORT = auto()
    """Zero-padded day, month and four-digit year, e.g. '26-07-2020'."""

    LONG = auto()
    """Weekday and month names, e.g. 'Sunday, 26 July 2020'."""
