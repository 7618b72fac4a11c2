"""Unit tests for the date formatter and the canonical date formats."""

from unittest.mock import MagicMock, patch

import pytest
from chronoformat.exceptions.formatting import MalformedTemplateError, UnsupportedStyleError
from chronoformat.models.calendar import Language, Month, WeekDay
from chronoformat.models.iso_date import IsoDate
from chronoformat.models.styles import DateStyle
from chronoformat.services.date_formatter import (
    LONG_DATE,
    LONG_DATE_TEMPLATE,
    SHORT_DATE,
    SHORT_DATE_TEMPLATE,
    DateFormatter,
    formatter_for,
    to_string,
)


def test_canonical_templates() -> None:
    """Tests the text of the two canonical templates."""
    assert LONG_DATE_TEMPLATE == "%WEEKDAY%, %D% %MONTH% %Y%"
    assert SHORT_DATE_TEMPLATE == "%dd%-%mm%-%yyyy%"
    assert LONG_DATE.template.source == LONG_DATE_TEMPLATE
    assert SHORT_DATE.template.source == SHORT_DATE_TEMPLATE


def test_short_style(sunday: IsoDate) -> None:
    """Tests the SHORT rendering of a known date."""
    assert to_string(sunday, DateStyle.SHORT) == "26-07-2020"


def test_long_style(sunday: IsoDate) -> None:
    """Tests the LONG rendering of a known date."""
    assert to_string(sunday, DateStyle.LONG) == "Sunday, 26 July 2020"


def test_style_given_as_text(sunday: IsoDate) -> None:
    """Tests that the style names are accepted as plain strings."""
    assert to_string(sunday, "SHORT") == "26-07-2020"


def test_short_style_pads_small_fields() -> None:
    """Tests zero padding of day, month and year."""
    assert to_string(IsoDate(5, 3, 4), DateStyle.SHORT) == "04-03-0005"
    assert to_string(IsoDate(5, 3, 4), DateStyle.LONG) == "Friday, 4 March 5"


@pytest.mark.parametrize("style", ["MEDIUM", "short", None, 1])
def test_unsupported_style_raises(sunday: IsoDate, style: object) -> None:
    """Tests that styles outside SHORT and LONG fail explicitly."""
    with pytest.raises(UnsupportedStyleError) as exc_info:
        to_string(sunday, style)  # type: ignore[arg-type]

    assert exc_info.value.style == style


def test_unsupported_style_is_logged(sunday: IsoDate) -> None:
    """Tests that a rejected style is reported as a warning."""
    with patch("chronoformat.services.date_formatter.LoggingProvider") as mock_logging:
        with pytest.raises(UnsupportedStyleError):
            to_string(sunday, "MEDIUM")

    mock_logging.return_value.get_logger.return_value.warning.assert_called_once()


def test_long_style_in_portuguese(sunday: IsoDate) -> None:
    """Tests month and weekday names in another language."""
    assert to_string(sunday, DateStyle.LONG, Language.PORTUGUESE) == "domingo, 26 julho 2020"
    assert to_string(sunday, DateStyle.SHORT, "pt") == "26-07-2020"


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("%Y%", "2020"),
        ("%yyyy%", "2020"),
        ("%D%", "26"),
        ("%dd%", "26"),
        ("%mm%", "07"),
        ("%MONTH%", "July"),
        ("%WEEKDAY%", "Sunday"),
        ("%D%.%mm%.%Y%", "26.07.2020"),
        ("Today is %WEEKDAY%!", "Today is Sunday!"),
        ("", ""),
    ],
)
def test_token_table(sunday: IsoDate, template: str, expected: str) -> None:
    """Tests each token of the date token table."""
    assert formatter_for(template).apply(sunday) == expected


def test_unknown_token_passes_through(sunday: IsoDate) -> None:
    """Tests that unrecognized tokens are left verbatim."""
    assert formatter_for("%FOO%").apply(sunday) == "%FOO%"
    assert formatter_for("%D% %foo% %y%").apply(sunday) == "26 %foo% %y%"


def test_malformed_template_raises() -> None:
    """Tests that an unterminated token fails when the formatter is built."""
    with pytest.raises(MalformedTemplateError):
        formatter_for("%D% %MONTH")


def test_formatter_defaults_to_configured_language(sunday: IsoDate) -> None:
    """Tests that the configured language is used when none is given."""
    with patch("chronoformat.services.date_formatter.ConfigProvider.get_config") as mock_get_config:
        mock_get_config.return_value = MagicMock(DATE_LANGUAGE=Language.PORTUGUESE)

        formatter = DateFormatter("%WEEKDAY% %MONTH%")

        assert formatter.language is Language.PORTUGUESE
        assert formatter.apply(sunday) == "domingo julho"


def test_formatter_reads_language_when_rendering(monkeypatch: pytest.MonkeyPatch, sunday: IsoDate) -> None:
    """Tests that a formatter built earlier follows later changes to the configured language."""
    formatter = DateFormatter("%MONTH%")
    assert formatter.apply(sunday) == "July"

    monkeypatch.setenv("DATE_LANGUAGE", "pt")

    assert formatter.language is Language.PORTUGUESE
    assert formatter.apply(sunday) == "julho"


def test_canonical_formatter_agrees_with_its_template(monkeypatch: pytest.MonkeyPatch, sunday: IsoDate) -> None:
    """Tests that to_string and a fresh formatter for the same template render alike."""
    monkeypatch.setenv("DATE_LANGUAGE", "pt")

    assert to_string(sunday, DateStyle.LONG) == "domingo, 26 julho 2020"
    assert LONG_DATE.apply(sunday) == formatter_for(LONG_DATE_TEMPLATE).apply(sunday)
    assert to_string(sunday, DateStyle.LONG) == formatter_for(LONG_DATE_TEMPLATE).apply(sunday)


def test_canonical_formatters_have_no_fixed_language() -> None:
    """Tests that the canonical formatters leave the language to the configuration."""
    assert repr(LONG_DATE) == f"DateFormatter({LONG_DATE_TEMPLATE!r}, language=None)"
    assert repr(SHORT_DATE) == f"DateFormatter({SHORT_DATE_TEMPLATE!r}, language=None)"


def test_explicit_language_skips_configuration() -> None:
    """Tests that an explicit language does not read the configuration."""
    with patch("chronoformat.services.date_formatter.ConfigProvider.get_config") as mock_get_config:
        formatter = DateFormatter("%MONTH%", "pt")

    mock_get_config.assert_not_called()
    assert formatter.language is Language.PORTUGUESE


def test_with_language() -> None:
    """Tests switching a formatter to another language."""
    english = DateFormatter(LONG_DATE_TEMPLATE, Language.ENGLISH)

    portuguese = english.with_language("pt")

    assert english.with_language(Language.ENGLISH) is english
    assert portuguese is not english
    assert portuguese.template == english.template
    assert portuguese.language is Language.PORTUGUESE


def test_negative_years_keep_their_sign() -> None:
    """Tests year rendering for dates before year one."""
    date = MagicMock(year=-44, day_of_month=15, month=Month.MARCH, day_of_week=WeekDay.FRIDAY)

    assert formatter_for("%Y% %yyyy%").apply(date) == "-44 -0044"


def test_years_beyond_four_digits_are_not_truncated() -> None:
    """Tests that zero padding never shortens the year."""
    date = MagicMock(year=12345, day_of_month=1, month=Month.JANUARY, day_of_week=WeekDay.MONDAY)

    assert formatter_for("%yyyy%").apply(date) == "12345"


def test_formatter_repr() -> None:
    """Tests the formatter representation."""
    assert repr(DateFormatter("%D%", "en")) == "DateFormatter('%D%', language='en')"
