"""This module contains shared fixtures for all unit tests."""

import pytest
from chronoformat.models.iso_date import IsoDate


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Removes library settings from the environment for every unit test.

    This keeps the language of month and weekday names at its default
    unless a test sets it explicitly.
    """
    monkeypatch.delenv("DATE_LANGUAGE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def sunday() -> IsoDate:
    """Returns Sunday, 26 July 2020."""
    return IsoDate(2020, 7, 26)
