"""This module provides basic helpers for building and traversing strings."""

from collections.abc import Iterable, Iterator
from typing import Any


def repeat(char: str, size: int) -> str:
    """Repeats a character a number of times.

    Args:
        char: The character to repeat. Must be exactly one character long.
        size: The length of the resulting string. Values of zero or less
            produce an empty string.

    Returns:
        A string made of `size` copies of `char`.

    Raises:
        ValueError: If `char` is not a single character.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}.")
    if size <= 0:
        return ""
    return char * size


def pad_right(value: Any, char: str, size: int) -> str:
    """Pads the right side of a value's text up to a given size.

    The text is never truncated when it is already longer than `size`.

    Args:
        value: The value to render with `str()`.
        char: The padding character.
        size: The target length.

    Returns:
        The right-padded text.

    Raises:
        ValueError: If `char` is not a single character.
    """
    text = str(value)
    return text + repeat(char, max(0, size - len(text)))


def pad_left(value: Any, char: str, size: int) -> str:
    """Pads the left side of a value's text up to a given size.

    The text is never truncated when it is already longer than `size`.

    Args:
        value: The value to render with `str()`.
        char: The padding character.
        size: The target length.

    Returns:
        The left-padded text.

    Raises:
        ValueError: If `char` is not a single character.
    """
    text = str(value)
    return repeat(char, max(0, size - len(text))) + text


class CharSequence(Iterable[str]):
    """A restartable iterable over the single-character strings of a text.

    Every call to `iter()` starts a new, independent pass from the first character.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        """Initializes the sequence.

        Args:
            text: The text to walk over.
        """
        self._text = text

    def __iter__(self) -> Iterator[str]:
        """Starts a fresh pass over the text.

        Yields:
            Each character of the text, in order.
        """
        for char in self._text:
            yield char

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"CharSequence({self._text!r})"


def char_sequence(text: str) -> CharSequence:
    """Returns a lazy, restartable iterable over the characters of a string.

    Args:
        text: The string to iterate.

    Returns:
        An iterable yielding one single-character string per character of `text`.
    """
    return CharSequence(text)
