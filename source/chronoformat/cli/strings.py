"""This module defines the 'strings' command group for the chronoformat CLI."""

import click
from chronoformat.providers.strings import pad_left, pad_right, repeat


@click.group("strings")
def strings_group() -> None:
    """Groups commands that build padded and repeated strings."""
    pass


@strings_group.command("pad")
@click.argument("value")
@click.argument("size", type=int)
@click.option("--char", default=" ", show_default=True, help="The padding character.")
@click.option(
    "--side",
    type=click.Choice(["left", "right"], case_sensitive=False),
    default="left",
    show_default=True,
    help="The side the padding is added to.",
)
def pad(value: str, size: int, char: str, side: str) -> None:
    """Pads VALUE with a character up to SIZE characters.

    Args:
        value: The text to pad.
        size: The target length.
        char: The padding character.
        side: Either 'left' or 'right'.
    """
    if len(char) != 1:
        raise click.UsageError("--char must be a single character.")

    padded = pad_left(value, char, size) if side.lower() == "left" else pad_right(value, char, size)
    click.echo(padded)


@strings_group.command("repeat")
@click.argument("char")
@click.argument("size", type=int)
def repeat_char(char: str, size: int) -> None:
    """Prints CHAR repeated SIZE times.

    Args:
        char: The character to repeat.
        size: How many times to repeat it.
    """
    if len(char) != 1:
        raise click.UsageError("CHAR must be a single character.")

    click.echo(repeat(char, size))
