"""This module defines the 'date' command group for the chronoformat CLI."""

import click
from chronoformat.exceptions.formatting import ChronoformatError
from chronoformat.models.date import compare
from chronoformat.models.iso_date import IsoDate
from chronoformat.models.styles import DateStyle
from chronoformat.services.date_formatter import DateFormatter, to_string

ORDER_LABELS = {-1: "before", 0: "same", 1: "after"}


@click.group("date")
def date_group() -> None:
    """Groups commands that render and compare dates."""
    pass


@date_group.command("show")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.option(
    "--style",
    type=click.Choice([style.value for style in DateStyle], case_sensitive=False),
    default=DateStyle.LONG.value,
    help="The canonical style to render the date with.",
)
@click.pass_context
def show(ctx: click.Context, year: int, month: int, day: int, style: str) -> None:
    """Renders a date with one of the canonical styles.

    Args:
        ctx: The click context.
        year: The calendar year.
        month: The month number (1-12).
        day: The day of the month.
        style: The canonical style, SHORT or LONG.
    """
    try:
        click.echo(to_string(IsoDate(year, month, day), DateStyle(style.upper()), ctx.obj.language))
    except ChronoformatError as e:
        click.secho(f"An error occurred: {e}", fg="red")
        raise click.Abort()


@date_group.command("render")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.argument("template")
@click.pass_context
def render(ctx: click.Context, year: int, month: int, day: int, template: str) -> None:
    """Renders a date through an arbitrary template, such as '%D% %MONTH%'.

    Args:
        ctx: The click context.
        year: The calendar year.
        month: The month number (1-12).
        day: The day of the month.
        template: The template text.
    """
    try:
        formatter = DateFormatter(template, ctx.obj.language)
        click.echo(formatter.apply(IsoDate(year, month, day)))
    except ChronoformatError as e:
        click.secho(f"An error occurred: {e}", fg="red")
        raise click.Abort()


@date_group.command("compare")
@click.argument("first", nargs=3, type=int)
@click.argument("second", nargs=3, type=int)
def compare_dates(first: tuple[int, int, int], second: tuple[int, int, int]) -> None:
    """Tells whether the first date falls before, on or after the second one.

    Args:
        first: The first date as YEAR MONTH DAY.
        second: The second date as YEAR MONTH DAY.
    """
    try:
        click.echo(ORDER_LABELS[compare(IsoDate(*first), IsoDate(*second))])
    except ChronoformatError as e:
        click.secho(f"An error occurred: {e}", fg="red")
        raise click.Abort()
