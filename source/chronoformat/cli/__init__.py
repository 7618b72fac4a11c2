"""This module initializes the CLI application."""

import uuid

import click
from chronoformat.cli.date import date_group
from chronoformat.cli.strings import strings_group
from chronoformat.models.calendar import Language
from chronoformat.providers.logging import LoggingProvider


class Context:
    """A context object to pass global options to subcommands."""

    def __init__(self, language: Language | None):
        """Initializes the context.

        Args:
            language: The language for month and weekday names, or None to use the configured one.
        """
        self.language = language


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    @click.option(
        "--language",
        type=click.Choice([language.value for language in Language], case_sensitive=False),
        default=None,
        help="Language for month and weekday names.",
    )
    @click.pass_context
    def cli(ctx: click.Context, log_level: str | None, language: str | None) -> None:
        """A command-line interface for rendering dates and padding strings.

        Every invocation runs under its own correlation ID, so all log lines
        written while the subcommand runs can be traced together.

        Args:
            ctx: The Click context object.
            log_level: The desired logging level.
            language: The language for month and weekday names.
        """
        logging_provider = LoggingProvider()
        logging_provider.get_logger(level_override=log_level)
        ctx.with_resource(logging_provider.set_correlation_id(f"cli:{ctx.invoked_subcommand}:{uuid.uuid4().hex[:8]}"))
        ctx.obj = Context(language=Language(language.lower()) if language else None)

    cli.add_command(date_group)
    cli.add_command(strings_group)

    return cli
