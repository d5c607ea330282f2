"""stylepatch CLI entry point: Click group with subcommands."""

import logging

import click

from stylepatch import __version__
from stylepatch.config import StylepatchConfig


@click.group()
@click.version_option(version=__version__, prog_name="stylepatch")
@click.option(
    "--log-level",
    default=StylepatchConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """stylepatch - inspect and patch design-system CSS in place."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylepatch.cli.inspect import inspect, tokens  # noqa: E402
from stylepatch.cli.match import match  # noqa: E402
from stylepatch.cli.edit import set_property, set_token  # noqa: E402

cli.add_command(inspect)
cli.add_command(tokens)
cli.add_command(match)
cli.add_command(set_token)
cli.add_command(set_property)


def main() -> None:
    cli()
