import logging
import sys

import click

from prodcat.domain.exceptions import DomainException
from prodcat.infrastructure.bootstrap import catalog_session

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level: str) -> None:
    # stderr keeps log records out of the interactive stdout stream
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("prodcat").setLevel(level.upper())


@click.command(context_settings={"auto_envvar_prefix": "PRODCAT"})
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off (default: only on a terminal).",
)
@click.option(
    "--clear/--no-clear",
    "clear_screen",
    default=True,
    show_default=True,
    help="Clear the screen between views.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostics written to stderr.",
)
@click.option("--currency", default="USD", show_default=True, help="Currency code for prices.")
def cli(color: bool | None, clear_screen: bool, log_level: str, currency: str) -> None:
    """Product Catalog: add, list and search products interactively.

    Enter products one after another, then "Q" to see them sorted by
    price. From the menu: "P" adds more, "S" searches by name, "Q" quits.
    """
    _configure_logging(log_level)
    session = catalog_session(
        color=color,
        clear_screen=clear_screen,
        currency=currency.strip().upper(),
    )

    try:
        session.run()
    except DomainException as exc:
        raise click.ClickException(str(exc))
