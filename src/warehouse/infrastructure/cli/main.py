import click

from warehouse.infrastructure.cli.demo_commands import demo
from warehouse.infrastructure.cli.inventory_commands import (
    inventory_increase,
    inventory_list,
    inventory_remove,
    inventory_update,
)
from warehouse.infrastructure.logging_setup import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    setup_logging,
)


@click.group()
@click.option(
    "--log-level",
    envvar="WAREHOUSE_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Log level for messages written to stderr.",
)
def cli(log_level: str) -> None:
    """Warehouse — in-memory inventory management"""
    setup_logging(log_level)


# Register subcommands
cli.add_command(demo)
cli.add_command(inventory_list)
cli.add_command(inventory_increase)
cli.add_command(inventory_remove)
cli.add_command(inventory_update)
