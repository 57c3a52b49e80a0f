import logging

import click

from stockroom.infrastructure.cli.health_commands import health_patients, health_prescriptions
from stockroom.infrastructure.cli.log_commands import log_seed, log_show
from stockroom.infrastructure.cli.warehouse_commands import warehouse_demo


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log store activity to stderr.")
def cli(verbose: bool) -> None:
    """Stockroom: constraint-bound record stores"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def warehouse() -> None:
    """Electronics and grocery repositories."""


@cli.group()
def health() -> None:
    """Patients and prescriptions."""


@cli.group()
def log() -> None:
    """Persisted inventory log."""


# Register subcommands
warehouse.add_command(warehouse_demo)
health.add_command(health_patients)
health.add_command(health_prescriptions)
log.add_command(log_seed)
log.add_command(log_show)
