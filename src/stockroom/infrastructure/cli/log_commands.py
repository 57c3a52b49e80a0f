"""CLI commands for the persisted inventory log."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from stockroom.application.seed import seed_inventory_log
from stockroom.application.show_inventory_log import ShowInventoryLogHandler
from stockroom.domain.model.inventory import InventoryItem
from stockroom.infrastructure.bootstrap import inventory_log
from stockroom.infrastructure.persistence.persistent_log import PersistentLog

_file_option = click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Sink file (defaults to data/inventory.json).",
)


def _open_log(file_path: Path | None) -> PersistentLog[InventoryItem]:
    try:
        return inventory_log(file_path)
    except OSError as exc:
        raise click.ClickException(f"Cannot prepare sink directory: {exc}")


@click.command("seed")
@_file_option
def log_seed(file_path: Path | None) -> None:
    """Seed the inventory log and save it."""
    log = _open_log(file_path)
    seed_inventory_log(log, datetime.now())
    result = log.save()
    if not result.ok:
        raise click.ClickException(str(result.error))
    click.echo(f"Saved {result.records} items to {log.file_path}")


@click.command("show")
@_file_option
def log_show(file_path: Path | None) -> None:
    """Load the inventory log and print it."""
    log = _open_log(file_path)
    result = log.load()
    if not result.ok:
        raise click.ClickException(str(result.error))

    lines = ShowInventoryLogHandler(log).handle()
    if not lines:
        click.echo("No inventory records found.")
        return

    for line in lines:
        click.echo(
            f"ID: {line.id}, Name: {line.name}, Quantity: {line.quantity}, "
            f"Date Added: {line.date_added}"
        )
