"""CLI commands for the warehouse repositories."""

from __future__ import annotations

from datetime import datetime

import click

from stockroom.application.increase_stock import IncreaseStockHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.application.seed import seed_warehouse
from stockroom.application.show_items import ShowItemsHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.inventory import ElectronicItem, GroceryItem
from stockroom.domain.repository.repository import Repository
from stockroom.infrastructure.bootstrap import repository


def _echo_items(title: str, repo: Repository) -> None:
    click.echo(title)
    for line in ShowItemsHandler(repo).handle():
        click.echo(f"ID: {line.id}, Name: {line.name}, Quantity: {line.quantity}")
    click.echo()


@click.command("demo")
def warehouse_demo() -> None:
    """Seed both repositories, mutate them, and show each failure mode."""
    electronics: Repository[ElectronicItem] = repository()
    groceries: Repository[GroceryItem] = repository()
    now = datetime.now()
    seed_warehouse(electronics, groceries, now)

    _echo_items("Grocery Items:", groceries)
    _echo_items("Electronic Items:", electronics)

    try:
        new_quantity = IncreaseStockHandler(groceries).handle(1, 5)
        click.echo(f"Stock increased for item ID 1. New quantity: {new_quantity}")
        RemoveItemHandler(electronics).handle(2)
        click.echo("Item ID 2 removed.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    attempts = [
        lambda: groceries.add(GroceryItem(1, "Milk Duplicate", 10, now.date())),
        lambda: electronics.remove(99),
        lambda: groceries.update_quantity(2, -5),
    ]
    for attempt in attempts:
        try:
            attempt()
        except DomainException as exc:
            click.echo(f"{type(exc).__name__}: {exc}")
