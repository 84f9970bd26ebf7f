"""CLI commands for the Book catalog."""

from __future__ import annotations

import click

from sellerdash.application.list_books import ListBooksHandler
from sellerdash.domain.exceptions import DomainException
from sellerdash.infrastructure.bootstrap import book_repository


@click.command("list")
@click.option("--seller", "seller_id", required=True, help="Seller ID.")
@click.pass_obj
def book_list(obj: dict, seller_id: str) -> None:
    """List the books a seller has in the catalog."""
    handler = ListBooksHandler(book_repo=book_repository(obj.get("data_dir")))

    try:
        lines = handler.handle(seller_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo(f"No books found for seller {seller_id}.")
        return

    click.echo(f"{'ID':<10} {'Title':<40} {'Price':>10}")
    click.echo("-" * 62)
    for line in lines:
        click.echo(f"{line.id:<10} {line.title:<40} {line.price:>10}")
