"""CLI commands for the seller dashboard."""

from __future__ import annotations

import json

import click

from sellerdash.application.build_dashboard import BuildDashboardHandler
from sellerdash.application.dto import DashboardDTO
from sellerdash.domain.exceptions import DomainException, EntityNotFoundError
from sellerdash.infrastructure.bootstrap import (
    book_repository,
    order_repository,
    user_repository,
)


def _display_dashboard(dto: DashboardDTO) -> None:
    """Human-readable rendition of a dashboard."""
    summary = dto.summary
    click.echo(f"Seller {dto.seller_id}")
    click.echo(f"Window: {dto.window.start:%Y-%m-%d %H:%M} .. {dto.window.end:%Y-%m-%d %H:%M}")
    click.echo()
    click.echo(f"  {'Paid orders':<28} {summary.total_orders:>10}")
    click.echo(f"  {'  delivered':<28} {summary.paid_and_delivered_orders:>10}")
    click.echo(f"  {'  processing':<28} {summary.processing_orders:>10}")
    click.echo(f"  {'Pending payment':<28} {summary.pending_payment_orders:>10}")
    click.echo(f"  {'Revenue':<28} {str(summary.total_revenue):>10}")
    click.echo(f"  {'Books in catalog':<28} {summary.available_books:>10}")
    click.echo()

    if not dto.orders:
        click.echo("No paid or pending orders in this window.")
        return

    click.echo(
        f"  {'Created':<17} {'Order':<12} {'Buyer':<16} {'Payment':<9} "
        f"{'Status':<11} {'Earnings':>10}"
    )
    click.echo(f"  {'-'*80}")
    for order in dto.orders:
        click.echo(
            f"  {order.created_at:%Y-%m-%d %H:%M} {order.id:<12} "
            f"{order.buyer.name:<16} {order.payment_status:<9} "
            f"{order.order_status:<11} {str(order.pricing.seller_earnings):>10}"
        )
        for line in order.books:
            click.echo(f"      {line.quantity:>3} x {line.title}")


@click.command("show")
@click.option("--seller", "seller_id", required=True, help="Seller ID.")
@click.option("--start", "raw_start", default=None, help="Window start (YYYY-MM-DD).")
@click.option("--end", "raw_end", default=None, help="Window end (YYYY-MM-DD), inclusive.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit the JSON document.")
@click.pass_obj
def dashboard_show(
    obj: dict,
    seller_id: str,
    raw_start: str | None,
    raw_end: str | None,
    as_json: bool,
) -> None:
    """Show a seller's dashboard.

    Without --start/--end (or with an invalid range) the last 30 days are
    reported.
    """
    base = obj.get("data_dir")
    handler = BuildDashboardHandler(
        order_repo=order_repository(base),
        book_repo=book_repository(base),
    )

    try:
        if user_repository(base).get_by_id(seller_id) is None:
            raise EntityNotFoundError(f"Seller '{seller_id}' not found")
        dto = handler.handle(seller_id, raw_start=raw_start, raw_end=raw_end)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        _display_dashboard(dto)
