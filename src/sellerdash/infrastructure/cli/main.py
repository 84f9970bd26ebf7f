import click

from sellerdash.infrastructure.bootstrap import DATA_DIR_ENV, configure_logging
from sellerdash.infrastructure.cli.book_commands import book_list
from sellerdash.infrastructure.cli.dashboard_commands import dashboard_show


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding orders.json, books.json and users.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Seller Dashboard: per-seller view of the shared order ledger"""
    configure_logging("DEBUG" if verbose else None)
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def dashboard() -> None:
    """Seller dashboard reports."""


@cli.group()
def book() -> None:
    """Inspect a seller's catalog."""


# Register subcommands
dashboard.add_command(dashboard_show)
book.add_command(book_list)
