"""CLI interface for browsing the fake store catalog."""

import asyncio
import json
import logging
import sys
from enum import Enum

import typer

from .client import CatalogClient
from .config import CatalogSettings, get_settings
from .model import Product
from .state import Error, FetchState, Loaded, Loading
from .store import CatalogStore

app = typer.Typer(help="Fake store catalog browser")


class Layout(str, Enum):
    """Ways of laying out the product catalog."""

    grid = "grid"
    list = "list"


def setup_logging(settings: CatalogSettings) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    logging.getLogger("urllib3").setLevel(logging.WARNING)


def fetch_state(settings: CatalogSettings, product_id: int | None = None) -> FetchState:
    """Run one load to completion and return the state it settled in."""

    def show_progress(state: FetchState) -> None:
        if isinstance(state, Loading):
            typer.echo("Loading...", err=True)

    async def run() -> FetchState:
        with CatalogClient(settings) as client:
            store = CatalogStore(client)
            store.subscribe(show_progress)
            if product_id is None:
                await store.load_products()
            else:
                await store.load_product(product_id)
            return store.state

    return asyncio.run(run())


def format_grid(products: list[Product], columns: int) -> str:
    """Lay products out in fixed-width columns, one cell per product."""
    cells = [f"{p.title[:34]} (${p.price:.2f})" for p in products]
    width = max(len(cell) for cell in cells) + 2
    rows = []
    for start in range(0, len(cells), columns):
        row = cells[start:start + columns]
        rows.append("".join(cell.ljust(width) for cell in row).rstrip())
    return "\n".join(rows)


def format_list(products: list[Product]) -> str:
    return "\n".join(
        f"{p.id:>4}  {p.title}  ${p.price:.2f}  [{p.rating.rate}/5]" for p in products
    )


def format_details(product: Product) -> str:
    return "\n".join(
        [
            product.title,
            f"Image: {product.image}",
            f"Price: ${product.price}",
            f"Rating {product.rating.rate}",
            f"Remaining {product.rating.count}",
        ]
    )


def _unwrap(state: FetchState):
    """Return the loaded value, or exit reporting the error."""
    if isinstance(state, Error):
        typer.echo(f"Error: {state.message}", err=True)
        raise typer.Exit(1)
    if not isinstance(state, Loaded):
        typer.echo("Error: load did not complete", err=True)
        raise typer.Exit(1)
    return state.value


@app.callback()
def main(ctx: typer.Context):
    """Load settings and configure logging for every command."""
    settings = get_settings()
    setup_logging(settings)
    ctx.obj = settings


@app.command()
def products(
    ctx: typer.Context,
    layout: Layout = typer.Option(
        Layout.grid,
        "--layout",
        "-l",
        help="Show products as a grid or a list.",
    ),
    columns: int = typer.Option(
        2,
        "--columns",
        "-n",
        min=1,
        help="Number of grid columns.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the decoded products as JSON.",
    ),
):
    """Show the product catalog."""
    items = _unwrap(fetch_state(ctx.obj))

    if as_json:
        typer.echo(json.dumps([p.model_dump() for p in items], indent=2))
        return

    if not items:
        typer.echo("No products found")
        return

    if layout == Layout.grid:
        typer.echo(format_grid(items, columns))
    else:
        typer.echo(format_list(items))


@app.command()
def product(
    ctx: typer.Context,
    product_id: int = typer.Argument(..., help="ID of the product to show."),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the decoded product as JSON.",
    ),
):
    """Show the details of a single product."""
    item = _unwrap(fetch_state(ctx.obj, product_id))

    if as_json:
        typer.echo(json.dumps(item.model_dump(), indent=2))
    else:
        typer.echo(format_details(item))


if __name__ == "__main__":
    app()
