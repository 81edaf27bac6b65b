"""Synchronization commands for operators."""

import typer
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from community_market.core.services import ProductReconciler, ProductSynchronizer
from community_market.runtime.context import get_config

from .utils import console, get_database_service

sync_app = typer.Typer(help="Community projection synchronization commands")


def _reconciler(session, workers: int | None) -> ProductReconciler:
    return ProductReconciler(
        session,
        max_workers=workers or get_config().sync.max_workers,
        session_factory=get_database_service().session_scope,
    )


def _print_summary(scope: str, synchronized: int) -> None:
    table = Table(title="Synchronization summary")
    table.add_column("Scope", style="cyan")
    table.add_column("Synchronized", justify="right", style="green")
    table.add_row(scope, str(synchronized))
    console.print(table)


@sync_app.command("product")
def sync_product(product_id: str = typer.Argument(..., help="Product id")) -> None:
    """Synchronize a single product."""
    try:
        with get_database_service().session_scope() as session:
            synced = ProductSynchronizer(session).sync_product(product_id)
    except SQLAlchemyError as e:
        console.print(f"[red]Storage error while synchronizing {product_id}: {e}[/red]")
        raise typer.Exit(1) from e

    if not synced:
        console.print(f"[yellow]Product {product_id} or its store not found; nothing to sync[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]Product {product_id} synchronized[/green]")


@sync_app.command("all")
def sync_all(
    workers: int | None = typer.Option(
        None, "--workers", "-w", min=1, help="Concurrent syncs (defaults to config)"
    ),
) -> None:
    """Synchronize every active product that is still pending."""
    with get_database_service().session_scope() as session:
        synchronized = _reconciler(session, workers).sync_all_unsynchronized()
    _print_summary("unsynchronized products", synchronized)


@sync_app.command("store")
def sync_store(
    store_id: str = typer.Argument(..., help="Store id"),
    workers: int | None = typer.Option(
        None, "--workers", "-w", min=1, help="Concurrent syncs (defaults to config)"
    ),
) -> None:
    """Re-synchronize all active products of one store."""
    with get_database_service().session_scope() as session:
        synchronized = _reconciler(session, workers).sync_products_by_store(store_id)
    _print_summary(f"store {store_id}", synchronized)
