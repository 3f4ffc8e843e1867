"""Shared helpers for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.table import Table
from sqlmodel import Session

from src.selectshop.core.exceptions import SelectShopError
from src.selectshop.core.models.paging import Page
from src.selectshop.core.models.product import ProductView
from src.selectshop.core.services.database import DbSessionService
from src.selectshop.entities.core.user import User, UserRepository

console = Console()


def get_db_service() -> DbSessionService:
    return DbSessionService()


@contextmanager
def cli_session() -> Iterator[Session]:
    """Open a session and turn domain errors into a red message and exit code 1."""
    session = get_db_service().get_session()
    try:
        yield session
    except SelectShopError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        session.close()


def require_user(session: Session, username: str) -> User:
    user = UserRepository(session).get_by_username(username)
    if user is None:
        console.print(f"[red]❌ Unknown user '{username}'[/red]")
        raise typer.Exit(code=1)
    return user


def print_products(page: Page[ProductView], title: str) -> None:
    if not page.items:
        console.print(f"[yellow]No products on page {page.page}[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Listed", justify="right")
    table.add_column("Target", justify="right", style="magenta")

    for product in page.items:
        table.add_row(
            product.id, product.title, str(product.lprice), str(product.myprice)
        )

    console.print(table)
    console.print(
        f"Page {page.page + 1} of {page.total_pages} ({page.total} products)"
    )
