"""User, product and folder commands for local development."""

import typer
from rich.table import Table
from sqlmodel import Session

from src.selectshop.cli.utils import cli_session, console, print_products, require_user
from src.selectshop.core.models.product import ProductMyPriceRequest, ProductRequest
from src.selectshop.core.services import FolderService, MessageResolver, ProductService
from src.selectshop.core.services.database import transaction
from src.selectshop.entities.core.user import User, UserRepository, UserRole
from src.selectshop.runtime.context import get_config

users_app = typer.Typer(help="Manage users")
products_app = typer.Typer(help="Manage interest products")
folders_app = typer.Typer(help="Manage folders")


def _product_service(session: Session, locale: str | None = None) -> ProductService:
    return ProductService(session, MessageResolver.from_config(), locale=locale)


@users_app.command("add")
def add_user(
    username: str = typer.Argument(..., help="Login name"),
    email: str | None = typer.Option(None, "--email", "-e", help="Email address"),
    admin: bool = typer.Option(False, "--admin", help="Grant the ADMIN role"),
) -> None:
    """Create a user."""
    with cli_session() as session:
        repo = UserRepository(session)
        if repo.get_by_username(username) is not None:
            console.print(f"[red]❌ User '{username}' already exists[/red]")
            raise typer.Exit(code=1)

        role = UserRole.ADMIN if admin else UserRole.USER
        with transaction(session):
            user = repo.create(User(username=username, email=email, role=role))

    console.print(f"[green]✅ Created {user.role} user {user.username} ({user.id})[/green]")


@products_app.command("add")
def add_product(
    title: str = typer.Argument(..., help="Product name"),
    lprice: int = typer.Option(0, "--lprice", help="Listed price"),
    link: str | None = typer.Option(None, "--link", help="Shop link"),
    image: str | None = typer.Option(None, "--image", help="Image URL"),
    user: str = typer.Option(..., "--user", "-u", help="Owner username"),
) -> None:
    """Register an interest product for a user."""
    with cli_session() as session:
        owner = require_user(session, user)
        view = _product_service(session).create_product(
            ProductRequest(title=title, lprice=lprice, link=link, image=image), owner
        )
    console.print(f"[green]✅ Registered product {view.id}[/green]")


@products_app.command("list")
def list_products(
    user: str = typer.Option(..., "--user", "-u", help="Acting username"),
    folder: str | None = typer.Option(None, "--folder", help="Only products in this folder"),
    page: int = typer.Option(0, "--page", "-p", help="Zero-based page"),
    size: int | None = typer.Option(None, "--size", "-s", help="Items per page"),
    sort_by: str | None = typer.Option(None, "--sort-by", help="Sort field"),
    ascending: bool = typer.Option(True, "--asc/--desc", help="Sort direction"),
) -> None:
    """List products visible to a user."""
    catalog = get_config().catalog
    size = min(size or catalog.default_page_size, catalog.max_page_size)
    sort_by = sort_by or catalog.default_sort_by

    with cli_session() as session:
        acting = require_user(session, user)
        service = _product_service(session)
        if folder is None:
            result = service.list_products(acting, page, size, sort_by, ascending)
        else:
            result = service.list_products_in_folder(
                folder, page, size, sort_by, ascending, acting
            )

    print_products(result, title=f"Products for {user}")


@products_app.command("set-price")
def set_price(
    product_id: str = typer.Argument(..., help="Product ID"),
    price: int = typer.Argument(..., help="New target price"),
    locale: str | None = typer.Option(None, "--locale", help="Message locale"),
) -> None:
    """Set the target price of a product."""
    with cli_session() as session:
        view = _product_service(session, locale).update_my_price(
            product_id, ProductMyPriceRequest(myprice=price)
        )
    console.print(f"[green]✅ Target price of {view.title} is now {view.myprice}[/green]")


@folders_app.command("add")
def add_folders(
    names: list[str] = typer.Argument(..., help="Folder names"),
    user: str = typer.Option(..., "--user", "-u", help="Owner username"),
) -> None:
    """Create folders for a user."""
    with cli_session() as session:
        owner = require_user(session, user)
        created = FolderService(session).add_folders(names, owner)

    for folder in created:
        console.print(f"[green]✅ Created folder {folder.name} ({folder.id})[/green]")


@folders_app.command("list")
def list_folders(
    user: str = typer.Option(..., "--user", "-u", help="Owner username"),
) -> None:
    """List a user's folders."""
    with cli_session() as session:
        owner = require_user(session, user)
        folders = FolderService(session).get_folders(owner)

    if not folders:
        console.print(f"[yellow]No folders for '{user}'[/yellow]")
        return

    table = Table(title=f"Folders of {user}")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    for folder in folders:
        table.add_row(folder.id, folder.name)
    console.print(table)


@folders_app.command("link")
def link_product(
    product_id: str = typer.Argument(..., help="Product ID"),
    folder_id: str = typer.Argument(..., help="Folder ID"),
    user: str = typer.Option(..., "--user", "-u", help="Acting username"),
) -> None:
    """Put a product into a folder."""
    with cli_session() as session:
        acting = require_user(session, user)
        _product_service(session).add_product_to_folder(product_id, folder_id, acting)
    console.print("[green]✅ Product added to folder[/green]")
