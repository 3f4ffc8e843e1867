"""Database maintenance commands."""

import typer
from rich.prompt import Confirm

from src.selectshop.cli.utils import console, get_db_service
from src.selectshop.core.services.database import DbManageService

db_app = typer.Typer(help="Manage the catalog database schema")


@db_app.command("init")
def init() -> None:
    """Create all catalog tables."""
    DbManageService(get_db_service().engine).create_all()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all catalog tables."""
    if not force and not Confirm.ask("Drop every table and all data?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit()

    manager = DbManageService(get_db_service().engine)
    manager.drop_all()
    manager.create_all()
    console.print("[green]✅ Database reset[/green]")


@db_app.command("check")
def check() -> None:
    """Verify database connectivity."""
    if get_db_service().health_check():
        console.print("[green]✅ Database reachable[/green]")
        return
    console.print("[red]❌ Database unreachable[/red]")
    raise typer.Exit(code=1)
