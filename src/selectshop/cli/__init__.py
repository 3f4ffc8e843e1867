"""Main CLI application module."""

import typer

from src.selectshop.runtime.log_setup import configure_logging

from .catalog_commands import folders_app, products_app, users_app
from .db_commands import db_app

app = typer.Typer(
    help="🛒 SelectShop CLI - interest products, folders and target prices",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")
app.add_typer(products_app, name="products")
app.add_typer(folders_app, name="folders")


@app.callback()
def _setup() -> None:
    configure_logging()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
