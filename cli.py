"""
CLI tool for the author catalog.

Provides commands for running the server, creating the database tables,
adding books and inspecting the stored authors.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.lookup import Found
from catalog.storage.db import async_session, engine, wait_and_init_db
from catalog.storage.store import CatalogStore

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Author Catalog CLI - Run the server and inspect stored authors",
    add_completion=False,
)
console = Console()


@typer_app.command(name="serve")
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(
        False, "--reload", help="Restart the server on code changes"
    ),
):
    """
    Run the HTTP server with uvicorn.

    Example:
        python cli.py serve --port 8080
    """
    import uvicorn

    uvicorn.run("catalog:app", host=host, port=port, reload=reload)


@typer_app.command(name="init-db")
def init_db():
    """
    Wait for the database and create the catalog tables.

    Example:
        python cli.py init-db
    """

    async def _run() -> None:
        try:
            await wait_and_init_db()
        finally:
            await engine.dispose()

    try:
        asyncio.run(_run())
    except RuntimeError as ex:
        console.print(f"[red]✗ {ex}[/red]")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            "[green]✓ Tables created[/green]",
            border_style="green",
            title="Success",
        )
    )


async def _load_authors() -> list[Author]:
    try:
        return await CatalogStore(async_session).find_sorted("family_name")
    finally:
        await engine.dispose()


@typer_app.command(name="authors")
def authors():
    """
    Display a table of all authors sorted by family name.

    Example:
        python cli.py authors
    """
    rows = asyncio.run(_load_authors())

    table = Table(
        "ID",
        "Name",
        "Lifespan",
        "URL",
        title="Authors",
        show_lines=True,
    )
    for author in rows:
        table.add_row(
            str(author.id),
            author.name,
            author.lifespan or "[dim]unknown[/dim]",
            author.url,
        )

    console.print()
    console.print(table)
    console.print()
    console.print(f"[bold]Total:[/bold] {len(rows)} author(s)")


async def _add_book(book: Book) -> Book | None:
    store = CatalogStore(async_session)
    try:
        if not isinstance(await store.find_by_id(book.author_id), Found):
            return None
        return await store.insert_book(book)
    finally:
        await engine.dispose()


@typer_app.command(name="add-book")
def add_book(
    author_id: int = typer.Option(..., "--author-id", "-a", help="Author of the book"),
    title: str = typer.Option(..., "--title", "-t", help="Book title"),
    summary: str = typer.Option("", "--summary", help="Short description"),
    isbn: str = typer.Option("", "--isbn", help="ISBN of the edition"),
):
    """
    Add a book for an existing author.

    Authors referenced by books cannot be deleted until the books are gone.

    Example:
        python cli.py add-book --author-id 3 --title "Emma" --isbn 9780141439587
    """
    created = asyncio.run(
        _add_book(Book(title=title, summary=summary, isbn=isbn, author_id=author_id))
    )
    if created is None:
        console.print(f"[red]✗ Author {author_id} not found[/red]")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[green]✓ Book {created.id} added: {created.title}[/green]",
            border_style="green",
            title="Success",
        )
    )


if __name__ == "__main__":
    typer_app()
