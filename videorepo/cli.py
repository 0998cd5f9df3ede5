"""Command-line interface for videorepo."""

import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from videorepo.config import Config
from videorepo.http import FeedFetcher
from videorepo.models import PAGE_SIZE, SortOrder
from videorepo.session import MemorySessionStore
from videorepo.sources import RepositoryError, get_registry
from videorepo.strings import get_string


console = Console()

DEFAULT_INSTANCE = "cli"


def get_config() -> Config:
    """Get the configured settings."""
    return Config.load()


def create_fetcher(config: Config) -> FeedFetcher:
    return config.create_fetcher()


@click.group()
@click.version_option(package_name="videorepo")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """videorepo - Browse remote video catalogs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("search")
@click.argument("keyword", required=False, default="")
@click.option("--page", "-p", default=1, show_default=True, help="Page to show.")
@click.option("--instance", "-i", default=DEFAULT_INSTANCE, show_default=True, help="Repository instance ID.")
@click.option("--type", "repository_type", default="vimeo", show_default=True, help="Repository type.")
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SortOrder]),
    default=None,
    help=get_string("sortby") + " (accepted, not applied by Vimeo).",
)
def search(keyword: str, page: int, instance: str, repository_type: str, sort: str | None) -> None:
    """Search a user's or channel's videos.

    Leave KEYWORD out with --page > 1 to continue the previous search.
    """
    config = get_config()
    registry = get_registry()

    if registry.get(repository_type) is None:
        console.print(f"[red]Unknown repository type: {repository_type}[/red]")
        sys.exit(1)

    with config.create_session_store() as store:
        repository = registry.create_instance(
            repository_type, instance, store, fetcher=create_fetcher(config)
        )
        try:
            listing = repository.search(keyword, page, SortOrder(sort) if sort else None)
        except RepositoryError as e:
            console.print(f"[red]Search failed: {e}[/red]")
            sys.exit(1)

    if not listing.entries:
        console.print(f"[dim]No videos on page {listing.page}.[/dim]")
        return

    table = Table(show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title")
    table.add_column("Caption", style="dim")
    table.add_column("Link")

    start = (listing.page - 1) * PAGE_SIZE
    for i, entry in enumerate(listing.entries, start + 1):
        caption = entry.thumbnail_title
        if len(caption) > 60:
            caption = caption[:57] + "..."
        table.add_row(
            str(i),
            entry.shorttitle,
            caption,
            entry.source,
        )

    console.print(table)
    if listing.has_more:
        console.print(
            f"[dim]Page {listing.page}. "
            f"Run 'videorepo search --page {listing.pages} -i {instance}' for more.[/dim]"
        )
    else:
        console.print(f"[dim]Page {listing.page} (last).[/dim]")


@main.command("form")
@click.option("--type", "repository_type", default="vimeo", show_default=True, help="Repository type.")
def form(repository_type: str) -> None:
    """Show the search form a repository presents."""
    plugin = get_registry().get(repository_type)
    if plugin is None:
        console.print(f"[red]Unknown repository type: {repository_type}[/red]")
        sys.exit(1)

    descriptor = plugin.create(DEFAULT_INSTANCE, MemorySessionStore()).print_login()

    for field in descriptor["login"]:
        console.print(f"[bold]{field['label']}[/bold] <{field['type']} name={field['name']}>")
    console.print(f"[dim]Button: {descriptor['login_btn_label']} -> {descriptor['login_btn_action']}[/dim]")


@main.command("info")
def info() -> None:
    """List repository types and what they support."""
    registry = get_registry()

    if not registry.plugins:
        console.print("[dim]No repository plugins found.[/dim]")
        return

    table = Table(show_header=True)
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("File types")
    table.add_column("Returns")
    table.add_column("Private data")

    store = MemorySessionStore()
    for plugin in registry.plugins:
        repository = plugin.create(DEFAULT_INSTANCE, store)
        table.add_row(
            plugin.repository_type,
            plugin.description,
            ", ".join(repository.supported_filetypes()),
            str(repository.supported_returntypes().name).lower(),
            "yes" if repository.contains_private_data() else "no",
        )

    console.print(table)


if __name__ == "__main__":
    main()
