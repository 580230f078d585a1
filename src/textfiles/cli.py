"""CLI interface using typer."""

import json
import logging

import typer

from .core import FetchError
from .navigator import Navigator
from .page import Page

app = typer.Typer(
    name="textfiles",
    help="Terminal browser for the textfiles.com archive",
    no_args_is_help=True,
)

BROWSE_HELP = "[number] open entry  b back  r refresh  h home  q quit"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
):
    """Browse textfiles.com from the terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def page_to_dict(page: Page) -> dict:
    """Serialize a page for JSON output."""
    result = {"url": page.url, "title": page.title}
    if page.is_directory:
        result["entries"] = [
            {
                "name": entry.name,
                "location": entry.location,
                "description": entry.description,
                "kind": entry.kind.value,
            }
            for entry in page.entries
        ]
    else:
        result["text"] = page.text
    return result


def render_page(page: Page):
    """Print a page: numbered entries for listings, raw text for documents."""
    typer.echo(f"== {page.title} ==")
    if not page.is_directory:
        typer.echo(page.text)
        return
    if not page.entries:
        typer.echo("(no entries)")
    for i, entry in enumerate(page.entries, 1):
        marker = "/" if entry.is_dir else " "
        line = f"{i:4}. {entry.name}{marker}"
        if entry.description:
            line += f"  {entry.description}"
        typer.echo(line)


def _load(navigator: Navigator, url: str | None) -> Page:
    if url:
        return navigator.navigate(url)
    return navigator.refresh()


@app.command()
def ls(
    url: str = typer.Argument(None, help="Listing URL (default: home page)"),
    output: str = typer.Option(None, "-o", "--output", help="Output file (JSON)"),
):
    """List the entries of a directory page."""
    with Navigator() as navigator:
        try:
            page = _load(navigator, url)
        except FetchError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    if output:
        with open(output, "w") as f:
            json.dump(page_to_dict(page), f, indent=2, ensure_ascii=False)
        typer.echo(f"Saved to {output}")
    else:
        render_page(page)


@app.command()
def cat(
    url: str = typer.Argument(..., help="URL of the file to show"),
):
    """Print a text file from the archive."""
    with Navigator() as navigator:
        try:
            page = navigator.navigate(url)
        except FetchError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    if page.is_directory:
        render_page(page)
    else:
        typer.echo(page.text, nl=False)


def _run_command(navigator: Navigator, page: Page | None, command: str) -> Page | None:
    """Apply one browse command and return the page to show, if any changed."""
    if command == "b":
        if not navigator.can_go_back():
            typer.echo("Already at the start of history.")
            return None
        return navigator.go_back()
    if command == "r":
        return navigator.refresh()
    if command == "h":
        return navigator.home()
    if command.isdigit():
        if page is None or not page.is_directory:
            typer.echo("Nothing to open here.")
            return None
        index = int(command) - 1
        if not 0 <= index < len(page.entries):
            typer.echo(f"No entry {command}.")
            return None
        return navigator.open(page.entries[index])
    typer.echo(BROWSE_HELP)
    return None


@app.command()
def browse(
    url: str = typer.Argument(None, help="Start URL (default: home page)"),
):
    """Browse interactively, one command per line."""
    with Navigator() as navigator:
        page: Page | None = None
        try:
            page = _load(navigator, url)
            render_page(page)
        except FetchError as e:
            typer.echo(f"Error: {e}", err=True)

        typer.echo(BROWSE_HELP)
        while True:
            command = typer.prompt(navigator.current_location).strip().lower()
            if command == "q":
                break
            try:
                new_page = _run_command(navigator, page, command)
            except FetchError as e:
                typer.echo(f"Error: {e}", err=True)
                continue
            if new_page is not None:
                page = new_page
                render_page(page)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"textfiles {__version__}")


if __name__ == "__main__":
    app()
