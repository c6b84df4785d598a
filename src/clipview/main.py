from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from clipview import __version__
from clipview import clipboard
from clipview.console import Presenter
from clipview.exceptions import ClipboardAccessError, ImageSaveError
from clipview.render import render_item

console = Console(highlight=False)


def version_callback(value: bool):
    """Handle --version flag."""
    if value:
        console.print(f"[cyan]clipview version {__version__}[/cyan]")
        raise typer.Exit()


def dump_clipboard(
    source: clipboard.ClipboardSource,
    presenter: Presenter,
    auto_convert: bool = False,
    save_images: bool = False,
    save_dir: Optional[Path] = None,
) -> int:
    """
    Render every format of a clipboard source.

    Returns:
        Number of payloads that could not be rendered
    """
    formats = source.list_formats()
    presenter.show_formats(formats)

    failures = 0
    for format_name in formats:
        payload = source.get_payload(format_name, auto_convert)
        if payload is None:
            continue

        try:
            item = render_item(format_name, payload, save_images, save_dir)
        except ImageSaveError as e:
            presenter.show_error(f"{format_name}: {e}")
            failures += 1
            continue

        presenter.show_item(item)

    return failures


def main(
    auto_convert: bool = typer.Option(
        False,
        "--auto",
        "--all",
        "-a",
        help="Include formats the clipboard can auto-convert to"
    ),
    save_images: bool = typer.Option(
        False,
        "--save",
        "--save-images",
        "-s",
        help="Save image payloads to files"
    ),
    save_dir: Optional[Path] = typer.Option(
        None,
        "--save-dir",
        file_okay=False,
        help="Directory for saved images (defaults to the temp directory)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    ),
):
    """
    List every format on the clipboard and show its content.

    Examples:
        clipview              # Show all formats
        clipview --all        # Include auto-converted formats
        clipview --save       # Also write images to the temp directory
    """
    try:
        source = clipboard.open_source(auto_convert)
    except ClipboardAccessError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    failures = dump_clipboard(source, Presenter(console), auto_convert, save_images, save_dir)
    if failures:
        raise typer.Exit(1)


# Create the Typer app
app = typer.Typer(
    name="clipview",
    help="Inspect every format on the clipboard",
    add_completion=False,
)

# Register main function as the only command
app.command()(main)

if __name__ == "__main__":
    app()
