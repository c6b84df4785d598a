"""Console presentation of rendered clipboard items."""

from typing import Iterable, Optional

from rich.console import Console

from .render import RenderedItem

# Semantic tag -> rich style
STYLES = {
    "label": "blue",
    "bracket": "yellow",
    "formats": "bright_blue",
    "title": "bright_yellow",
    "bytes": "yellow",
    "preamble": "cyan",
    "content": "bright_black",
    "error": "red",
}


class Presenter:
    """Write (text, tag) pairs to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def write(self, text: str, tag: str, end: str = "") -> None:
        # Clipboard text may contain [brackets]; never treat it as markup
        self.console.print(
            text,
            style=STYLES.get(tag),
            end=end,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def write_line(self, text: str, tag: str) -> None:
        self.write(text, tag, end="\n")

    def show_formats(self, formats: Iterable[str]) -> None:
        self.console.print()
        self.write("Formats: ", "label")
        self.write("[", "bracket")
        self.write(", ".join(formats), "formats")
        self.write_line("]", "bracket")

    def show_item(self, item: RenderedItem) -> None:
        self.console.print()
        self.write_line(
            f"{item.format_name} - {item.length} chars ({item.type_label})", "title"
        )

        if item.byte_preview is not None:
            self.write_line(f"Bytes 0..9 {{ {item.byte_preview} }}", "bytes")

        if item.preamble is not None:
            self.write(item.preamble, "preamble")

        self.write("[", "bracket")
        self.write(item.content, "content")
        self.write_line("]", "bracket")

    def show_error(self, message: str) -> None:
        self.write_line(f"❌ {message}", "error")
