"""ASCII art banner widget replacing the default Textual Header."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_banner() -> Text:
    """Build the banner as a Rich Text object with title and signpost art side by side."""
    # Letters and their column spans in the 3-row font
    #           W        A        Y        M        A        R        K
    colors = [
        "bright_cyan",
        "bright_green",
        "bright_yellow",
        "bright_magenta",
        "bright_red",
        "bright_cyan",
        "bright_green",
    ]
    title_rows = [
        ["╦ ╦", "╔═╗", "╦ ╦", "╔╦╗", "╔═╗", "╦═╗", "╦╔═"],
        ["║║║", "╠═╣", "╚╦╝", "║║║", "╠═╣", "╠╦╝", "╠╩╗"],
        ["╚╩╝", "╩ ╩", " ╩ ", "╩ ╩", "╩ ╩", "╩╚═", "╩ ╩"],
    ]

    # Signpost pointing forward
    art_rows = [
        " ╔═══╗▸ ",
        " ╚═╤═╝  ",
        "   │    ",
    ]

    art_styles = {
        "▸": "bold bright_green",
        "╤": "bold bright_cyan",
        "│": "bold bright_cyan",
    }

    text = Text()
    for letters, art in zip(title_rows, art_rows):
        for part, color in zip(letters, colors):
            text.append(part, style=f"bold {color}")
        text.append("    ")
        for ch in art:
            if ch in "╔╗╚╝═":
                text.append(ch, style="bold bright_yellow")
            else:
                text.append(ch, style=art_styles.get(ch, "default"))
        text.append("\n")

    text.append("Browsing History Tracker", style="bright_white")
    text.append("  │  ", style="dim")
    text.append("back · forward · undo · redo · bookmarks", style="italic cyan")
    return text


class Banner(Vertical):
    """Application banner with ASCII art title."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 5;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > #banner-art {
        width: 100%;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(_build_banner(), id="banner-art")
