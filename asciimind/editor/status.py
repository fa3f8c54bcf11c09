from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from ..map_components.document import Document
from .modes import EditMode, LinkMode, Mode

BAR_STYLE = Style(color="#E0E0E0", bgcolor="#2A2A2A")
MODE_STYLES = {
    "normal": Style(color="#000000", bgcolor="#00D787", bold=True),
    "edit": Style(color="#000000", bgcolor="#FFB86C", bold=True),
    "link": Style(color="#000000", bgcolor="#FF79C6", bold=True),
}

HELP_TEXT = (
    "arrows:select wasd:pan +/-:zoom Enter:sibling Tab:child e:edit "
    "x:delete L:link c:center Ctrl+S:save q:quit"
)


def _mode_style(mode: Mode) -> Style:
    if isinstance(mode, EditMode):
        return MODE_STYLES["edit"]
    if isinstance(mode, LinkMode):
        return MODE_STYLES["link"]
    return MODE_STYLES["normal"]


def summary(document: Document) -> str:
    camera = document.camera
    return (
        f" Nodes: {len(document.nodes)} | Zoom: {camera.zoom:.1f}x"
        f" | Pos: ({camera.x:.0f}, {camera.y:.0f}) | ?: help "
    )


def compose_status(mode: Mode, message: str, document: Document, width: int) -> Text:
    left = f" {mode.label} "
    middle = f" {message}" if message else ""
    right = summary(document)

    used = cell_len(left) + cell_len(middle) + cell_len(right)
    spacing = " " * max(width - used, 0)

    line = Text(no_wrap=True, overflow="crop")
    line.append(left, style=_mode_style(mode))
    line.append(middle, style=BAR_STYLE)
    line.append(spacing, style=BAR_STYLE)
    line.append(right, style=BAR_STYLE)
    line.truncate(width)
    return line
