import argparse
import logging
import os
import select
import sys
import termios
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler

from ..errors import ConfigurationError
from .config import EditorConfig
from .editor import Editor
from .events import Event
from .keys import decode_keys, event_for_key

logger = logging.getLogger(__name__)

READ_CHUNK = 64


@contextmanager
def raw_input(fd: int) -> Iterator[None]:
    """Unbuffered, unechoed keyboard input with output processing left on."""
    saved = termios.tcgetattr(fd)
    mode = termios.tcgetattr(fd)
    mode[0] &= ~(termios.IXON | termios.ICRNL)
    mode[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    mode[6][termios.VMIN] = 1
    mode[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class TerminalApp:
    def __init__(self, editor: Editor, console: Optional[Console] = None) -> None:
        self.editor = editor
        self.console = console or Console()

    def _sync_size(self) -> None:
        width, height = self.console.size
        if (width, height) != (self.editor.width, self.editor.height):
            self.editor.handle(Event.resize(width, height))

    def _read_keys(self, fd: int) -> List[str]:
        data = os.read(fd, READ_CHUNK)
        return decode_keys(data.decode("utf-8", errors="ignore"))

    def _dispatch(self, keys: Sequence[str]) -> bool:
        for key in keys:
            event = event_for_key(self.editor.mode, key)
            if event is None:
                continue
            if self.editor.handle(event).quit:
                return False
        return True

    def run(self) -> int:
        fd = sys.stdin.fileno()
        scheduler = self.editor.scheduler
        with raw_input(fd), Live(
            console=self.console, screen=True, auto_refresh=False
        ) as live:
            self._sync_size()
            live.update(self.editor.frame().to_text(), refresh=True)
            while True:
                ready, _, _ = select.select([fd], [], [], scheduler.timeout())
                if ready and not self._dispatch(self._read_keys(fd)):
                    break
                if scheduler.due(time.monotonic()):
                    self.editor.tick()
                self._sync_size()
                live.update(self.editor.frame().to_text(), refresh=True)
        return 0


def configure_logging(log_file: Optional[str], verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    elif verbose:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    else:
        handler = logging.NullHandler()
    logging.basicConfig(level=level, handlers=[handler], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciimind", description="Terminal mind map editor with a pannable, zoomable canvas."
    )
    parser.add_argument("file", nargs="?", help="mind map file used by save/load (default: mindmap.json)")
    parser.add_argument("--smoothness", type=float, help="camera easing factor between 0 and 1")
    parser.add_argument("--tick-rate", type=float, help="camera ticks per second while moving")
    parser.add_argument("--no-load", action="store_true", help="start with an empty map even if the file exists")
    parser.add_argument("--log-file", help="write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    try:
        config = EditorConfig.from_env(
            file_path=args.file, smoothness=args.smoothness, tick_rate=args.tick_rate
        )
    except ConfigurationError as exc:
        print(f"asciimind: {exc}", file=sys.stderr)
        return 2

    if not sys.stdin.isatty():
        print("asciimind: an interactive terminal is required", file=sys.stderr)
        return 1

    editor = Editor(config=config)
    if not args.no_load and Path(config.file_path).exists():
        editor.load()
    logger.info("Starting editor with %s", config.file_path)
    return TerminalApp(editor).run()


if __name__ == "__main__":
    raise SystemExit(main())
