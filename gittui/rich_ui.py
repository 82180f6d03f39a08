"""Rich-based full-screen repository view with tabbed navigation."""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.align import Align
from rich.text import Text
from rich.table import Table

from .config import DEFAULT_SETTINGS
from .terminal import RawTerminal

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.25
QUIT_HINT = "Tab/Shift+Tab: switch tab | q: quit"


class Key(enum.Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"


def decode_key(data: str) -> Optional[Key]:
    """Map raw terminal input to a navigation key; None when unrecognised."""
    if not data:
        return None
    if data.startswith("\x1b[Z"):  # Shift+Tab
        return Key.PREVIOUS
    if data[0] == "\t":
        return Key.NEXT
    if data[0] in ("q", "Q", "\x03"):
        return Key.QUIT
    return None


def _key_length(data: str) -> int:
    # ESC [ <final> is one key (Shift+Tab, arrows); anything else is one char
    if data.startswith("\x1b[") and len(data) >= 3:
        return 3
    return 1


def decode_keys(data: str) -> List[Key]:
    """Decode every key in one read; unrecognised keys are skipped."""
    keys: List[Key] = []
    while data:
        size = _key_length(data)
        key = decode_key(data[:size])
        if key is not None:
            keys.append(key)
        data = data[size:]
    return keys


@dataclass
class Tab:
    title: str
    body: str


# Representative content only; the view is not wired to the repository.
DEFAULT_TABS: List[Tab] = [
    Tab("Status", "On branch master\nYour branch is up to date with 'origin/master'.\n\n"
                  "Changes not staged for commit:\n  modified:   src/main.py\n  modified:   README.md"),
    Tab("Staged", "Changes to be committed:\n  new file:   src/config.py\n  modified:   tests/test_main.py"),
    Tab("Log", "a1b2c3d fix: correct null check\n"
               "9f8e7d6 feat: add push confirmation\n"
               "5a4b3c2 chore: initial commit"),
    Tab("Remote", "origin  git@example.com:user/project.git (fetch)\n"
                  "origin  git@example.com:user/project.git (push)"),
]


@dataclass
class TabState:
    selected_index: int = 0
    tab_count: int = 1

    def __post_init__(self) -> None:
        if self.tab_count < 1:
            raise ValueError("tab_count must be at least 1")
        if not 0 <= self.selected_index < self.tab_count:
            raise ValueError(f"selected_index {self.selected_index} out of range")

    def next(self) -> int:
        self.selected_index = (self.selected_index + 1) % self.tab_count
        return self.selected_index

    def previous(self) -> int:
        self.selected_index = (self.selected_index - 1) % self.tab_count
        return self.selected_index


@dataclass
class AppContext:
    """Everything the screen loop mutates, passed through render and update."""
    tabs: List[Tab] = field(default_factory=lambda: list(DEFAULT_TABS))
    branch: str = DEFAULT_SETTINGS.branch
    status: str = "Ready"
    running: bool = True
    tab_state: Optional[TabState] = None

    def __post_init__(self) -> None:
        if not self.tabs:
            raise ValueError("at least one tab is required")
        if self.tab_state is None:
            self.tab_state = TabState(0, len(self.tabs))

    @property
    def selected_tab(self) -> Tab:
        return self.tabs[self.tab_state.selected_index]

    def handle_key(self, key: Optional[Key]) -> None:
        if key is Key.NEXT:
            self.tab_state.next()
        elif key is Key.PREVIOUS:
            self.tab_state.previous()
        elif key is Key.QUIT:
            self.running = False
            return
        else:
            return
        self.status = f"Viewing {self.selected_tab.title}"


class ScreenPresenter:
    def __init__(self, context: Optional[AppContext] = None, console: Optional[Console] = None,
                 terminal: Optional[RawTerminal] = None, tick: float = TICK_SECONDS) -> None:
        self.context = context or AppContext()
        self.console: Console = console or Console()
        self.terminal = terminal or RawTerminal()
        self.tick = tick

    # ---------- Rendering ----------
    def render(self) -> Layout:
        ctx = self.context
        layout = Layout(name="root")
        layout.split(
            Layout(name="header", size=1),
            Layout(name="body", ratio=1),
            Layout(name="footer", size=1),
        )
        layout["body"].split_row(
            Layout(name="nav", size=22),
            Layout(name="main", ratio=1),
        )
        layout["header"].update(Align.left(
            Text.assemble((" gittui ", "bold reverse"), "  branch: ", (ctx.branch, "bold cyan"))))
        layout["nav"].update(Panel(self._nav(), title="Tabs", border_style="dim"))
        tab = ctx.selected_tab
        layout["main"].update(Panel(Text(tab.body), title=tab.title, border_style="green"))
        layout["footer"].update(Align.left(Text(f"{ctx.status} | {QUIT_HINT}", style="dim")))
        return layout

    def _nav(self) -> Table:
        grid = Table.grid(padding=0)
        grid.expand = True
        for i, tab in enumerate(self.context.tabs):
            if i == self.context.tab_state.selected_index:
                grid.add_row(Text(f"› {tab.title}", style="bold reverse"))
            else:
                grid.add_row(Text(f"  {tab.title}"))
        return grid

    # ---------- Loop ----------
    def run(self) -> None:
        """Redraw every tick until a quit key arrives.

        The terminal mode and the alternate screen are restored on every
        exit path, including exceptions raised while drawing.
        """
        ctx = self.context
        ctx.running = True
        logger.debug("screen loop starting with %d tabs", len(ctx.tabs))
        with self.terminal as term:
            live = Live(self.render(), console=self.console, screen=True,
                        auto_refresh=False, transient=True)
            live.start()
            try:
                while ctx.running:
                    live.update(self.render(), refresh=True)
                    try:
                        data = term.read_key(self.tick)
                    except KeyboardInterrupt:
                        ctx.running = False
                        break
                    for key in decode_keys(data):
                        ctx.handle_key(key)
                        if not ctx.running:
                            break
            finally:
                live.stop()
                self.console.show_cursor(True)
        logger.debug("screen loop stopped")
