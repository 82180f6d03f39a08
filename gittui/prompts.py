"""Prompt surfaces the workflow talks to."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

LEVEL_STYLES = {
    "info": "",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}

YES = {"y", "yes"}
NO = {"n", "no"}


class ConfirmationSurface(ABC):
    """What the workflow needs from a front-end: pick, confirm, type, report."""

    @abstractmethod
    def choose_one(self, prompt: str, options: Sequence[str]) -> int:
        ...

    @abstractmethod
    def confirm(self, prompt: str, default: bool = True) -> bool:
        ...

    @abstractmethod
    def read_text(self, prompt: str) -> str:
        ...

    @abstractmethod
    def show(self, message: str, level: str = "info") -> None:
        ...


class ConsoleSurface(ConfirmationSurface):
    """Line-based surface on a rich Console.

    Uses console.input rather than rich.prompt so it behaves the same in
    terminals where rich's prompt helpers misbehave.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def choose_one(self, prompt: str, options: Sequence[str]) -> int:
        if not options:
            raise ValueError("choose_one needs at least one option")
        while True:
            self.console.print(f"[bold]{escape(prompt)}[/bold]")
            for i, option in enumerate(options, 1):
                self.console.print(f"  [cyan]{i}[/cyan]) {escape(option)}")
            answer = self.console.input("[bold green]› [/]").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            # Accept the option text itself too
            lowered = [o.lower() for o in options]
            if answer.lower() in lowered:
                return lowered.index(answer.lower())
            self.console.print(f"[yellow]Please enter a number between 1 and {len(options)}.[/yellow]")

    def confirm(self, prompt: str, default: bool = True) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self.console.input(f"{escape(prompt)} {escape(hint)} ").strip().lower()
            if not answer:
                return default
            if answer in YES:
                return True
            if answer in NO:
                return False
            self.console.print("[yellow]Please answer y or n.[/yellow]")

    def read_text(self, prompt: str) -> str:
        return self.console.input(f"{escape(prompt)}: ").strip()

    def show(self, message: str, level: str = "info") -> None:
        style = LEVEL_STYLES.get(level, "")
        if style:
            self.console.print(f"[{style}]{escape(message)}[/{style}]")
        else:
            self.console.print(escape(message))
