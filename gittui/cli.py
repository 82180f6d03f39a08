from __future__ import annotations
import logging
import os
import sys
import typer
from rich import print
from rich.console import Console
from dotenv import load_dotenv
from .errors import TerminalError
from .prompts import ConsoleSurface
from .rich_ui import AppContext, ScreenPresenter
from .tools.git_tools import git_current_branch
from .tools.shell import ShellRunner
from .workflow import Workflow

# Load environment variables from .env file
load_dotenv()

DEBUG_LOG = "gittui_debug.log"
COMMANDS = ["menu", "screen", "--help"]

app = typer.Typer(add_completion=False)


def configure_logging(debug: bool) -> None:
    logger = logging.getLogger("gittui")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if not debug:
        logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(os.path.join(os.getcwd(), DEBUG_LOG), mode="w")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _check_repo(repo: str) -> None:
    if not os.path.isdir(repo):
        raise typer.BadParameter("repo must be a directory")


@app.command()
def menu(repo: str = typer.Option(".", help="Path to the git repository"),
         debug: bool = typer.Option(False, help=f"Write a debug log to ./{DEBUG_LOG}")):
    """Interactive stage / suggest / commit / push menu."""
    _check_repo(repo)
    configure_logging(debug)
    surface = ConsoleSurface(Console())
    workflow = Workflow(ShellRunner(repo), surface)
    try:
        workflow.run_menu()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


@app.command()
def screen(repo: str = typer.Option(".", help="Path to the git repository"),
           debug: bool = typer.Option(False, help=f"Write a debug log to ./{DEBUG_LOG}")):
    """Full-screen tabbed repository view (q to quit)."""
    _check_repo(repo)
    configure_logging(debug)
    context = AppContext(branch=git_current_branch(ShellRunner(repo)))
    try:
        ScreenPresenter(context).run()
    except TerminalError as e:
        # The terminal may be left unusable; stop the program
        logging.getLogger("gittui").error("terminal failure: %s", e)
        print(f"[red]Terminal error:[/red] {e}")
        raise typer.Exit(code=1)


def main():
    # No arguments or options only: default to the interactive menu
    if len(sys.argv) == 1 or sys.argv[1] not in COMMANDS:
        sys.argv.insert(1, "menu")
    app()


if __name__ == "__main__":
    main()
