from __future__ import annotations
import enum
import logging
import shlex
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import DEFAULT_SETTINGS, WorkflowSettings
from ..errors import EmptySuggestion, NoStagedChanges
from .git_tools import has_staged_changes

logger = logging.getLogger(__name__)


class MessageOrigin(enum.Enum):
    SUGGESTED = "suggested"
    MANUAL = "manual"


@dataclass
class CommitMessage:
    text: str
    origin: MessageOrigin = MessageOrigin.SUGGESTED


class SuggestionProvider:
    """Obtain a commit message from `gh copilot`.

    The tool is run in shell-out mode, so what it prints is a command line,
    not the message. That command is executed in turn and its output is the
    message. Both steps go through the same runner.
    """

    def __init__(self, runner, settings: WorkflowSettings = DEFAULT_SETTINGS,
                 on_command: Optional[Callable[[str], None]] = None):
        self.runner = runner
        self.settings = settings
        self.on_command = on_command

    def suggestion_command(self) -> str:
        return self.settings.suggestion_command.format(
            prompt=shlex.quote(self.settings.suggestion_prompt))

    def generate_commit_message(self) -> CommitMessage:
        if not has_staged_changes(self.runner):
            raise NoStagedChanges()

        suggestion = self.runner.run(self.suggestion_command()).raise_for_status().stdout
        if not suggestion:
            raise EmptySuggestion()

        # External output about to be executed as a shell command
        logger.warning("executing suggested command: %s", suggestion)
        if self.on_command:
            self.on_command(suggestion)
        text = self.runner.run(suggestion).raise_for_status().stdout
        if not text:
            raise EmptySuggestion("Suggested command produced no commit message")
        return CommitMessage(text=text, origin=MessageOrigin.SUGGESTED)
