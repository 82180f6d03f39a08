"""Stage, suggest, confirm, commit and push, one checkpoint at a time."""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_SETTINGS, EXIT_INDEX, GENERATE_INDEX, WorkflowSettings
from .errors import ExecutionError, GitTuiError, UserCancelled, WorkflowError, describe
from .prompts import ConfirmationSurface
from .tools.git_tools import git_commit, git_push, git_stage_all, git_status
from .tools.suggest import CommitMessage, MessageOrigin, SuggestionProvider

logger = logging.getLogger(__name__)


class WorkflowStep(enum.Enum):
    IDLE = "idle"
    CHECKING_STATUS = "checking_status"
    STAGING = "staging"
    GENERATING_MESSAGE = "generating_message"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COMMITTING = "committing"
    PUSHING = "pushing"
    DONE = "done"
    ABORTED = "aborted"


# What to put in front of an error raised while in a given step
FAILURE_PREFIXES = {
    WorkflowStep.CHECKING_STATUS: "Git status error",
    WorkflowStep.STAGING: "Failed to stage changes",
    WorkflowStep.GENERATING_MESSAGE: "Failed to generate commit message",
    WorkflowStep.COMMITTING: "Commit failed",
    WorkflowStep.PUSHING: "Push failed",
}


@dataclass
class WorkflowOutcome:
    step: WorkflowStep
    message: Optional[CommitMessage] = None
    error: Optional[GitTuiError] = None

    @property
    def succeeded(self) -> bool:
        return self.step is WorkflowStep.DONE


class Workflow:
    """Drives one repository through the commit-and-push sequence.

    Every failure aborts the current run only: it is reported through the
    surface and control returns to the menu. Nothing already applied is
    rolled back, so a failed push leaves the commit in place.
    """

    def __init__(self, runner, surface: ConfirmationSurface,
                 settings: WorkflowSettings = DEFAULT_SETTINGS,
                 provider: Optional[SuggestionProvider] = None):
        self.runner = runner
        self.surface = surface
        self.settings = settings
        self.provider = provider or SuggestionProvider(runner, settings, on_command=self._announce_command)
        self.step = WorkflowStep.IDLE
        self.history: List[WorkflowStep] = []
        self.last_outcome: Optional[WorkflowOutcome] = None

    def _enter(self, step: WorkflowStep) -> None:
        logger.debug("step %s -> %s", self.step.value, step.value)
        self.step = step
        self.history.append(step)

    def _announce_command(self, command: str) -> None:
        self.surface.show(f"Running suggested command: {command}", "warning")

    def _finish(self, step: WorkflowStep, message: Optional[CommitMessage] = None,
                error: Optional[GitTuiError] = None) -> WorkflowOutcome:
        self._enter(step)
        self.last_outcome = WorkflowOutcome(step=step, message=message, error=error)
        return self.last_outcome

    def run_workflow(self) -> WorkflowOutcome:
        """Run one pass from CHECKING_STATUS to DONE or ABORTED."""
        self.history = []
        message: Optional[CommitMessage] = None
        try:
            self._enter(WorkflowStep.CHECKING_STATUS)
            status = git_status(self.runner).raise_for_status()
            if not status.stdout:
                self.surface.show("No changes to commit.")
                return self._finish(WorkflowStep.ABORTED)

            self._enter(WorkflowStep.STAGING)
            git_stage_all(self.runner).raise_for_status()
            self.surface.show("Changes staged.")

            self._enter(WorkflowStep.GENERATING_MESSAGE)
            message = self.provider.generate_commit_message()
            self.surface.show(f'Suggested commit message: "{message.text}"')

            self._enter(WorkflowStep.AWAITING_CONFIRMATION)
            message = self._confirm_message(message)

            self._enter(WorkflowStep.COMMITTING)
            git_commit(self.runner, message.text).raise_for_status()
            self.surface.show("Changes committed.")

            self._enter(WorkflowStep.PUSHING)
            git_push(self.runner, self.settings).raise_for_status()
        except UserCancelled as e:
            logger.info("workflow cancelled by user")
            self.surface.show(describe(e), "warning")
            return self._finish(WorkflowStep.ABORTED, message, e)
        except (WorkflowError, ExecutionError) as e:
            prefix = FAILURE_PREFIXES.get(self.step, "Error")
            logger.error("%s: %s", prefix, e)
            self.surface.show(f"{prefix}: {describe(e)}", "error")
            return self._finish(WorkflowStep.ABORTED, message, e)

        self.surface.show(f"Pushed to {self.settings.branch} successfully!", "success")
        return self._finish(WorkflowStep.DONE, message)

    def _confirm_message(self, suggested: CommitMessage) -> CommitMessage:
        try:
            return self._ask_for_message(suggested)
        except (EOFError, KeyboardInterrupt) as e:
            # Ctrl+C / Ctrl+D at a prompt cancels this run only
            raise UserCancelled() from e

    def _ask_for_message(self, suggested: CommitMessage) -> CommitMessage:
        if self.surface.confirm("Use this commit message?", default=True):
            return suggested
        text = self.surface.read_text("Enter custom commit message")
        if not text:
            raise UserCancelled()
        manual = CommitMessage(text=text, origin=MessageOrigin.MANUAL)
        # A typed message gets one review before anything is committed
        self.surface.show(f'Commit message: "{manual.text}"')
        if not self.surface.confirm("Commit and push with this message?", default=True):
            raise UserCancelled()
        return manual

    def run_menu(self) -> None:
        """Offer the menu until the user picks Exit."""
        self.surface.show("Welcome to the Git TUI App!")
        options = self.settings.menu_options
        while True:
            self.step = WorkflowStep.IDLE
            try:
                choice = self.surface.choose_one(self.settings.menu_prompt, options)
            except (EOFError, KeyboardInterrupt):
                break
            if choice == EXIT_INDEX:
                break
            if choice == GENERATE_INDEX:
                outcome = self.run_workflow()
                logger.info("workflow finished in %s", outcome.step.value)
        self.step = WorkflowStep.IDLE
        self.surface.show("Goodbye!")
