"""Error taxonomy for gittui."""
from __future__ import annotations
from typing import Optional


class GitTuiError(Exception):
    """Base class for every error raised by gittui."""


class ExecutionError(GitTuiError):
    """The command could not be launched at all."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Failed to execute '{command}': {reason}")
        self.command = command
        self.reason = reason


class TerminalError(GitTuiError):
    """Raw mode or alternate screen could not be set up or restored."""


class WorkflowError(GitTuiError):
    """A failure that aborts the current workflow run but not the program."""


class CommandFailure(WorkflowError):
    """The command ran and exited nonzero."""

    def __init__(self, command: str, returncode: int, stderr: str):
        # stderr is kept verbatim
        super().__init__(stderr if stderr.strip() else f"'{command}' exited with status {returncode}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class NoStagedChanges(WorkflowError):
    def __init__(self, message: str = "No staged changes found"):
        super().__init__(message)


class EmptySuggestion(WorkflowError):
    def __init__(self, message: str = "No suggestion provided by gh copilot"):
        super().__init__(message)


class UserCancelled(WorkflowError):
    def __init__(self, message: str = "Commit cancelled."):
        super().__init__(message)


def describe(error: Optional[BaseException]) -> str:
    """Short user-facing text for an error, without the class name."""
    if error is None:
        return ""
    text = str(error).strip()
    return text or type(error).__name__
