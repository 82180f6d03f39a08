from .config import WorkflowSettings, DEFAULT_SETTINGS
from .tools import CommandResult, CommitMessage, MessageOrigin, ShellRunner, SuggestionProvider
from .workflow import Workflow, WorkflowOutcome, WorkflowStep

__all__ = ["WorkflowSettings", "DEFAULT_SETTINGS", "CommandResult", "CommitMessage", "MessageOrigin",
           "ShellRunner", "SuggestionProvider", "Workflow", "WorkflowOutcome", "WorkflowStep"]
