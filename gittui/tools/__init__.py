from .shell import CommandResult, ShellRunner, run
from .git_tools import (git_status, git_stage_all, git_staged_files, has_staged_changes,
                        git_commit, git_push, git_current_branch)
from .suggest import CommitMessage, MessageOrigin, SuggestionProvider

__all__ = [
    "CommandResult", "ShellRunner", "run",
    "git_status", "git_stage_all", "git_staged_files", "has_staged_changes",
    "git_commit", "git_push", "git_current_branch",
    "CommitMessage", "MessageOrigin", "SuggestionProvider",
]
