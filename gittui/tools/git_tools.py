from __future__ import annotations
import shlex

from ..config import DEFAULT_SETTINGS, WorkflowSettings
from .shell import CommandResult

"""
Git commands used by the workflow. Each takes a runner (anything with
run(cmd) -> CommandResult) and returns the raw CommandResult, except
has_staged_changes which interprets it.

git_status        -> git status --porcelain
git_stage_all     -> git add .
git_staged_files  -> git diff --cached --name-only
git_commit        -> git commit -m <quoted message>
git_push          -> git push <remote> <branch>
git_current_branch-> git rev-parse --abbrev-ref HEAD
"""


def git_status(runner) -> CommandResult:
    return runner.run("git status --porcelain")


def git_stage_all(runner) -> CommandResult:
    return runner.run("git add .")


def git_staged_files(runner) -> CommandResult:
    return runner.run("git diff --cached --name-only")


def has_staged_changes(runner) -> bool:
    result = git_staged_files(runner).raise_for_status()
    return bool(result.stdout)


def git_commit(runner, message: str) -> CommandResult:
    return runner.run(f"git commit -m {shlex.quote(message)}")


def git_push(runner, settings: WorkflowSettings = DEFAULT_SETTINGS) -> CommandResult:
    return runner.run(f"git push {shlex.quote(settings.remote)} {shlex.quote(settings.branch)}")


def git_current_branch(runner, fallback: str = DEFAULT_SETTINGS.branch) -> str:
    result = runner.run("git rev-parse --abbrev-ref HEAD")
    if result.success and result.stdout:
        return result.stdout
    return fallback
