from __future__ import annotations
import logging
import subprocess
from dataclasses import dataclass

from ..errors import CommandFailure, ExecutionError

"""
Process runner: run a shell command line synchronously and normalise the
outcome into a CommandResult. Commands go to /bin/sh whole; callers are
responsible for quoting anything they interpolate.
"""

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    success: bool
    stdout: str
    stderr: str
    command: str = ""
    returncode: int = 0

    def raise_for_status(self) -> "CommandResult":
        if not self.success:
            raise CommandFailure(self.command, self.returncode, self.stderr)
        return self


def run(cmd: str, cwd: str = ".") -> CommandResult:
    """Run `cmd` through the shell and block until it exits.

    Exit status 0 yields a success result whose stdout is trimmed; any other
    status yields a failure result carrying stderr untouched. Raises
    ExecutionError when the process cannot be spawned.
    """
    logger.debug("run: %s (cwd=%s)", cmd, cwd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            shell=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        logger.error("could not launch %r: %s", cmd, e)
        raise ExecutionError(cmd, str(e)) from e
    logger.debug("exit=%s for %s", proc.returncode, cmd)
    if proc.returncode == 0:
        return CommandResult(True, proc.stdout.strip(), proc.stderr, cmd, 0)
    return CommandResult(False, proc.stdout, proc.stderr, cmd, proc.returncode)


class ShellRunner:
    """Binds the runner to one repository directory."""

    def __init__(self, repo: str = "."):
        self.repo = repo

    def run(self, cmd: str) -> CommandResult:
        return run(cmd, cwd=self.repo)
