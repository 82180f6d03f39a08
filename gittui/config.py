from dataclasses import dataclass, field
from typing import List

SUGGESTION_PROMPT = "Suggest a git commit message based on staged changes"

GENERATE_AND_PUSH = "Generate Commit and Push"
EXIT = "Exit"

# Menu entries are dispatched by position, so labels can be reworded freely
GENERATE_INDEX = 0
EXIT_INDEX = 1


@dataclass
class WorkflowSettings:
    remote: str = "origin"
    branch: str = "master"  # push target is fixed, not user-configurable
    suggestion_prompt: str = SUGGESTION_PROMPT
    # {prompt} is shell-quoted before substitution
    suggestion_command: str = "gh copilot suggest -t git {prompt} --shell-out"
    menu_prompt: str = "What would you like to do?"
    menu_options: List[str] = field(default_factory=lambda: [GENERATE_AND_PUSH, EXIT])

    def __post_init__(self) -> None:
        if len(self.menu_options) != 2:
            raise ValueError("menu_options needs exactly two labels: generate-and-push, then exit")


DEFAULT_SETTINGS = WorkflowSettings()
