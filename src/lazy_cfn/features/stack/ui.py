"""UI components for stack operations."""

from __future__ import annotations

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.navigation import select_many
from ...core.types import StackInfo

console = Console()

# Above this many matches the user picks which stacks to load resources for.
MAX_STACKS_WITHOUT_PROMPT = 8


class StackUI(BaseUIComponent):
    """UI component for matched stack display and narrowing."""

    def __init__(self, max_stacks: int = MAX_STACKS_WITHOUT_PROMPT) -> None:
        super().__init__()
        self.max_stacks = max_stacks

    def display_matched_stacks(self, stacks: list[StackInfo]) -> None:
        for stack in stacks:
            console.print(f"  • Match found for stack: {stack['name']} ({stack['status']})", style="white")

    def guard_stacks(self, stacks: list[StackInfo]) -> list[StackInfo]:
        """Return stacks unchanged, or the user's subset of them when there are too many to load."""
        if len(stacks) <= self.max_stacks:
            return stacks

        console.print(
            f"\n⚠️ {len(stacks)} stacks matched, choose which ones to load resources for", style="yellow"
        )
        choices = [{"name": stack["name"], "value": stack["name"]} for stack in stacks]
        selected = set(select_many("Select stacks:", choices))

        return [stack for stack in stacks if stack["name"] in selected]
