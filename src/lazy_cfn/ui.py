"""UI layer - handles all user interaction and display logic."""

from __future__ import annotations

from .aws_service import CloudFormationService
from .core.base import BaseUIComponent
from .core.types import ResourceInfo, StackInfo
from .core.utils import show_spinner
from .features.resource.ui import ResourceUI
from .features.stack.ui import StackUI


class CFNNavigator(BaseUIComponent):
    """Navigator for interactive CloudFormation resource lookup."""

    def __init__(self, cfn_service: CloudFormationService, region: str) -> None:
        super().__init__()
        self.cfn_service = cfn_service
        self._stack_ui = StackUI()
        self._resource_ui = ResourceUI(region)

    def fetch_stacks(self) -> list[StackInfo]:
        with show_spinner("Fetching stacks"):
            return self.cfn_service.get_stacks()

    def fetch_resources(self, stacks: list[StackInfo]) -> list[ResourceInfo]:
        with show_spinner("Fetching resources"):
            return self.cfn_service.aggregate_resources([stack["name"] for stack in stacks])

    def display_matched_stacks(self, stacks: list[StackInfo]) -> None:
        return self._stack_ui.display_matched_stacks(stacks)

    def guard_stacks(self, stacks: list[StackInfo]) -> list[StackInfo]:
        """Let the user narrow down the stacks when too many matched."""
        return self._stack_ui.guard_stacks(stacks)

    def navigate_resources(self, resources: list[ResourceInfo]) -> None:
        return self._resource_ui.navigate_resources(resources)
