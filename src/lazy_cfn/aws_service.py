"""AWS CloudFormation service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import ResourceInfo, StackInfo
from .features.resource.resource import ResourceService
from .features.stack.stack import StackService

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient


class CloudFormationService:
    """Service for reading CloudFormation stacks and their resources."""

    def __init__(self, cfn_client: CloudFormationClient) -> None:
        self._stack = StackService(cfn_client)
        self._resource = ResourceService(cfn_client)

    def get_stacks(self) -> list[StackInfo]:
        return self._stack.get_stacks()

    def aggregate_resources(self, stack_names: list[str]) -> list[ResourceInfo]:
        """Resources of every stack, concatenated in the given stack order."""
        return self._resource.aggregate_resources(stack_names)
