"""Resource operations for CloudFormation stacks."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.aws_console import is_supported_resource_type
from ...core.base import BaseAWSService
from ...core.errors import TransientIOError
from ...core.types import ResourceInfo

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient
    from mypy_boto3_cloudformation.type_defs import StackResourceSummaryTypeDef

logger = logging.getLogger(__name__)

MAX_CONCURRENT_DRAINS = 8


class ResourceService(BaseAWSService):
    """Service for listing the resources of CloudFormation stacks."""

    def __init__(self, cfn_client: CloudFormationClient, max_workers: int = MAX_CONCURRENT_DRAINS) -> None:
        super().__init__(cfn_client)
        self.max_workers = max_workers

    def list_resource_page(
        self, stack_name: str, next_token: str | None = None
    ) -> tuple[list[ResourceInfo], str | None]:
        """Fetch one page of a stack's resources. Returns (resources, next_token)."""
        kwargs = {"StackName": stack_name}
        if next_token:
            kwargs["NextToken"] = next_token

        try:
            response = self.cfn_client.list_stack_resources(**kwargs)
        except (BotoCoreError, ClientError) as e:
            raise TransientIOError(f"Failed to list resources for stack '{stack_name}': {e}") from e

        summaries = response.get("StackResourceSummaries", [])
        return [_create_resource_info(stack_name, summary) for summary in summaries], response.get("NextToken")

    def get_stack_resources(self, stack_name: str) -> list[ResourceInfo]:
        """All resources of one stack, pages drained in cursor order."""
        resources: list[ResourceInfo] = []
        next_token: str | None = None
        page_count = 0

        while True:
            page, next_token = self.list_resource_page(stack_name, next_token)
            resources.extend(page)
            page_count += 1
            if not next_token:
                break

        logger.debug("Stack %s: %d resources in %d pages", stack_name, len(resources), page_count)
        return resources

    def aggregate_resources(self, stack_names: list[str]) -> list[ResourceInfo]:
        """Resources of all stacks, concatenated in stack order.

        Stacks are drained concurrently. Results are only merged once every drain has
        finished; if any drain failed, the first failure in stack order is raised and
        nothing is returned.
        """
        if not stack_names:
            return []

        with ThreadPoolExecutor(max_workers=min(len(stack_names), self.max_workers)) as executor:
            futures = [executor.submit(self.get_stack_resources, name) for name in stack_names]

        resources: list[ResourceInfo] = []
        for future in futures:
            resources.extend(future.result())
        return resources


def filter_and_sort_resources(resources: list[ResourceInfo]) -> list[ResourceInfo]:
    """Resources with a known console page, ordered by type then logical id."""
    supported = [resource for resource in resources if is_supported_resource_type(resource["resource_type"])]
    return sorted(supported, key=lambda resource: (resource["resource_type"], resource["logical_id"]))


def _create_resource_info(stack_name: str, summary: StackResourceSummaryTypeDef) -> ResourceInfo:
    return {
        "stack_name": stack_name,
        "resource_type": summary.get("ResourceType", ""),
        "logical_id": summary.get("LogicalResourceId", ""),
        "physical_id": summary.get("PhysicalResourceId"),
    }
