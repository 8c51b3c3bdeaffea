"""Stack operations for CloudFormation."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import InputError, InvalidPatternError, TransientIOError
from ...core.types import StackInfo
from ...core.utils import paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient
    from mypy_boto3_cloudformation.type_defs import StackTypeDef

logger = logging.getLogger(__name__)


class StackService(BaseAWSService):
    """Service for CloudFormation stack lookups."""

    def __init__(self, cfn_client: CloudFormationClient) -> None:
        super().__init__(cfn_client)

    def get_stacks(self) -> list[StackInfo]:
        try:
            stacks = paginate_aws_list(self.cfn_client, "describe_stacks", "Stacks")
        except (BotoCoreError, ClientError) as e:
            raise TransientIOError(f"Failed to describe stacks: {e}") from e

        logger.debug("Described %d stacks", len(stacks))
        return [_create_stack_info(stack) for stack in stacks if stack.get("StackName")]


def compile_match_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user supplied stack name pattern as a case-insensitive regex."""
    if not pattern:
        raise InputError("Stack name pattern must not be empty")
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def match_stacks(stacks: list[StackInfo], pattern: str | re.Pattern[str]) -> list[StackInfo]:
    """Stacks whose name contains a match for pattern anywhere, in their original order."""
    regex = compile_match_pattern(pattern) if isinstance(pattern, str) else pattern
    return [stack for stack in stacks if regex.search(stack["name"])]


def _create_stack_info(stack: StackTypeDef) -> StackInfo:
    return {
        "name": stack["StackName"],
        "status": stack.get("StackStatus", "UNKNOWN"),
    }
