"""Base classes for AWS services and UI components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, cfn_client: CloudFormationClient) -> None:
        self.cfn_client = cfn_client


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
