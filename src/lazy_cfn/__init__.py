import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from botocore.exceptions import ProfileNotFound
from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient

from .aws_service import CloudFormationService
from .core.app import find_and_navigate
from .core.config import resolve_config
from .core.errors import InputError, LazyCfnError, UserCancelledError
from .core.utils import print_error, setup_logging
from .ui import CFNNavigator

try:
    __version__ = version("lazy-cfn")
except PackageNotFoundError:
    __version__ = "dev"

console = Console()
logger = logging.getLogger(__name__)


def main() -> None:
    """Interactive AWS CloudFormation resource navigation tool."""
    parser = argparse.ArgumentParser(description="Open AWS console pages for the resources of matching stacks")
    parser.add_argument("--version", action="version", version=f"lazy-cfn {__version__}")
    parser.add_argument("-p", "--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("-m", "--match", help="Case-insensitive regex matched against stack names", type=str)
    parser.add_argument("-v", "--verbose", help="Show debug logging", action="store_true")
    args = parser.parse_args()

    setup_logging(args.verbose)

    console.print("🔎 Welcome to lazy-cfn!", style="bold cyan")
    console.print("Interactive AWS CloudFormation resource navigator\n", style="dim")

    try:
        config = resolve_config(args, os.environ)
        cfn_client = _create_cfn_client(config.profile, config.region)
        navigator = CFNNavigator(CloudFormationService(cfn_client), config.region)

        find_and_navigate(config, navigator)

    except UserCancelledError:
        console.print("\n👋 Goodbye!", style="cyan")
        sys.exit(0)
    except LazyCfnError as e:
        logger.debug("Run failed", exc_info=True)
        console.print()
        print_error(str(e))
        sys.exit(1)

    console.print("\n👋 Goodbye!", style="cyan")


def _create_cfn_client(profile_name: str | None, region: str) -> "CloudFormationClient":
    """Create optimized AWS CloudFormation client with connection pooling."""
    config = Config(
        max_pool_connections=10,
        retries={"max_attempts": 2, "mode": "adaptive"},
    )

    try:
        session = boto3.Session(profile_name=profile_name) if profile_name else boto3
    except ProfileNotFound as e:
        raise InputError(str(e)) from e
    return session.client("cloudformation", region_name=region, config=config)


if __name__ == "__main__":
    main()
