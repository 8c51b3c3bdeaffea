"""Run configuration resolved once from flags, environment and prompts."""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InputError
from .navigation import ask_text

if TYPE_CHECKING:
    import argparse

logger = logging.getLogger(__name__)

DEFAULT_REGION = "ap-southeast-2"

_NON_BRANCH_CHARS = re.compile(r"[^A-Za-z0-9\s]")


@dataclass(frozen=True)
class AppConfig:
    """Immutable settings for a single run."""

    profile: str
    match: str
    region: str = DEFAULT_REGION


def get_default_match() -> str:
    """Current git branch reduced to alphanumerics and whitespace, or "" outside a repository."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug("Could not determine current git branch: %s", e)
        return ""
    return _NON_BRANCH_CHARS.sub("", result.stdout.strip())


def resolve_config(
    args: argparse.Namespace,
    environ: Mapping[str, str],
    prompt: Callable[..., str] = ask_text,
) -> AppConfig:
    """Build the run configuration. Flags win over environment variables, which win over prompts."""
    profile = args.profile or environ.get("AWS_PROFILE") or prompt("Enter the AWS profile name:")
    if not profile:
        raise InputError("No AWS profile given")

    match = args.match or environ.get("BRANCH") or prompt("Enter the branch name:", default=get_default_match())
    if not match:
        raise InputError("No stack name pattern given")

    region = environ.get("AWS_REGION") or DEFAULT_REGION
    return AppConfig(profile=profile, match=match, region=region)
