"""Main application logic for lazy-cfn CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..features.resource.resource import filter_and_sort_resources
from ..features.stack.stack import compile_match_pattern, match_stacks
from .errors import NotFoundError
from .utils import print_success

if TYPE_CHECKING:
    from ..ui import CFNNavigator
    from .config import AppConfig


def find_and_navigate(config: AppConfig, navigator: CFNNavigator) -> None:
    """Find stacks matching the configured pattern and open their resources until the user quits."""
    pattern = compile_match_pattern(config.match)

    stacks = navigator.fetch_stacks()
    if not stacks:
        raise NotFoundError("stacks", "No stacks found")
    print_success(f"Found {len(stacks)} stacks")

    matched = match_stacks(stacks, pattern)
    if not matched:
        raise NotFoundError("matching stacks", f"No matching stacks found for '{config.match}'")
    navigator.display_matched_stacks(matched)

    working_set = navigator.guard_stacks(matched)
    if not working_set:
        raise NotFoundError("resources", "No stacks selected, no resources found")

    resources = navigator.fetch_resources(working_set)
    if not resources:
        raise NotFoundError("resources", "No resources found for the matching stacks")
    supported = filter_and_sort_resources(resources)
    if not supported:
        raise NotFoundError("resources", "No resources with an AWS console page found for the matching stacks")
    print_success(f"Found {len(supported)} resources across {len(working_set)} stacks")

    navigator.navigate_resources(resources)
