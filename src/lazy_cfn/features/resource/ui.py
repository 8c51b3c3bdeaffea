"""UI components for resource selection and opening."""

from __future__ import annotations

import logging
import webbrowser
from collections import Counter
from collections.abc import Callable
from enum import Enum

from rich.console import Console

from ...core.aws_console import build_resource_url
from ...core.base import BaseUIComponent
from ...core.errors import MissingConsoleLinkError
from ...core.navigation import autocomplete_select
from ...core.types import ResourceChoice, ResourceInfo
from ...core.utils import print_warning
from .resource import filter_and_sort_resources
from .search import ResourceCompleter

console = Console()
logger = logging.getLogger(__name__)


class NavigationState(Enum):
    PROMPTING = "prompting"
    OPENING = "opening"
    ERROR = "error"
    CANCELLED = "cancelled"


def format_resource_label(resource: ResourceInfo) -> str:
    resource_type = resource["resource_type"].removeprefix("AWS::")
    return f"[{resource_type}]: {resource['logical_id']}"


def build_resource_choices(resources: list[ResourceInfo], region: str) -> list[ResourceChoice]:
    """Picker choices for resources. Labels shared by several stacks get the stack name appended."""
    labels = [format_resource_label(resource) for resource in resources]
    label_counts = Counter(labels)

    choices: list[ResourceChoice] = []
    for label, resource in zip(labels, resources):
        if label_counts[label] > 1:
            label = f"{label} ({resource['stack_name']})"
        url = build_resource_url(resource["resource_type"], resource["physical_id"], region)
        choices.append({"label": label, "url": url})
    return choices


class ResourceUI(BaseUIComponent):
    """UI component for the resource picker."""

    def __init__(self, region: str, open_url: Callable[[str], bool] = webbrowser.open) -> None:
        super().__init__()
        self.region = region
        self.open_url = open_url

    def select_resource(self, choices: list[ResourceChoice]) -> ResourceChoice | None:
        labels = [choice["label"] for choice in choices]
        selected = autocomplete_select("Pick a resource to open:", labels, ResourceCompleter(choices))
        if selected is None:
            return None
        return next(choice for choice in choices if choice["label"] == selected)

    def open_resource(self, choice: ResourceChoice) -> None:
        """Open the resource in AWS console."""
        url = choice["url"]
        if not url:
            raise MissingConsoleLinkError(f"No console link available for {choice['label']}")

        console.print(f"\n🌐 Opening in AWS console: {url}", style="cyan")
        if not self.open_url(url):
            print_warning("Could not launch a browser, open the link above manually")

    def navigate_resources(self, resources: list[ResourceInfo]) -> None:
        """Pick and open resources until the user cancels."""
        state = NavigationState.PROMPTING
        selected: ResourceChoice | None = None

        while state is not NavigationState.CANCELLED:
            if state is NavigationState.PROMPTING:
                choices = build_resource_choices(filter_and_sort_resources(resources), self.region)
                selected = self.select_resource(choices)
                state = NavigationState.OPENING if selected else NavigationState.CANCELLED

            elif state is NavigationState.OPENING and selected is not None:
                try:
                    self.open_resource(selected)
                    state = NavigationState.PROMPTING
                except (MissingConsoleLinkError, webbrowser.Error, OSError):
                    logger.exception("Failed to open %s", selected["label"])
                    state = NavigationState.ERROR

            else:
                print_warning("Could not open that resource, pick another one")
                state = NavigationState.PROMPTING
