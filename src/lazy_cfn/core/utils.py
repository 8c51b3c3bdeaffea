"""Utility functions for lazy-cfn."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Literal

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient

console = Console()

NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich so they share the console with prompts and spinners."""
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=verbose)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def print_error(message: str) -> None:
    console.print(f"❌ {message}", style="red")


def print_success(message: str) -> None:
    console.print(f"✅ {message}", style="green")


def print_warning(message: str) -> None:
    console.print(f"⚠️ {message}", style="yellow")


@contextmanager
def show_spinner(message: str = "") -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    with console.status(message, spinner="dots", spinner_style="cyan"):
        yield


def paginate_aws_list(
    client: CloudFormationClient,
    operation_name: Literal["describe_stacks"],
    result_key: str,
    **kwargs: str,
) -> list[Any]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[Any] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results
