"""Type definitions for lazy-cfn."""

from __future__ import annotations

from typing import TypedDict


class StackInfo(TypedDict):
    name: str
    status: str


class ResourceInfo(TypedDict):
    stack_name: str
    resource_type: str
    logical_id: str
    physical_id: str | None


class ResourceChoice(TypedDict):
    label: str
    url: str | None
