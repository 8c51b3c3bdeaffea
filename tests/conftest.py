"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_cfn_client():
    return Mock()


@pytest.fixture
def make_resource():
    def _make_resource(
        resource_type: str, logical_id: str, physical_id: str | None = "phys", stack_name: str = "stack"
    ) -> dict:
        return {
            "stack_name": stack_name,
            "resource_type": resource_type,
            "logical_id": logical_id,
            "physical_id": physical_id,
        }

    return _make_resource
