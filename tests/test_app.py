"""Tests for core application logic."""

from unittest.mock import Mock, patch

import pytest

from lazy_cfn.core.app import find_and_navigate
from lazy_cfn.core.config import AppConfig
from lazy_cfn.core.errors import InvalidPatternError, NotFoundError, TransientIOError, UserCancelledError

CONFIG = AppConfig(profile="dev", match="feature-42", region="us-east-1")


def _stack(name: str) -> dict:
    return {"name": name, "status": "CREATE_COMPLETE"}


def _resource(resource_type: str = "AWS::Lambda::Function") -> dict:
    return {"stack_name": "Feature-42-api", "resource_type": resource_type, "logical_id": "Fn", "physical_id": "fn"}


@pytest.fixture
def mock_navigator() -> Mock:
    navigator = Mock()
    navigator.fetch_stacks.return_value = [_stack("Feature-42-api"), _stack("main-api")]
    navigator.guard_stacks.side_effect = lambda stacks: stacks
    navigator.fetch_resources.return_value = [_resource()]
    return navigator


def test_find_and_navigate_happy_path(mock_navigator):
    find_and_navigate(CONFIG, mock_navigator)

    mock_navigator.display_matched_stacks.assert_called_once_with([_stack("Feature-42-api")])
    mock_navigator.guard_stacks.assert_called_once_with([_stack("Feature-42-api")])
    mock_navigator.fetch_resources.assert_called_once_with([_stack("Feature-42-api")])
    mock_navigator.navigate_resources.assert_called_once_with([_resource()])


def test_find_and_navigate_invalid_pattern_fails_before_network_call(mock_navigator):
    config = AppConfig(profile="dev", match="feature-(42", region="us-east-1")

    with pytest.raises(InvalidPatternError):
        find_and_navigate(config, mock_navigator)

    mock_navigator.fetch_stacks.assert_not_called()


def test_find_and_navigate_no_stacks(mock_navigator):
    mock_navigator.fetch_stacks.return_value = []

    with pytest.raises(NotFoundError) as exc_info:
        find_and_navigate(CONFIG, mock_navigator)

    assert exc_info.value.stage == "stacks"


def test_find_and_navigate_no_matching_stacks(mock_navigator):
    mock_navigator.fetch_stacks.return_value = [_stack("main-api")]

    with pytest.raises(NotFoundError, match="feature-42") as exc_info:
        find_and_navigate(CONFIG, mock_navigator)

    assert exc_info.value.stage == "matching stacks"
    mock_navigator.fetch_resources.assert_not_called()


def test_find_and_navigate_nothing_selected_in_guard(mock_navigator):
    mock_navigator.guard_stacks.side_effect = None
    mock_navigator.guard_stacks.return_value = []

    with pytest.raises(NotFoundError) as exc_info:
        find_and_navigate(CONFIG, mock_navigator)

    assert exc_info.value.stage == "resources"
    mock_navigator.fetch_resources.assert_not_called()


def test_find_and_navigate_no_resources(mock_navigator):
    mock_navigator.fetch_resources.return_value = []

    with pytest.raises(NotFoundError) as exc_info:
        find_and_navigate(CONFIG, mock_navigator)

    assert exc_info.value.stage == "resources"
    mock_navigator.navigate_resources.assert_not_called()


def test_find_and_navigate_only_unsupported_resources(mock_navigator):
    mock_navigator.fetch_resources.return_value = [_resource("AWS::SQS::Queue")]

    with pytest.raises(NotFoundError, match="console page"):
        find_and_navigate(CONFIG, mock_navigator)

    mock_navigator.navigate_resources.assert_not_called()


def test_find_and_navigate_propagates_listing_failure(mock_navigator):
    mock_navigator.fetch_resources.side_effect = TransientIOError("throttled")

    with pytest.raises(TransientIOError):
        find_and_navigate(CONFIG, mock_navigator)

    mock_navigator.navigate_resources.assert_not_called()


def test_find_and_navigate_propagates_cancellation(mock_navigator):
    mock_navigator.guard_stacks.side_effect = UserCancelledError()

    with pytest.raises(UserCancelledError):
        find_and_navigate(CONFIG, mock_navigator)


@patch("lazy_cfn.core.app.print_success")
def test_find_and_navigate_reports_only_openable_resources(mock_success, mock_navigator):
    mock_navigator.fetch_resources.return_value = [
        _resource(),
        _resource("AWS::SQS::Queue"),
        _resource("AWS::IAM::Role"),
    ]

    find_and_navigate(CONFIG, mock_navigator)

    mock_success.assert_called_with("Found 1 resources across 1 stacks")
