"""AWS Console URL construction for CloudFormation stack resources."""

from __future__ import annotations

from collections.abc import Callable

UNKNOWN_PLACEHOLDER = "unknown"

# The console expects "/" in log group names double URL-encoded.
LOG_GROUP_SLASH_ESCAPE = "$252F"


def build_dynamodb_table_url(region: str, table_name: str) -> str:
    """Build AWS console URL for a DynamoDB table."""
    return (
        f"https://{region}.console.aws.amazon.com/dynamodb/home?region={region}"
        f"#tables:selected={table_name};tab=overview"
    )


def build_lambda_function_url(region: str, function_name: str) -> str:
    """Build AWS console URL for a Lambda function."""
    return f"https://{region}.console.aws.amazon.com/lambda/home?region={region}#/functions/{function_name}"


def build_log_group_url(region: str, log_group_name: str) -> str:
    """Build AWS console URL for a CloudWatch log group."""
    escaped_name = log_group_name.replace("/", LOG_GROUP_SLASH_ESCAPE)
    return (
        f"https://{region}.console.aws.amazon.com/cloudwatch/home?region={region}"
        f"#logsV2:log-groups/log-group/{escaped_name}"
    )


def build_rest_api_url(region: str, api_id: str) -> str:
    """Build AWS console URL for an API Gateway REST API."""
    return (
        f"https://{region}.console.aws.amazon.com/apigateway/main/apis/{api_id}/resources"
        f"?api={api_id}&region={region}"
    )


# Add more resource types here. Their console URLs usually need some trial and error.
RESOURCE_URL_BUILDERS: dict[str, Callable[[str, str], str]] = {
    "AWS::DynamoDB::Table": build_dynamodb_table_url,
    "AWS::Lambda::Function": build_lambda_function_url,
    "AWS::Logs::LogGroup": build_log_group_url,
    "AWS::ApiGateway::RestApi": build_rest_api_url,
}


def is_supported_resource_type(resource_type: str | None) -> bool:
    return resource_type in RESOURCE_URL_BUILDERS


def build_resource_url(resource_type: str | None, physical_id: str | None, region: str) -> str | None:
    """Build AWS console URL for a stack resource, or None if the type has no known console page."""
    builder = RESOURCE_URL_BUILDERS.get(resource_type or UNKNOWN_PLACEHOLDER)
    if builder is None:
        return None
    return builder(region, physical_id or UNKNOWN_PLACEHOLDER)
