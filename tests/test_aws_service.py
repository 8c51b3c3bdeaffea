"""Tests for the CloudFormation service facade."""

import json

import boto3
from moto import mock_aws

from lazy_cfn.aws_service import CloudFormationService

TEMPLATE = json.dumps({"Resources": {"JobQueue": {"Type": "AWS::SQS::Queue"}}})


def test_get_stacks_and_resources():
    with mock_aws():
        client = boto3.client("cloudformation", region_name="ap-southeast-2")
        client.create_stack(StackName="feature-42-jobs", TemplateBody=TEMPLATE)
        service = CloudFormationService(client)

        stacks = service.get_stacks()
        resources = service.aggregate_resources(["feature-42-jobs"])

    assert [stack["name"] for stack in stacks] == ["feature-42-jobs"]
    assert [(r["resource_type"], r["logical_id"]) for r in resources] == [("AWS::SQS::Queue", "JobQueue")]
