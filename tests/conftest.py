import logging
import os
from datetime import datetime, timezone

import boto3
import pytest
from aws_lambda_powertools import Logger
from botocore.stub import Stubber
from moto import mock_aws

from placeindex.config import Settings

AWS_REGION = "us-east-1"
INDEX_NAME = "test-index"
INDEX_ARN = f"arn:aws:geo:{AWS_REGION}:123456789012:place-index/{INDEX_NAME}"
CREATE_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
UPDATE_TIME = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = AWS_REGION
    os.environ["AWS_REGION"] = AWS_REGION


@pytest.fixture
def location_client(aws_credentials):
    with mock_aws():
        yield boto3.client("location", region_name=AWS_REGION)


@pytest.fixture
def stubber(location_client):
    # Stubber answers before the request leaves botocore and checks params against the service model
    with Stubber(location_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture(scope="session")
def logger():
    return Logger(service="placeindex-tests", logger_handler=logging.NullHandler())


@pytest.fixture
def settings():
    return Settings(profile="default", region=AWS_REGION, index_name=INDEX_NAME)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "AwsProfile: default\n"
        f"AwsRegion: {AWS_REGION}\n"
    )
    return path


@pytest.fixture
def describe_response():
    return {
        "IndexName": INDEX_NAME,
        "IndexArn": INDEX_ARN,
        "PricingPlan": "RequestBasedUsage",
        "Description": "test index",
        "CreateTime": CREATE_TIME,
        "UpdateTime": UPDATE_TIME,
        "DataSource": "Here",
        "DataSourceConfiguration": {"IntendedUse": "SingleUse"},
        "Tags": {"env": "prod"},
    }


@pytest.fixture
def position_response():
    return {
        "Summary": {
            "Position": [-73.0, 40.0],
            "DataSource": "Here",
            "Language": "en",
        },
        "Results": [
            {
                "Place": {
                    "Label": "1 Main St, New York, NY, USA",
                    "Geometry": {"Point": [-73.0001, 40.0002]},
                    "Country": "USA",
                },
                "Distance": 12.5,
            }
        ],
    }
