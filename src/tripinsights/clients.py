"""Lazy-initialized boto3 resources, reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from tripinsights.config import get_config
from tripinsights.services.accessor import EntityAccessor
from tripinsights.store.dynamo import DynamoDocumentStore


@lru_cache(maxsize=1)
def get_dynamo_resource() -> Any:
    config = get_config()
    return boto3.resource("dynamodb", endpoint_url=config.dynamodb_endpoint, region_name=config.aws_region)


def get_accessor() -> EntityAccessor:
    store = DynamoDocumentStore.from_config(get_dynamo_resource(), get_config())
    return EntityAccessor(store)
