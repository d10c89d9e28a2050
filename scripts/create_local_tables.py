#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

This script creates the four trip-data tables (trips, stops, expenses, trip
days) against DynamoDB Local, each keyed by ``id`` with the secondary index
the accessor queries through.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tripinsights.config import get_config


def create_table(dynamodb, table_name: str, index_name: str, index_key: str):
    """Create a table keyed by id with one GSI on index_key."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": index_key, "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": index_name,
                    "KeySchema": [
                        {"AttributeName": index_key, "KeyType": "HASH"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table with {index_name}")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    """Create all DynamoDB tables."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_table(dynamodb, config.trips_table, config.owner_index, "usuarioId")
    create_table(dynamodb, config.stops_table, config.trip_index, "viagemId")
    create_table(dynamodb, config.expenses_table, config.trip_index, "viagemId")
    create_table(dynamodb, config.trip_days_table, config.trip_index, "viagemId")

    print()
    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
