#!/usr/bin/env python3
"""Create the bookings DynamoDB table for local development.

This script creates the key-value table used by the booking registry, configured
against DynamoDB Local. It matches the SAM template schema exactly.

Usage:
    BOOKINGS_TABLE=BookingRegistry python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from registry.config import get_config
from registry.store.dynamo import KEY_ATTRIBUTE

DEFAULT_TABLE = "BookingRegistry"


def create_bookings_table(dynamodb, table_name):
    """Create the key-value bookings table."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": KEY_ATTRIBUTE, "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": KEY_ATTRIBUTE, "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    """Create the bookings table."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"
    table_name = config.bookings_table or DEFAULT_TABLE

    print(f"Creating DynamoDB table at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_bookings_table(dynamodb, table_name)

    print()
    print("✅ DynamoDB table ready")


if __name__ == "__main__":
    main()
