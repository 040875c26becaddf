from typing import Optional

import boto3
from botocore.client import BaseClient


class DynamoDBClientMixin:
    """Mixin DynamoDB client setup for DynamoDB-backed DAOs.

    Attributes:
        dynamodb (BaseClient):
            Low-level boto3 DynamoDB client used by subclasses.

        table_name (str):
            Name of the table holding short URL records.

    Args:
        dynamodb_table_name (str):
            DynamoDB table name. Defaults to 'UrlShortenerTable'.
        dynamodb_region (Optional[str]):
            AWS region of the table. Defaults to 'us-east-1'.
        dynamodb_endpoint_url (Optional[str]):
            Custom endpoint (e.g. LocalStack or DynamoDB Local).
        dynamodb_client (Optional[BaseClient]):
            Pre-initialized boto3 DynamoDB client (useful in tests).
    """

    def __init__(
        self,
        dynamodb_table_name: str = 'UrlShortenerTable',
        dynamodb_region: Optional[str] = 'us-east-1',
        dynamodb_endpoint_url: Optional[str] = None,
        dynamodb_client: Optional[BaseClient] = None,
    ):
        if dynamodb_client is None:
            # fmt: off
            client_kwargs = {
                'endpoint_url': dynamodb_endpoint_url,
            } if dynamodb_endpoint_url else {}
            # fmt: on
            dynamodb_client = boto3.client('dynamodb', region_name=dynamodb_region, **client_kwargs)

        self.dynamodb = dynamodb_client
        self.table_name = dynamodb_table_name
