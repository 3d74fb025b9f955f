"""
Base class for DynamoDB-backed records
"""
from typing import Dict, List, Any, Optional
import boto3

from ..config import config


class DynamoRecord:
    """
    Minimal record mapper over a boto3 DynamoDB Table resource.

    Subclasses provide the table name, the key schema and the
    attribute definitions; the Table handle is built on first use and
    kept for the lifetime of the Lambda container.
    """

    key_schema: List[Dict[str, str]] = []
    attribute_definitions: List[Dict[str, str]] = []
    ttl_attribute: Optional[str] = None

    _table = None

    @classmethod
    def table_name(cls) -> str:
        raise NotImplementedError

    @classmethod
    def table(cls):
        """DynamoDB Table resource for this record type"""
        if cls._table is None:
            dynamodb = boto3.resource('dynamodb', region_name=config.aws_region)
            cls._table = dynamodb.Table(cls.table_name())
        return cls._table

    @classmethod
    def reset_table(cls):
        """Forget the cached Table handle (tests, config changes)"""
        cls._table = None

    @classmethod
    def index_definitions(cls) -> Optional[List[Dict[str, Any]]]:
        return None

    @classmethod
    def create_table(cls):
        """
        Create the backing table with on-demand billing.
        Used by local development and tests; deployed tables are provisioned elsewhere.
        """
        client = boto3.client('dynamodb', region_name=config.aws_region)
        params = {
            'TableName': cls.table_name(),
            'KeySchema': cls.key_schema,
            'AttributeDefinitions': cls.attribute_definitions,
            'BillingMode': 'PAY_PER_REQUEST',
        }
        indexes = cls.index_definitions()
        if indexes:
            params['GlobalSecondaryIndexes'] = indexes

        client.create_table(**params)
        client.get_waiter('table_exists').wait(TableName=cls.table_name())

        if cls.ttl_attribute:
            client.update_time_to_live(
                TableName=cls.table_name(),
                TimeToLiveSpecification={'Enabled': True, 'AttributeName': cls.ttl_attribute}
            )
