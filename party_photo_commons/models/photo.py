"""
DynamoDB record for party photo metadata
"""
from typing import Dict, List, Optional, Any, Tuple
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError, BotoCoreError

from ..config import config
from ..constants import DatabaseConstants
from ..logger import photo_logger as logger
from ..error_handler import error_handler
from .base import DynamoRecord


class PartyPhoto(DynamoRecord):
    """
    Metadata for one uploaded photo.
    Partitioned by party, sorted by the time-prefixed photo key.
    """

    key_schema = [
        {'AttributeName': DatabaseConstants.PARTY_KEY, 'KeyType': 'HASH'},
        {'AttributeName': DatabaseConstants.PHOTO_KEY, 'KeyType': 'RANGE'},
    ]
    attribute_definitions = [
        {'AttributeName': DatabaseConstants.PARTY_KEY, 'AttributeType': 'S'},
        {'AttributeName': DatabaseConstants.PHOTO_KEY, 'AttributeType': 'S'},
    ]

    def __init__(self, party_key: str, photo_key: str, uploaded_at: str = None, deleted: bool = None):
        self.party_key = party_key
        self.photo_key = photo_key
        self.uploaded_at = uploaded_at
        # Absent until the photo is soft deleted
        self.deleted = deleted

    @classmethod
    def table_name(cls) -> str:
        return config.photos_table_name

    @property
    def is_visible(self) -> bool:
        return not self.deleted

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'PartyPhoto':
        return cls(
            item[DatabaseConstants.PARTY_KEY],
            item[DatabaseConstants.PHOTO_KEY],
            uploaded_at=item.get('uploadedAt'),
            deleted=item.get('deleted')
        )

    def to_item(self) -> Dict[str, Any]:
        item = {
            DatabaseConstants.PARTY_KEY: self.party_key,
            DatabaseConstants.PHOTO_KEY: self.photo_key,
            'uploadedAt': self.uploaded_at,
        }
        if self.deleted is not None:
            item['deleted'] = self.deleted
        return item

    def save(self) -> None:
        self.table().put_item(Item=self.to_item())

    @classmethod
    def create_photo(cls, party_key: str, photo_key: str, uploaded_at: str) -> 'PartyPhoto':
        """
        Create new photo record

        Args:
            party_key: Party the photo belongs to
            photo_key: Storage key of the photo object
            uploaded_at: ISO-8601 creation timestamp

        Returns:
            Created PartyPhoto instance

        Raises:
            DynamoDBError: If the write fails
        """
        photo = cls(party_key, photo_key, uploaded_at=uploaded_at)

        try:
            photo.save()
        except (ClientError, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=cls.table_name(),
                operation='create',
                success=False,
                party_key=party_key,
                photo_key=photo_key,
                error=str(e)
            )
            raise error_handler.dynamodb_exception(e, 'create_photo', cls.table_name())

        logger.log_database_operation(
            table_name=cls.table_name(),
            operation='create',
            success=True,
            party_key=party_key,
            photo_key=photo_key
        )
        return photo

    @classmethod
    def query_page(cls, party_key: str, limit: int, start_after: Optional[str] = None) -> Tuple[List['PartyPhoto'], Optional[str]]:
        """
        Read one page of a party's photos, newest first.

        Args:
            party_key: Party to read
            limit: Maximum number of raw records to read
            start_after: Photo key of the last record of the previous page (exclusive)

        Returns:
            (records, next_cursor) where next_cursor is None once the store has no more pages
        """
        query_kwargs = {
            'KeyConditionExpression': Key(DatabaseConstants.PARTY_KEY).eq(party_key),
            'ScanIndexForward': False,
            'Limit': limit,
        }
        if start_after:
            query_kwargs['ExclusiveStartKey'] = {
                DatabaseConstants.PARTY_KEY: party_key,
                DatabaseConstants.PHOTO_KEY: start_after,
            }

        try:
            response = cls.table().query(**query_kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=cls.table_name(),
                operation='query',
                success=False,
                party_key=party_key,
                error=str(e)
            )
            raise error_handler.dynamodb_exception(e, 'query_photos', cls.table_name())

        records = [cls.from_item(item) for item in response.get('Items', [])]

        last_key = response.get('LastEvaluatedKey')
        next_cursor = last_key[DatabaseConstants.PHOTO_KEY] if last_key else None

        logger.log_database_operation(
            table_name=cls.table_name(),
            operation='query',
            success=True,
            party_key=party_key,
            count=len(records),
            has_more=next_cursor is not None
        )
        return records, next_cursor

    @classmethod
    def mark_deleted(cls, party_key: str, photo_key: str) -> None:
        """
        Soft delete a photo.

        The update is unconditional: deleting an unknown or already deleted
        key succeeds the same way.
        """
        try:
            cls.table().update_item(
                Key={
                    DatabaseConstants.PARTY_KEY: party_key,
                    DatabaseConstants.PHOTO_KEY: photo_key,
                },
                UpdateExpression='SET #deleted = :deleted',
                ExpressionAttributeNames={'#deleted': 'deleted'},
                ExpressionAttributeValues={':deleted': True}
            )
        except (ClientError, BotoCoreError) as e:
            logger.log_database_operation(
                table_name=cls.table_name(),
                operation='soft_delete',
                success=False,
                party_key=party_key,
                photo_key=photo_key,
                error=str(e)
            )
            raise error_handler.dynamodb_exception(e, 'soft_delete_photo', cls.table_name())

        logger.log_database_operation(
            table_name=cls.table_name(),
            operation='soft_delete',
            success=True,
            party_key=party_key,
            photo_key=photo_key
        )

    def to_dict(self, url: Optional[str] = None) -> Dict[str, Any]:
        """Feed representation of the photo"""
        data = {
            'photoKey': self.photo_key,
            'partyName': self.party_key,
            'uploadedAt': self.uploaded_at,
        }
        if url is not None:
            data['url'] = url
        return data
