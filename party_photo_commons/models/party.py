"""
DynamoDB record for party memberships
Owned by the party management side; this backend only reads it
"""
from typing import Dict, List, Any
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError, BotoCoreError

from ..config import config
from ..constants import DatabaseConstants
from ..logger import auth_logger as logger
from ..error_handler import error_handler
from .base import DynamoRecord


class PartyMembership(DynamoRecord):
    """One guest email registered to one party"""

    key_schema = [
        {'AttributeName': DatabaseConstants.PARTY_KEY, 'KeyType': 'HASH'},
        {'AttributeName': 'email', 'KeyType': 'RANGE'},
    ]
    attribute_definitions = [
        {'AttributeName': DatabaseConstants.PARTY_KEY, 'AttributeType': 'S'},
        {'AttributeName': 'email', 'AttributeType': 'S'},
    ]

    def __init__(self, party_key: str, email: str, role: str = None, joined_at: str = None):
        self.party_key = party_key
        self.email = email
        self.role = role
        self.joined_at = joined_at

    @classmethod
    def table_name(cls) -> str:
        return config.parties_table_name

    @classmethod
    def index_name(cls) -> str:
        return config.party_email_index_name

    @classmethod
    def index_definitions(cls) -> List[Dict[str, Any]]:
        return [
            {
                'IndexName': cls.index_name(),
                'KeySchema': [{'AttributeName': 'email', 'KeyType': 'HASH'}],
                'Projection': {'ProjectionType': 'ALL'}
            }
        ]

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'PartyMembership':
        return cls(
            item[DatabaseConstants.PARTY_KEY],
            item['email'],
            role=item.get('role'),
            joined_at=item.get('joinedAt')
        )

    def save(self) -> None:
        item = {DatabaseConstants.PARTY_KEY: self.party_key, 'email': self.email}
        if self.role:
            item['role'] = self.role
        if self.joined_at:
            item['joinedAt'] = self.joined_at
        self.table().put_item(Item=item)

    @classmethod
    def parties_for_email(cls, email: str) -> List['PartyMembership']:
        """All memberships of an email address, empty when it has none"""
        query_kwargs = {
            'IndexName': cls.index_name(),
            'KeyConditionExpression': Key('email').eq(email),
        }
        memberships = []

        try:
            while True:
                response = cls.table().query(**query_kwargs)
                memberships.extend(cls.from_item(item) for item in response.get('Items', []))
                if 'LastEvaluatedKey' not in response:
                    break
                query_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']
        except (ClientError, BotoCoreError) as e:
            raise error_handler.dynamodb_exception(e, 'query_party_memberships', cls.table_name())

        logger.log_database_operation(
            table_name=cls.table_name(),
            operation='query_by_email',
            success=True,
            count=len(memberships)
        )
        return memberships

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'partyName': self.party_key,
            'email': self.email,
        }
        if self.role:
            data['role'] = self.role
        if self.joined_at:
            data['joinedAt'] = self.joined_at
        return data
