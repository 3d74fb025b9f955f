"""
DynamoDB record for passwordless login tokens
"""
import time
import uuid
from typing import Dict, Any, Optional
from botocore.exceptions import ClientError, BotoCoreError

from ..config import config
from ..logger import auth_logger as logger
from ..error_handler import error_handler
from ..utils import utc_now_iso
from .base import DynamoRecord


class LoginToken(DynamoRecord):
    """
    Short-lived magic-link token.
    DynamoDB expires items through the ttl attribute, which can lag by hours,
    so readers must also check ttl themselves.
    """

    key_schema = [
        {'AttributeName': 'token', 'KeyType': 'HASH'},
    ]
    attribute_definitions = [
        {'AttributeName': 'token', 'AttributeType': 'S'},
    ]
    ttl_attribute = 'ttl'

    def __init__(self, token: str, email: str, created_at: str, ttl: int, redeemed_at: str = None):
        self.token = token
        self.email = email
        self.created_at = created_at
        # Epoch seconds
        self.ttl = ttl
        # Stamped once when the raw token is exchanged for an assertion
        self.redeemed_at = redeemed_at

    @classmethod
    def table_name(cls) -> str:
        return config.tokens_table_name

    @property
    def is_expired(self) -> bool:
        return self.ttl <= int(time.time())

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'LoginToken':
        return cls(
            item['token'],
            email=item['email'],
            created_at=item.get('createdAt'),
            ttl=int(item['ttl']),
            redeemed_at=item.get('redeemedAt')
        )

    def to_item(self) -> Dict[str, Any]:
        item = {
            'token': self.token,
            'email': self.email,
            'createdAt': self.created_at,
            'ttl': self.ttl,
        }
        if self.redeemed_at:
            item['redeemedAt'] = self.redeemed_at
        return item

    def save(self) -> None:
        self.table().put_item(Item=self.to_item())

    @classmethod
    def issue(cls, email: str, ttl_seconds: int) -> 'LoginToken':
        """
        Create and persist a new random token for an email address

        Args:
            email: Normalized email address
            ttl_seconds: Lifetime of the token

        Returns:
            Persisted LoginToken
        """
        login_token = cls(
            str(uuid.uuid4()),
            email=email,
            created_at=utc_now_iso(),
            ttl=int(time.time()) + ttl_seconds
        )

        try:
            login_token.save()
        except (ClientError, BotoCoreError) as e:
            raise error_handler.dynamodb_exception(e, 'issue_login_token', cls.table_name())

        logger.log_database_operation(
            table_name=cls.table_name(),
            operation='create',
            success=True,
            email=email
        )
        return login_token

    @classmethod
    def find_active(cls, token: str) -> Optional['LoginToken']:
        """
        Look up a token that is still inside its lifetime.
        Expired and unknown tokens both return None.
        """
        try:
            response = cls.table().get_item(Key={'token': token}, ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            raise error_handler.dynamodb_exception(e, 'get_login_token', cls.table_name())

        item = response.get('Item')
        if not item:
            return None

        login_token = cls.from_item(item)
        if login_token.is_expired:
            return None
        return login_token

    def mark_redeemed(self) -> bool:
        """
        Stamp the token as redeemed.

        Returns:
            False if the token was already redeemed (or swept) by another request
        """
        redeemed_at = utc_now_iso()
        try:
            self.table().update_item(
                Key={'token': self.token},
                UpdateExpression='SET redeemedAt = :redeemed_at',
                ConditionExpression='attribute_exists(#token) AND attribute_not_exists(redeemedAt)',
                ExpressionAttributeNames={'#token': 'token'},
                ExpressionAttributeValues={':redeemed_at': redeemed_at}
            )
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException':
                return False
            raise error_handler.dynamodb_exception(e, 'redeem_login_token', self.table_name())
        except BotoCoreError as e:
            raise error_handler.dynamodb_exception(e, 'redeem_login_token', self.table_name())

        self.redeemed_at = redeemed_at
        logger.log_database_operation(
            table_name=self.table_name(),
            operation='redeem',
            success=True,
            email=self.email
        )
        return True
