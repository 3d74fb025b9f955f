"""
Configuration management for the party photo backend
Supports environment variables, SSM Parameter Store, and local .env files
"""
import os
from typing import Optional, Any
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, BotoCoreError
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .constants import TimeConstants, DatabaseConstants

# Local development: pick up a .env file without overriding real variables
load_dotenv(override=False)


class Config:
    """
    Configuration manager with hybrid approach:
    1. Environment Variables (highest priority)
    2. AWS Parameter Store (environment-specific)
    3. Local defaults (development fallback)
    """

    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/party-photo/{self.environment}/backend'
        )
        self.parameter_store_enabled = os.environ.get('PARAMETER_STORE_ENABLED', 'true').lower() in ('true', '1', 'yes', 'on')
        self._ssm_client = None

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client"""
        if self._ssm_client is None and self.parameter_store_enabled:
            self._ssm_client = boto3.client('ssm', region_name=self.aws_region)
        return self._ssm_client

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        Get configuration parameter with fallback hierarchy:
        1. Environment variable
        2. SSM Parameter Store
        3. Default value
        """
        # Try environment variable first (with service prefix)
        env_key = f"PARTY_PHOTO_{key.upper().replace('-', '_')}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        # Try standard environment variable
        env_value = os.environ.get(key.upper().replace('-', '_'))
        if env_value is not None:
            return env_value

        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value

        return default

    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Get parameter from AWS SSM Parameter Store with caching
        """
        if not self.ssm_client:
            return None

        parameter_name = f"{self.parameter_store_prefix}/{key}"

        try:
            response = self.ssm_client.get_parameter(Name=parameter_name, WithDecryption=True)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except BotoCoreError as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None

    def require_parameter(self, key: str) -> str:
        """Get a parameter that has no sensible default"""
        value = self.get_parameter(key)
        if value is None or value == '':
            raise ConfigurationError(
                f"Missing required configuration: {key}",
                config_key=key,
                config_source='env/ssm'
            )
        return value

    def get_int_parameter(self, key: str, default: int = 0) -> int:
        """Get integer parameter"""
        value = self.get_parameter(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default

    # Common configuration getters
    @property
    def aws_region(self) -> str:
        return os.environ.get('AWS_REGION') or os.environ.get('AWS_DEFAULT_REGION') or 'us-east-1'

    @property
    def photos_table_name(self) -> str:
        """Get photo metadata table name"""
        return self.get_parameter('photos-table-name', f'PartyPhotos-{self.environment}')

    @property
    def tokens_table_name(self) -> str:
        """Get login token table name"""
        return self.get_parameter('tokens-table-name', f'LoginTokens-{self.environment}')

    @property
    def parties_table_name(self) -> str:
        """Get party membership table name"""
        return self.get_parameter('parties-table-name', f'Parties-{self.environment}')

    @property
    def party_email_index_name(self) -> str:
        return self.get_parameter('party-email-index-name', DatabaseConstants.EMAIL_INDEX)

    @property
    def photo_bucket_name(self) -> str:
        """Get photo bucket name"""
        return self.get_parameter('photo-bucket-name', f'party-photos-{self.environment}')

    @property
    def download_url_expiry(self) -> int:
        """Get download presigned URL expiry in seconds"""
        return self.get_int_parameter('download-url-expiry', TimeConstants.DOWNLOAD_URL_EXPIRY)

    @property
    def upload_url_expiry(self) -> int:
        """Get upload presigned URL expiry in seconds"""
        return self.get_int_parameter('upload-url-expiry', TimeConstants.UPLOAD_URL_EXPIRY)

    @property
    def login_token_ttl(self) -> int:
        return self.get_int_parameter('login-token-ttl', TimeConstants.LOGIN_TOKEN_TTL)

    @property
    def assertion_ttl(self) -> int:
        return self.get_int_parameter('assertion-ttl', TimeConstants.ASSERTION_TTL)

    @property
    def list_concurrency(self) -> int:
        return self.get_int_parameter('list-concurrency', 8)

    @property
    def login_url_base(self) -> str:
        return self.require_parameter('login-url-base')

    @property
    def email_from(self) -> str:
        """Operator-configured sender address for login emails"""
        return self.require_parameter('email-from')

    @property
    def jwt_secret(self) -> str:
        return self.require_parameter('jwt-secret')

    @property
    def enable_debug_logging(self) -> bool:
        """Get debug logging flag"""
        return self.get_bool_parameter('enable-debug-logging', False)


# Global configuration instance
config = Config()
