"""
AWS error handling utilities for the party photo backend
"""
from typing import Dict, Any
from botocore.exceptions import ClientError, BotoCoreError

from .constants import HTTPConstants
from .exceptions import DynamoDBError, S3OperationError, EmailDeliveryError
from .logger import logger

THROTTLING_CODES = (
    'ThrottlingException',
    'ProvisionedThroughputExceededException',
    'RequestLimitExceeded',
    'SlowDown',
    'Throttling',
)


def _client_error_code(error: Exception) -> str:
    """AWS error code of a botocore ClientError, "Unknown" for anything else"""
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code', 'Unknown')
    return 'Unknown'


class AWSErrorHandler:
    """
    Centralized AWS error handling: classifies backing-service failures
    into retryable/non-retryable infrastructure errors
    """

    @staticmethod
    def handle_dynamodb_error(error: Exception, operation: str, table_name: str = None) -> Dict[str, Any]:
        """
        Handle DynamoDB-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            table_name: Optional table name for context

        Returns:
            Standardized error data
        """
        error_context = {
            'operation': operation,
            'table_name': table_name or 'unknown',
            'error_type': type(error).__name__,
            'error_message': str(error)
        }

        if isinstance(error, (ClientError, BotoCoreError)):
            error_code = _client_error_code(error)
            error_context['aws_error_code'] = error_code
            logger.error(f"DynamoDB operation failed: {operation}", error=error, **error_context)

            if error_code in THROTTLING_CODES:
                return {
                    'success': False,
                    'error_type': 'ThrottlingError',
                    'error_message': 'Database is temporarily busy. Please try again.',
                    'status_code': HTTPConstants.SERVICE_UNAVAILABLE,
                    'retryable': True
                }
            if error_code == 'ResourceNotFoundException':
                return {
                    'success': False,
                    'error_type': 'ResourceNotFound',
                    'error_message': 'Database resource not found',
                    'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                    'retryable': False
                }
            return {
                'success': False,
                'error_type': 'DatabaseError',
                'error_message': f'Database operation failed: {operation}',
                'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                'retryable': True
            }

        logger.error("Unexpected database error", error=error, **error_context)
        return {
            'success': False,
            'error_type': 'DatabaseError',
            'error_message': 'Unexpected database error occurred',
            'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
            'retryable': True
        }

    @staticmethod
    def handle_s3_error(error: Exception, operation: str, bucket_name: str = None, key: str = None) -> Dict[str, Any]:
        """
        Handle S3-related errors

        Args:
            error: The exception that occurred
            operation: The operation being performed
            bucket_name: Optional bucket name for context
            key: Optional S3 key for context

        Returns:
            Standardized error data
        """
        error_context = {
            'operation': operation,
            'bucket_name': bucket_name or 'unknown',
            's3_key': key or 'unknown',
            'error_type': type(error).__name__,
            'error_message': str(error)
        }

        error_code = _client_error_code(error)
        error_context['aws_error_code'] = error_code
        logger.error("S3 operation failed", error=error, **error_context)

        if error_code in THROTTLING_CODES:
            return {
                'success': False,
                'error_type': 'ThrottlingError',
                'error_message': 'Storage service is busy. Please try again.',
                'status_code': HTTPConstants.SERVICE_UNAVAILABLE,
                'retryable': True
            }
        if error_code in ('AccessDenied', 'NoSuchBucket'):
            return {
                'success': False,
                'error_type': 'StorageError',
                'error_message': f'Storage error: {error_code}',
                'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
                'retryable': False
            }
        return {
            'success': False,
            'error_type': 'StorageError',
            'error_message': f'Storage operation failed: {operation}',
            'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
            'retryable': isinstance(error, (ClientError, BotoCoreError))
        }

    @staticmethod
    def handle_ses_error(error: Exception, recipient: str = None) -> Dict[str, Any]:
        """Handle transactional email errors"""
        error_code = _client_error_code(error)
        logger.error(
            "SES send failed",
            error=error,
            recipient=recipient or 'unknown',
            aws_error_code=error_code
        )

        if error_code in THROTTLING_CODES:
            return {
                'success': False,
                'error_type': 'ThrottlingError',
                'error_message': 'Email service is busy. Please try again.',
                'status_code': HTTPConstants.SERVICE_UNAVAILABLE,
                'retryable': True
            }
        return {
            'success': False,
            'error_type': 'EmailError',
            'error_message': f'Email delivery failed: {error_code}',
            'status_code': HTTPConstants.INTERNAL_SERVER_ERROR,
            # Rejections such as MessageRejected will not succeed on retry
            'retryable': error_code not in ('MessageRejected', 'MailFromDomainNotVerifiedException')
        }

    # Builders that turn the standardized data into raisable exceptions

    def dynamodb_exception(self, error: Exception, operation: str, table_name: str = None) -> DynamoDBError:
        data = self.handle_dynamodb_error(error, operation, table_name)
        return DynamoDBError(
            data['error_message'],
            operation=operation,
            table=table_name,
            original_error=str(error),
            retryable=data['retryable'],
            status_code=data['status_code']
        )

    def s3_exception(self, error: Exception, operation: str, bucket_name: str = None, key: str = None) -> S3OperationError:
        data = self.handle_s3_error(error, operation, bucket_name, key)
        return S3OperationError(
            data['error_message'],
            operation=operation,
            bucket=bucket_name,
            key=key,
            retryable=data['retryable'],
            status_code=data['status_code']
        )

    def ses_exception(self, error: Exception, recipient: str = None) -> EmailDeliveryError:
        data = self.handle_ses_error(error, recipient)
        return EmailDeliveryError(
            data['error_message'],
            original_error=str(error),
            retryable=data['retryable'],
            status_code=data['status_code']
        )


# Global error handler instance
error_handler = AWSErrorHandler()
