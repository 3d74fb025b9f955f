"""
Party Photo Exceptions
Custom exception classes for party photo backend operations
"""


class PartyPhotoError(Exception):
    """Base exception for all party photo backend errors"""

    status_code = 500

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses"""
        result = {
            'error': self.__class__.__name__,
            'message': self.message
        }
        if self.error_code:
            result['error_code'] = self.error_code
        if self.details:
            result['details'] = self.details
        return result


class ValidationError(PartyPhotoError):
    """Raised when caller input is missing or malformed"""

    status_code = 400

    def __init__(self, message: str, field: str = None, value: str = None):
        self.field = field
        self.value = value

        details = {}
        if field:
            details['field'] = field
        if value:
            details['value'] = value

        super().__init__(message, 'VALIDATION_ERROR', details)


class UnauthorizedError(PartyPhotoError):
    """
    Raised when a login token or assertion is invalid, expired or unknown.
    The message stays generic so callers cannot tell those cases apart.
    """

    status_code = 401

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, 'UNAUTHORIZED')


class ConfigurationError(PartyPhotoError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, config_key: str = None, config_source: str = None):
        self.config_key = config_key
        self.config_source = config_source

        details = {}
        if config_key:
            details['config_key'] = config_key
        if config_source:
            details['config_source'] = config_source

        super().__init__(message, 'CONFIGURATION_ERROR', details)


class InfrastructureError(PartyPhotoError):
    """Raised when a backing service (store, signer, mailer) fails"""

    def __init__(self, message: str, error_code: str = 'INFRASTRUCTURE_ERROR', details: dict = None,
                 retryable: bool = True, status_code: int = 500):
        self.retryable = retryable
        self.status_code = status_code
        super().__init__(message, error_code, details)


class DynamoDBError(InfrastructureError):
    """Raised when DynamoDB operations fail"""

    def __init__(self, message: str, operation: str = None, table: str = None, original_error: str = None,
                 retryable: bool = True, status_code: int = 500):
        self.operation = operation
        self.table = table
        self.original_error = original_error

        details = {}
        if operation:
            details['operation'] = operation
        if table:
            details['table'] = table
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, 'DYNAMODB_ERROR', details, retryable, status_code)


class S3OperationError(InfrastructureError):
    """Raised when S3 operations (including URL signing) fail"""

    def __init__(self, message: str, operation: str = None, bucket: str = None, key: str = None,
                 retryable: bool = True, status_code: int = 500):
        self.operation = operation
        self.bucket = bucket
        self.key = key

        details = {}
        if operation:
            details['operation'] = operation
        if bucket:
            details['bucket'] = bucket
        if key:
            details['key'] = key

        super().__init__(message, 'S3_OPERATION_ERROR', details, retryable, status_code)


class EmailDeliveryError(InfrastructureError):
    """Raised when the transactional email service rejects or fails a send"""

    def __init__(self, message: str, operation: str = 'send_email', original_error: str = None,
                 retryable: bool = True, status_code: int = 500):
        self.operation = operation
        self.original_error = original_error

        details = {'operation': operation}
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, 'EMAIL_DELIVERY_ERROR', details, retryable, status_code)
