"""
Party Photo Backend Constants
"""


class HTTPConstants:
    """HTTP status codes and headers"""

    # Status codes
    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    # Headers
    CONTENT_TYPE = 'Content-Type'
    ACCESS_CONTROL_ALLOW_ORIGIN = 'Access-Control-Allow-Origin'
    ACCESS_CONTROL_ALLOW_HEADERS = 'Access-Control-Allow-Headers'
    ACCESS_CONTROL_ALLOW_METHODS = 'Access-Control-Allow-Methods'

    # MIME types
    JSON = 'application/json'


class PaginationConstants:
    """Photo feed paging"""

    DEFAULT_PAGE_SIZE = 20
    MIN_PAGE_SIZE = 1
    MAX_PAGE_SIZE = 100


class TimeConstants:
    """Time-related constants (seconds)"""

    DOWNLOAD_URL_EXPIRY = 10 * 60
    # Write-capable URLs are handed to unauthenticated guests, keep them short
    UPLOAD_URL_EXPIRY = 60
    LOGIN_TOKEN_TTL = 15 * 60
    ASSERTION_TTL = 12 * 60 * 60


class ValidationConstants:
    """Validation rules and patterns"""

    EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
    UNKNOWN_FILE_NAME = 'unknown'


class DatabaseConstants:
    """DynamoDB attribute names shared with the frontend contract"""

    PARTY_KEY = 'partyName'
    PHOTO_KEY = 'photoKey'
    EMAIL_INDEX = 'emailIndex'


class UrlDirection:
    """Capability of a presigned URL"""

    UPLOAD = 'upload'
    DOWNLOAD = 'download'

    ALL = [UPLOAD, DOWNLOAD]


class SecurityConstants:
    JWT_ALGORITHM = 'HS256'
    REQUIRED_CLAIMS = ['exp', 'iat']


class EmailConstants:
    """Login email content"""

    CHARSET = 'UTF-8'
    LOGIN_SUBJECT = 'Your login link'
    LOGIN_BODY = (
        "Click the following link to log in:\n\n"
        "{login_link}\n\n"
        "This link will expire in {minutes} minutes."
    )


class ErrorConstants:
    """Error message constants"""

    INTERNAL_ERROR = 'Internal server error'
    CONFIGURATION_ERROR = 'Server configuration error'
    INVALID_JSON = 'Invalid JSON in request body'
    INVALID_TOKEN = 'Invalid or expired token'
    INVALID_TOKEN_PAYLOAD = 'Invalid token payload'
    INVALID_EMAIL = 'Invalid or missing email.'
    MISSING_PARTY = 'Missing partyName query parameter'
    MISSING_FILES = 'Missing required fields: partyName and files'
    MISSING_FILE_FIELDS = 'Missing fileName or contentType in one of the files'
    MISSING_DELETE_FIELDS = 'Missing partyName or photoKey in request body'
    MISSING_TOKEN = 'Missing token'
