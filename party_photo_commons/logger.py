"""
CloudWatch logging utilities for the party photo backend
"""
import json
import traceback
from datetime import datetime, timezone
from .config import config

REDACTED_KEYS = ('token', 'assertion', 'password', 'secret', 'authorization')


class CommonsLogger:
    """
    Structured logger with CloudWatch optimization
    """

    def __init__(self, service_name: str = "party-photo-backend"):
        self.service_name = service_name
        self.environment = config.environment
        self.debug_enabled = config.enable_debug_logging

    def _log(self, level: str, message: str, **kwargs):
        """Internal log method with structured format"""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.upper(),
            'service': self.service_name,
            'environment': self.environment,
            'message': message
        }

        if kwargs:
            log_entry.update(kwargs)

        # CloudWatch captures stdout
        print(json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs):
        """Log debug message (only if debug enabled)"""
        if self.debug_enabled:
            self._log('debug', message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log('info', message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log('warning', message, **kwargs)

    def error(self, message: str, error: Exception = None, **kwargs):
        """Log error message with optional exception details"""
        log_data = kwargs.copy()

        if error:
            log_data['error_type'] = type(error).__name__
            log_data['error_message'] = str(error)
            log_data['traceback'] = traceback.format_exc()

        self._log('error', message, **log_data)

    def log_lambda_start(self, function_name: str, event: dict, context=None):
        """Log Lambda function start"""
        log_data = {
            'function_name': function_name,
            'request_id': getattr(context, 'aws_request_id', 'unknown') if context else 'unknown',
        }

        # Only scalar request metadata, never bodies
        if isinstance(event, dict):
            log_data['http_method'] = event.get('httpMethod')
            log_data['path'] = event.get('path')
            query = event.get('queryStringParameters') or {}
            log_data['query'] = redact(query) if isinstance(query, dict) else {}

        self._log('info', f"Lambda function {function_name} started", **log_data)

    def log_lambda_end(self, function_name: str, success: bool = True, duration_ms: float = None, **kwargs):
        """Log Lambda function completion"""
        log_data = {
            'function_name': function_name,
            'success': success,
        }

        if duration_ms is not None:
            log_data['duration_ms'] = round(duration_ms, 2)

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Lambda function {function_name} {'completed' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_service_operation(self, operation: str, **kwargs):
        self._log('info', f"Service operation: {operation}", operation=operation, **kwargs)

    def log_database_operation(self, table_name: str, operation: str, success: bool = True, **kwargs):
        """Log database operation"""
        log_data = {
            'table_name': table_name,
            'operation': operation,
            'success': success
        }
        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Database {operation} on {table_name} {'succeeded' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_s3_operation(self, bucket_name: str, operation: str, key: str = None, success: bool = True, **kwargs):
        """Log S3 operation"""
        log_data = {
            'bucket_name': bucket_name,
            'operation': operation,
            'success': success
        }

        if key:
            log_data['s3_key'] = key

        log_data.update(kwargs)

        # URL signing happens per photo, keep successes at debug level
        if success:
            self.debug(f"S3 {operation} on {bucket_name} succeeded", **log_data)
        else:
            self._log('error', f"S3 {operation} on {bucket_name} failed", **log_data)

    def log_email_operation(self, operation: str, recipient: str, success: bool = True, **kwargs):
        log_data = {
            'operation': operation,
            'recipient': recipient,
            'success': success
        }
        log_data.update(kwargs)

        level = 'info' if success else 'error'
        self._log(level, f"Email {operation} {'succeeded' if success else 'failed'}", **log_data)


def redact(data: dict) -> dict:
    """Replace sensitive values so they never reach the logs"""
    return {
        key: '[REDACTED]' if any(word in key.lower() for word in REDACTED_KEYS) else value
        for key, value in data.items()
    }


# Global logger instances
logger = CommonsLogger("party-photo-backend")
photo_logger = CommonsLogger("photo-service")
auth_logger = CommonsLogger("auth-service")
