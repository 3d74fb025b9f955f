"""
Lambda request decorators for the party photo backend
"""
import time
from functools import wraps
from typing import Callable

from .constants import HTTPConstants, ErrorConstants
from .exceptions import (
    ValidationError, UnauthorizedError, ConfigurationError, InfrastructureError
)
from .utils import create_error_response, create_response, parse_request_body, parse_query_params
from .logger import logger


def api_gateway_handler(function_name: str = None, log_requests: bool = True):
    """
    Decorator for API Gateway proxy handlers.

    Answers CORS preflight, parses the JSON body and query string into
    event['parsed_body'] / event['query_params'], and maps the exception
    taxonomy onto HTTP responses:

    - ValidationError      -> 400 with field details
    - UnauthorizedError    -> 401 with a generic message
    - ConfigurationError   -> 500 "Server configuration error"
    - InfrastructureError  -> 500/503 with a retryable flag
    - anything else        -> 500 "Internal server error"

    Args:
        function_name: Name used in logs (defaults to the wrapped function's name)
        log_requests: Whether to log request start/end
    """
    def decorator(func: Callable) -> Callable:
        name = function_name or getattr(func, '__name__', 'unknown')

        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()

            if isinstance(event, dict) and event.get('httpMethod') == 'OPTIONS':
                return create_response(HTTPConstants.OK, '{"message": "CORS preflight success"}', event)

            if log_requests:
                logger.log_lambda_start(name, event, context)

            def finish(success: bool, **kwargs):
                if log_requests:
                    duration_ms = (time.time() - start_time) * 1000
                    logger.log_lambda_end(name, success, duration_ms, **kwargs)

            try:
                event['parsed_body'] = parse_request_body(event)
                event['query_params'] = parse_query_params(event)

                result = func(event, context)

                finish(True)
                return result

            except ValidationError as e:
                finish(False, error=e.message, error_code=e.error_code)
                return create_error_response(
                    HTTPConstants.BAD_REQUEST,
                    e.message,
                    event,
                    e.details or None
                )

            except UnauthorizedError as e:
                finish(False, error_code=e.error_code)
                return create_error_response(HTTPConstants.UNAUTHORIZED, e.message, event)

            except ConfigurationError as e:
                logger.error(f"Configuration error in {name}", error=e, **e.details)
                finish(False, error_code=e.error_code)
                return create_error_response(
                    HTTPConstants.INTERNAL_SERVER_ERROR,
                    ErrorConstants.CONFIGURATION_ERROR,
                    event
                )

            except InfrastructureError as e:
                logger.error(f"Backing service failure in {name}", error=e, **e.details)
                finish(False, error_code=e.error_code, retryable=e.retryable)
                return create_error_response(
                    e.status_code,
                    ErrorConstants.INTERNAL_ERROR,
                    event,
                    {'retryable': e.retryable}
                )

            except Exception as e:
                logger.error(f"Unexpected error in {name}", error=e)
                finish(False, error=str(e))
                return create_error_response(
                    HTTPConstants.INTERNAL_SERVER_ERROR,
                    ErrorConstants.INTERNAL_ERROR,
                    event
                )

        return wrapper
    return decorator
