"""
Lambda proxy helpers for the party photo backend
"""
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from .constants import HTTPConstants, ErrorConstants
from .exceptions import ValidationError

DEFAULT_HEADERS = {
    HTTPConstants.CONTENT_TYPE: HTTPConstants.JSON,
    HTTPConstants.ACCESS_CONTROL_ALLOW_ORIGIN: '*',
    HTTPConstants.ACCESS_CONTROL_ALLOW_HEADERS: 'Content-Type,Authorization',
    HTTPConstants.ACCESS_CONTROL_ALLOW_METHODS: 'GET,POST,OPTIONS'
}


def create_response(status_code: int, body: str, event: Optional[dict] = None, headers: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response body (JSON string)
        event: Original Lambda event for context
        headers: Additional headers

    Returns:
        Lambda proxy integration response
    """
    response_headers = dict(DEFAULT_HEADERS)

    if headers:
        response_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': body
    }


def create_json_response(status_code: int, data: Dict[str, Any], event: Optional[dict] = None) -> Dict[str, Any]:
    return create_response(status_code, json.dumps(data, default=str), event)


def create_error_response(status_code: int, message: str, event: Optional[dict] = None, details: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized error response

    Args:
        status_code: HTTP status code
        message: Error message
        event: Original Lambda event for context
        details: Additional error details

    Returns:
        Lambda proxy integration error response
    """
    error_body = {
        'success': False,
        'message': message,
        'timestamp': utc_now_iso()
    }

    if details:
        error_body.update(details)

    return create_response(status_code, json.dumps(error_body, default=str), event)


def parse_request_body(event: dict) -> Dict[str, Any]:
    """
    Parse the JSON body of an API Gateway event.
    Direct invocations pass the payload as the event itself.
    """
    if not isinstance(event, dict):
        raise ValidationError(ErrorConstants.INVALID_JSON)

    if 'body' not in event and 'httpMethod' not in event:
        return dict(event)

    raw_body = event.get('body')
    if raw_body in (None, ''):
        return {}
    if isinstance(raw_body, dict):
        return raw_body

    try:
        body = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError):
        raise ValidationError(ErrorConstants.INVALID_JSON)

    if not isinstance(body, dict):
        raise ValidationError(ErrorConstants.INVALID_JSON)
    return body


def parse_query_params(event: dict) -> Dict[str, Any]:
    """Query string parameters, or the raw event for direct invocations"""
    if not isinstance(event, dict):
        return {}
    if 'httpMethod' not in event and 'queryStringParameters' not in event:
        return dict(event)
    return event.get('queryStringParameters') or {}


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
