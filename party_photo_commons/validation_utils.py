"""
Validation utilities for request parameters
"""
import re
import time
import uuid
from typing import List, Dict, Any, Optional

from .constants import ValidationConstants, PaginationConstants

_EMAIL_RE = re.compile(ValidationConstants.EMAIL_PATTERN)
_LEADING_INT_RE = re.compile(r'\s*([+-]?\d+)')


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> List[str]:
    """
    Validate that all required fields are present in the data.

    Args:
        data: Dictionary containing the data to validate
        required_fields: List of required field names

    Returns:
        List of missing field names (empty if all fields are present)
    """
    if not isinstance(data, dict):
        return required_fields

    missing_fields = []
    for field in required_fields:
        if field not in data or data[field] is None or data[field] == "":
            missing_fields.append(field)

    return missing_fields


def normalize_email(email: Any) -> str:
    """Trim and lower-case an email address; non-strings normalize to empty"""
    if not isinstance(email, str):
        return ""

    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Conservative local-part@domain.tld check"""
    return bool(email) and _EMAIL_RE.match(email) is not None


def parse_page_limit(raw_limit: Any) -> int:
    """
    Turn a client supplied page size into the effective store limit.

    The leading integer is used ('25.0' -> 25, '1.5' -> 1, '12abc' -> 12).
    Absent or non-numeric input falls back to the default page size,
    numeric input is clamped into [MIN_PAGE_SIZE, MAX_PAGE_SIZE].
    """
    if raw_limit is None or isinstance(raw_limit, (bool, list, dict)):
        return PaginationConstants.DEFAULT_PAGE_SIZE

    match = _LEADING_INT_RE.match(str(raw_limit))
    if match is None:
        return PaginationConstants.DEFAULT_PAGE_SIZE

    limit = int(match.group(1))
    return max(PaginationConstants.MIN_PAGE_SIZE, min(limit, PaginationConstants.MAX_PAGE_SIZE))


def generate_photo_key(file_name: str, now_ms: Optional[int] = None) -> str:
    """
    Build the storage key for a new photo: <ms-epoch>_<uuid4>_<fileName>.

    The millisecond prefix keeps keys roughly chronological for the
    descending feed order; the uuid keeps equal file names apart.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}_{uuid.uuid4()}_{file_name}"
