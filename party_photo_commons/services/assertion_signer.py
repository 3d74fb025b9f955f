"""
Signed login assertions (HS256 JWT)
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

import jwt

from ..constants import SecurityConstants, TimeConstants
from ..exceptions import UnauthorizedError


class AssertionSigner:
    """Signs and verifies the assertion handed out after a login token is redeemed"""

    def __init__(self, secret: str, ttl_seconds: int = TimeConstants.ASSERTION_TTL,
                 algorithm: str = SecurityConstants.JWT_ALGORITHM):
        self.secret = secret
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm

    def sign(self, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'email': email,
            'sub': email,
            'iat': now,
            'exp': now + timedelta(seconds=self.ttl_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, assertion: str) -> Dict[str, Any]:
        """
        Check signature and expiry of an assertion.

        Raises:
            UnauthorizedError: For any bad, expired or malformed assertion
        """
        try:
            return jwt.decode(
                assertion,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': SecurityConstants.REQUIRED_CLAIMS}
            )
        except jwt.InvalidTokenError:
            raise UnauthorizedError()
