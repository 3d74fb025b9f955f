"""
Passwordless (magic-link) authentication service
"""
from typing import Dict, Any, Optional
import boto3

from ..config import config
from ..constants import ErrorConstants
from ..exceptions import ValidationError, UnauthorizedError
from ..validation_utils import normalize_email, is_valid_email
from ..logger import auth_logger as logger
from ..models.login_token import LoginToken
from ..models.party import PartyMembership
from .email_sender import SesEmailSender
from .assertion_signer import AssertionSigner


class AuthService:
    """
    Issues single-use login tokens by email, exchanges them for signed
    assertions and resolves an assertion to the caller's parties.

    Collaborators are built lazily from config so that a missing secret only
    breaks the operations that need it.
    """

    def __init__(self, email_sender: Optional[SesEmailSender] = None,
                 assertion_signer: Optional[AssertionSigner] = None,
                 login_url_base: Optional[str] = None,
                 token_ttl: Optional[int] = None):
        self._email_sender = email_sender
        self._assertion_signer = assertion_signer
        self._login_url_base = login_url_base
        self._token_ttl = token_ttl

    @property
    def email_sender(self) -> SesEmailSender:
        if self._email_sender is None:
            ses_client = boto3.client('ses', region_name=config.aws_region)
            self._email_sender = SesEmailSender(ses_client, config.email_from)
        return self._email_sender

    @property
    def assertion_signer(self) -> AssertionSigner:
        if self._assertion_signer is None:
            self._assertion_signer = AssertionSigner(config.jwt_secret, config.assertion_ttl)
        return self._assertion_signer

    @property
    def login_url_base(self) -> str:
        return self._login_url_base or config.login_url_base

    @property
    def token_ttl(self) -> int:
        return self._token_ttl or config.login_token_ttl

    def build_login_link(self, token: str, link_base: Optional[str] = None) -> str:
        link_base = link_base or self.login_url_base
        separator = '&' if '?' in link_base else '?'
        return f"{link_base}{separator}token={token}"

    def request_login(self, email: Any) -> Dict[str, Any]:
        """
        Email a login link to an address

        Args:
            email: Raw address from the caller; trimmed and lower-cased here

        Returns:
            Acknowledgement. It is the same whether or not the address
            belongs to any party.

        Raises:
            ValidationError: Missing or malformed address
            DynamoDBError / EmailDeliveryError: Backing service failure
        """
        normalized = normalize_email(email)
        if not is_valid_email(normalized):
            raise ValidationError(ErrorConstants.INVALID_EMAIL, field='email')

        logger.log_service_operation("request_login")

        # Resolve config before persisting anything
        sender = self.email_sender
        ttl_seconds = self.token_ttl
        link_base = self.login_url_base
        login_token = LoginToken.issue(normalized, ttl_seconds)

        sender.send_login_link(normalized, self.build_login_link(login_token.token, link_base), ttl_seconds)

        return {'message': 'Login link sent'}

    def redeem_login_token(self, token: Any) -> Dict[str, Any]:
        """
        Exchange a raw login token for a signed assertion.

        Unknown, expired and already redeemed tokens fail identically.

        Returns:
            {'assertion': <jwt>, 'expiresIn': <seconds>}
        """
        if not token or not isinstance(token, str):
            raise ValidationError(ErrorConstants.MISSING_TOKEN, field='token')

        signer = self.assertion_signer

        login_token = LoginToken.find_active(token)
        if login_token is None:
            logger.info("Login token rejected", reason='unknown_or_expired')
            raise UnauthorizedError(ErrorConstants.INVALID_TOKEN)

        if not login_token.mark_redeemed():
            logger.info("Login token rejected", reason='already_redeemed')
            raise UnauthorizedError(ErrorConstants.INVALID_TOKEN)

        logger.log_service_operation("redeem_login_token")

        return {
            'assertion': signer.sign(login_token.email),
            'expiresIn': signer.ttl_seconds
        }

    def verify_login(self, assertion: Any) -> Dict[str, Any]:
        """
        Resolve a signed assertion to its email and party memberships

        Returns:
            {'email': str, 'parties': [membership dicts]}

        Raises:
            ValidationError: Missing assertion, or one without an email claim
            UnauthorizedError: Bad signature, expired or malformed assertion
        """
        if not assertion or not isinstance(assertion, str):
            raise ValidationError(ErrorConstants.MISSING_TOKEN, field='token')

        claims = self.assertion_signer.verify(assertion)

        email = claims.get('email')
        if not email:
            raise ValidationError(ErrorConstants.INVALID_TOKEN_PAYLOAD)

        memberships = PartyMembership.parties_for_email(email)

        logger.log_service_operation("verify_login", party_count=len(memberships))

        return {
            'email': email,
            'parties': [membership.to_dict() for membership in memberships]
        }
