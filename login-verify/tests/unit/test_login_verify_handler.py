"""
Unit tests for the login verify Lambda function
"""
import json
import time
import jwt
import pytest

from party_photo_commons.models import LoginToken, PartyMembership

SECRET = 'test-jwt-secret-that-is-long-enough-for-hs256'


@pytest.fixture
def handler(aws_services, load_handler):
    return load_handler('login-verify')


@pytest.fixture
def assertion(aws_services, load_handler, api_gateway_event, lambda_context):
    """Assertion obtained through the redeem function, as a browser would"""
    login_token = LoginToken.issue('guest@example.com', 900)
    response = load_handler('login-redeem')(api_gateway_event(body={'token': login_token.token}), lambda_context)
    return json.loads(response['body'])['assertion']


class TestLoginVerifyHandler:

    def test_full_login_flow(self, handler, assertion, api_gateway_event, lambda_context):
        PartyMembership('smith-wedding', 'guest@example.com', role='guest').save()

        response = handler(api_gateway_event(body={'token': assertion}), lambda_context)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {
            'email': 'guest@example.com',
            'parties': [{'partyName': 'smith-wedding', 'email': 'guest@example.com', 'role': 'guest'}]
        }

    def test_assertion_field_is_accepted(self, handler, assertion, api_gateway_event, lambda_context):
        response = handler(api_gateway_event(body={'assertion': assertion}), lambda_context)

        assert response['statusCode'] == 200
        assert json.loads(response['body'])['parties'] == []

    def test_tampered_assertion(self, handler, assertion, api_gateway_event, lambda_context):
        header, payload, signature = assertion.split('.')
        tampered = '.'.join([header, payload, signature[::-1]])

        response = handler(api_gateway_event(body={'token': tampered}), lambda_context)

        assert response['statusCode'] == 401
        assert json.loads(response['body'])['message'] == 'Invalid or expired token'

    def test_payload_without_email(self, handler, api_gateway_event, lambda_context):
        now = int(time.time())
        token = jwt.encode({'iat': now, 'exp': now + 60}, SECRET, algorithm='HS256')

        response = handler(api_gateway_event(body={'token': token}), lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Invalid token payload'

    def test_missing_token(self, handler, api_gateway_event, lambda_context):
        response = handler(api_gateway_event(body={}), lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Missing token'
