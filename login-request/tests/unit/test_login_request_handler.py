"""
Unit tests for the login request Lambda function
"""
import json
import pytest


@pytest.fixture
def handler(aws_services, load_handler):
    return load_handler('login-request')


class TestLoginRequestHandler:

    def test_known_and_unknown_addresses_get_identical_responses(self, handler, api_gateway_event, lambda_context):
        from party_photo_commons.models import PartyMembership
        PartyMembership('smith-wedding', 'member@example.com').save()

        member = handler(api_gateway_event(body={'email': 'member@example.com'}), lambda_context)
        stranger = handler(api_gateway_event(body={'email': 'stranger@example.com'}), lambda_context)

        assert member['statusCode'] == stranger['statusCode'] == 200
        assert member['body'] == stranger['body'] == json.dumps({'message': 'Login link sent'})

    def test_token_is_stored_for_normalized_address(self, handler, aws_services, api_gateway_event, lambda_context):
        handler(api_gateway_event(body={'email': ' Guest@Example.com '}), lambda_context)

        items = aws_services['dynamodb'].scan(TableName='LoginTokens-test')['Items']
        assert len(items) == 1
        assert items[0]['email']['S'] == 'guest@example.com'
        assert int(items[0]['ttl']['N']) > 0

    @pytest.mark.parametrize('body', [{}, {'email': 'nope'}, {'email': ''}])
    def test_invalid_email(self, handler, api_gateway_event, lambda_context, body):
        response = handler(api_gateway_event(body=body), lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Invalid or missing email.'

    def test_missing_sender_configuration(self, handler, api_gateway_event, lambda_context, monkeypatch):
        monkeypatch.delenv('EMAIL_FROM')

        response = handler(api_gateway_event(body={'email': 'guest@example.com'}), lambda_context)

        assert response['statusCode'] == 500
        assert json.loads(response['body'])['message'] == 'Server configuration error'
