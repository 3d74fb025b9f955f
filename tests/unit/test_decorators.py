"""
Unit tests for the API Gateway handler decorator and response helpers
"""
import json

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.exceptions import (
    ValidationError, UnauthorizedError, ConfigurationError, DynamoDBError
)
from party_photo_commons.utils import parse_request_body, parse_query_params, utc_now_iso


def handler_raising(error):
    @api_gateway_handler(function_name='test-function')
    def handler(event, context):
        raise error
    return handler


class TestApiGatewayHandler:

    def test_options_preflight(self, api_gateway_event, lambda_context):
        @api_gateway_handler()
        def handler(event, context):
            raise AssertionError('handler must not run for preflight')

        response = handler(api_gateway_event(method='OPTIONS'), lambda_context)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'message': 'CORS preflight success'}
        assert response['headers']['Access-Control-Allow-Origin'] == '*'

    def test_parsed_body_and_query_params(self, api_gateway_event, lambda_context):
        seen = {}

        @api_gateway_handler()
        def handler(event, context):
            seen['body'] = event['parsed_body']
            seen['query'] = event['query_params']
            return {'statusCode': 200, 'body': '{}'}

        handler(api_gateway_event(body={'email': 'a@b.co'}, query={'limit': '5'}), lambda_context)

        assert seen == {'body': {'email': 'a@b.co'}, 'query': {'limit': '5'}}

    def test_invalid_json_is_400(self, api_gateway_event, lambda_context):
        @api_gateway_handler()
        def handler(event, context):
            return {'statusCode': 200, 'body': '{}'}

        event = api_gateway_event()
        event['body'] = '{not json'

        response = handler(event, lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Invalid JSON in request body'

    def test_validation_error_is_400_with_details(self, api_gateway_event, lambda_context):
        response = handler_raising(ValidationError('Missing partyName', field='partyName'))(
            api_gateway_event(), lambda_context
        )

        body = json.loads(response['body'])
        assert response['statusCode'] == 400
        assert body['success'] is False
        assert body['message'] == 'Missing partyName'
        assert body['field'] == 'partyName'

    def test_unauthorized_is_401(self, api_gateway_event, lambda_context):
        response = handler_raising(UnauthorizedError())(api_gateway_event(), lambda_context)

        assert response['statusCode'] == 401
        assert json.loads(response['body'])['message'] == 'Invalid or expired token'

    def test_configuration_error_is_500(self, api_gateway_event, lambda_context):
        response = handler_raising(ConfigurationError('Missing required configuration: jwt-secret', 'jwt-secret'))(
            api_gateway_event(), lambda_context
        )

        body = json.loads(response['body'])
        assert response['statusCode'] == 500
        assert body['message'] == 'Server configuration error'
        assert 'jwt-secret' not in response['body']

    def test_infrastructure_error_keeps_status_and_retryable(self, api_gateway_event, lambda_context):
        error = DynamoDBError('Database is temporarily busy', operation='query_photos', retryable=True, status_code=503)

        response = handler_raising(error)(api_gateway_event(), lambda_context)

        body = json.loads(response['body'])
        assert response['statusCode'] == 503
        assert body['message'] == 'Internal server error'
        assert body['retryable'] is True

    def test_unexpected_error_is_generic_500(self, api_gateway_event, lambda_context):
        response = handler_raising(KeyError('boom'))(api_gateway_event(), lambda_context)

        assert response['statusCode'] == 500
        assert json.loads(response['body'])['message'] == 'Internal server error'


class TestRequestParsing:

    def test_direct_invocation_payload_is_the_event(self):
        event = {'partyName': 'p', 'photoKey': 'k'}

        body = parse_request_body(event)

        assert body == event
        assert body is not event
        assert parse_query_params(event) == event

    def test_empty_body(self):
        assert parse_request_body({'httpMethod': 'POST', 'body': None}) == {}
        assert parse_request_body({'httpMethod': 'POST', 'body': ''}) == {}

    def test_missing_query_string(self):
        assert parse_query_params({'httpMethod': 'GET', 'queryStringParameters': None}) == {}

    def test_timestamp_format(self):
        timestamp = utc_now_iso()

        assert timestamp.endswith('Z')
        assert len(timestamp) == len('2024-06-01T12:00:00.000Z')
