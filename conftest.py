"""
Pytest configuration and fixtures for the party photo backend tests
Provides moto-backed AWS services, Lambda context/event fixtures and a
loader for the per-function handlers
"""
import importlib.util
import json
import os
import pytest
import boto3
from moto import mock_aws
from unittest.mock import MagicMock


# Set test environment variables before any party_photo_commons import
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'PARAMETER_STORE_ENABLED': 'false',
    'PHOTOS_TABLE_NAME': 'PartyPhotos-test',
    'TOKENS_TABLE_NAME': 'LoginTokens-test',
    'PARTIES_TABLE_NAME': 'Parties-test',
    'PHOTO_BUCKET_NAME': 'party-photos-test',
    'EMAIL_FROM': 'no-reply@party-photos.test',
    'LOGIN_URL_BASE': 'https://party-photos.test/login',
    'JWT_SECRET': 'test-jwt-secret-that-is-long-enough-for-hs256',
})

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))

TEST_BUCKET = os.environ['PHOTO_BUCKET_NAME']
TEST_SENDER = os.environ['EMAIL_FROM']
TEST_PARTY = 'smith-wedding'


def create_test_tables():
    """Create the DynamoDB tables from the record definitions"""
    from party_photo_commons.models import PartyPhoto, LoginToken, PartyMembership

    for model in (PartyPhoto, LoginToken, PartyMembership):
        # Drop any Table handle bound to a previous mock
        model.reset_table()
        model.create_table()


@pytest.fixture
def aws_services():
    """Moto-backed DynamoDB tables, photo bucket and verified SES sender"""
    from party_photo_commons.services.service_container import clear_services

    with mock_aws():
        create_test_tables()

        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket=TEST_BUCKET)

        ses = boto3.client('ses', region_name='us-east-1')
        ses.verify_email_identity(EmailAddress=TEST_SENDER)

        clear_services()
        yield {
            'dynamodb': boto3.client('dynamodb', region_name='us-east-1'),
            's3': s3,
            'ses': ses,
        }
        clear_services()


@pytest.fixture
def url_issuer(aws_services):
    from party_photo_commons.services.signed_url_issuer import SignedUrlIssuer
    return SignedUrlIssuer(aws_services['s3'], TEST_BUCKET)


@pytest.fixture
def seed_photos(aws_services):
    """Insert photo records with strictly increasing keys; returns the keys oldest first"""
    from party_photo_commons.models import PartyPhoto

    def _seed(count, party_key=TEST_PARTY, start_ms=1700000000000):
        keys = []
        for index in range(count):
            photo_key = f"{start_ms + index}_{index:04d}_photo{index}.jpg"
            PartyPhoto(party_key, photo_key, uploaded_at='2024-06-01T12:00:00.000Z').save()
            keys.append(photo_key)
        return keys

    return _seed


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = MagicMock()
    context.function_name = 'test-function'
    context.function_version = '$LATEST'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test-function'
    context.memory_limit_in_mb = 128
    context.remaining_time_in_millis = lambda: 30000
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway proxy events"""
    def _event(method='POST', body=None, query=None, path='/test'):
        return {
            'httpMethod': method,
            'path': path,
            'resource': path,
            'requestContext': {
                'accountId': '123456789012',
                'apiId': 'test-api',
                'stage': 'test',
                'requestId': 'test-request-id',
                'identity': {
                    'sourceIp': '127.0.0.1'
                }
            },
            'headers': {
                'Content-Type': 'application/json'
            },
            'queryStringParameters': query,
            'body': json.dumps(body) if body is not None else None,
            'isBase64Encoded': False
        }

    return _event


def _load_handler(function_dir):
    """Import <function_dir>/app.py under a unique module name"""
    module_name = f"{function_dir.replace('-', '_')}_app"
    spec = importlib.util.spec_from_file_location(module_name, os.path.join(ROOT_DIR, function_dir, 'app.py'))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.lambda_handler


@pytest.fixture
def load_handler():
    return _load_handler
