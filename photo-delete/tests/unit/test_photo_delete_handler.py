"""
Unit tests for the photo delete Lambda function
"""
import json
import pytest

PARTY = 'smith-wedding'


@pytest.fixture
def handler(aws_services, load_handler):
    return load_handler('photo-delete')


class TestPhotoDeleteHandler:

    def test_soft_deleted_photo_leaves_feed(self, handler, load_handler, seed_photos, api_gateway_event, lambda_context):
        keys = seed_photos(2)

        response = handler(api_gateway_event(body={'partyName': PARTY, 'photoKey': keys[0]}), lambda_context)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'message': 'Photo soft-deleted successfully'}

        listing = load_handler('photo-list')(api_gateway_event('GET', query={'partyName': PARTY}), lambda_context)
        assert [p['photoKey'] for p in json.loads(listing['body'])['photos']] == [keys[1]]

    def test_object_is_not_removed_from_bucket(self, handler, seed_photos, aws_services, api_gateway_event, lambda_context):
        keys = seed_photos(1)
        aws_services['s3'].put_object(Bucket='party-photos-test', Key=keys[0], Body=b'jpeg-bytes')

        handler(api_gateway_event(body={'partyName': PARTY, 'photoKey': keys[0]}), lambda_context)

        assert aws_services['s3'].get_object(Bucket='party-photos-test', Key=keys[0])['Body'].read() == b'jpeg-bytes'

    def test_unknown_photo_is_acknowledged(self, handler, api_gateway_event, lambda_context):
        response = handler(api_gateway_event(body={'partyName': PARTY, 'photoKey': 'missing.jpg'}), lambda_context)

        assert response['statusCode'] == 200

    def test_direct_invocation(self, handler, seed_photos, lambda_context):
        keys = seed_photos(1)

        response = handler({'partyName': PARTY, 'photoKey': keys[0]}, lambda_context)

        assert response['statusCode'] == 200

    @pytest.mark.parametrize('body', [{'partyName': PARTY}, {'photoKey': 'k.jpg'}, {}])
    def test_missing_fields(self, handler, api_gateway_event, lambda_context, body):
        response = handler(api_gateway_event(body=body), lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Missing partyName or photoKey in request body'
