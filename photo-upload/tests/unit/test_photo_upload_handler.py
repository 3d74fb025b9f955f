"""
Unit tests for the photo upload Lambda function
"""
import json
import pytest

PARTY = 'smith-wedding'


@pytest.fixture
def handler(aws_services, load_handler):
    return load_handler('photo-upload')


class TestPhotoUploadHandler:

    def test_mixed_batch_is_200(self, handler, api_gateway_event, lambda_context):
        event = api_gateway_event(body={
            'partyName': PARTY,
            'files': [
                {'fileName': 'a.jpg', 'contentType': 'image/jpeg'},
                {'fileName': '', 'contentType': 'image/png'},
            ]
        })

        response = handler(event, lambda_context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert len(body['uploads']) == 1
        assert body['uploads'][0]['fileName'] == 'a.jpg'
        assert set(body['uploads'][0]) == {'fileName', 'photoKey', 'uploadedAt', 'presignedUrl'}
        assert body['errors'][0]['fileName'] == 'unknown'

    def test_uploaded_photo_appears_in_feed(self, handler, load_handler, api_gateway_event, lambda_context):
        upload = handler(api_gateway_event(body={
            'partyName': PARTY,
            'files': [{'fileName': 'cake.jpg', 'contentType': 'image/jpeg'}]
        }), lambda_context)
        photo_key = json.loads(upload['body'])['uploads'][0]['photoKey']

        listing = load_handler('photo-list')(api_gateway_event('GET', query={'partyName': PARTY}), lambda_context)

        assert [p['photoKey'] for p in json.loads(listing['body'])['photos']] == [photo_key]

    @pytest.mark.parametrize('body', [
        {'files': [{'fileName': 'a.jpg', 'contentType': 'image/jpeg'}]},
        {'partyName': PARTY},
        {'partyName': PARTY, 'files': []},
        {},
    ])
    def test_invalid_batch_is_400(self, handler, api_gateway_event, lambda_context, body):
        response = handler(api_gateway_event(body=body), lambda_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['message'] == 'Missing required fields: partyName and files'

    def test_invalid_json_is_400(self, handler, api_gateway_event, lambda_context):
        event = api_gateway_event()
        event['body'] = 'partyName=x'

        response = handler(event, lambda_context)

        assert response['statusCode'] == 400
