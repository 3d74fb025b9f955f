"""
Photo Delete Lambda Function
Soft deletes a photo: the record is flagged and hidden from the feed,
the stored object is left in place
"""
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='photo-delete')
def lambda_handler(event, context):
    body = event['parsed_body']

    photo_service = get_service('photo_service')
    result = photo_service.soft_delete_photo(body.get('partyName'), body.get('photoKey'))

    return create_json_response(HTTPConstants.OK, result, event)
