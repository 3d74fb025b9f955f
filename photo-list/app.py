"""
Photo List Lambda Function
Returns one page of a party's photo feed with short-lived download URLs
"""
import os
import sys

# Make the commons package importable when deployed without the layer
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='photo-list')
def lambda_handler(event, context):
    """
    GET /photos?partyName=<party>&startAfterKey=<cursor>&limit=<n>

    Response: {"photos": [{photoKey, partyName, uploadedAt, url}], "nextCursor": str|null}
    """
    params = event['query_params']

    photo_service = get_service('photo_service')
    result = photo_service.list_photos(
        params.get('partyName'),
        cursor=params.get('startAfterKey'),
        limit=params.get('limit')
    )

    return create_json_response(HTTPConstants.OK, result, event)
