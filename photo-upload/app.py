"""
Photo Upload Lambda Function
Issues presigned PUT URLs for a batch of files and records their metadata
"""
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='photo-upload')
def lambda_handler(event, context):
    """
    POST /upload-url  {"partyName": str, "files": [{"fileName": str, "contentType": str}]}

    Always 200 once the batch itself is valid; per-file failures are listed
    under "errors".
    """
    body = event['parsed_body']

    upload_service = get_service('upload_service')
    result = upload_service.batch_upload(body.get('partyName'), body.get('files'))

    return create_json_response(HTTPConstants.OK, result, event)
