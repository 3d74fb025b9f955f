"""
Login Verify Lambda Function
Resolves a signed login assertion to the caller's email and parties
"""
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='login-verify')
def lambda_handler(event, context):
    body = event['parsed_body']

    # Older clients send the assertion under "token"
    assertion = body.get('token') or body.get('assertion')

    auth_service = get_service('auth_service')
    result = auth_service.verify_login(assertion)

    return create_json_response(HTTPConstants.OK, result, event)
