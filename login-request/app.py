"""
Login Request Lambda Function
Emails a magic login link; the answer never reveals whether the address is known
"""
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='login-request')
def lambda_handler(event, context):
    body = event['parsed_body']

    auth_service = get_service('auth_service')
    result = auth_service.request_login(body.get('email'))

    return create_json_response(HTTPConstants.OK, result, event)
