"""
Login Redeem Lambda Function
Exchanges the raw token from a login link for a signed assertion (single use)
"""
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from party_photo_commons.decorators import api_gateway_handler
from party_photo_commons.constants import HTTPConstants
from party_photo_commons.services.service_container import get_service
from party_photo_commons.utils import create_json_response


@api_gateway_handler(function_name='login-redeem')
def lambda_handler(event, context):
    """
    POST /login/redeem  {"token": "<raw token from the email link>"}

    Response: {"assertion": "<jwt>", "expiresIn": <seconds>}
    """
    body = event['parsed_body']

    auth_service = get_service('auth_service')
    result = auth_service.redeem_login_token(body.get('token'))

    return create_json_response(HTTPConstants.OK, result, event)
