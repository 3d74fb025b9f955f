"""
Transactional email delivery through Amazon SES
"""
from botocore.exceptions import ClientError, BotoCoreError

from ..constants import EmailConstants
from ..logger import auth_logger as logger
from ..error_handler import error_handler


class SesEmailSender:
    """Sends plain-text mail from a fixed, operator-configured sender address"""

    def __init__(self, ses_client, sender: str):
        self.ses_client = ses_client
        self.sender = sender

    def send_text(self, recipient: str, subject: str, body: str) -> str:
        """
        Send a plain-text email

        Returns:
            SES message id

        Raises:
            EmailDeliveryError: If SES rejects or fails the send
        """
        try:
            response = self.ses_client.send_email(
                Source=self.sender,
                Destination={
                    'ToAddresses': [recipient]
                },
                Message={
                    'Subject': {
                        'Data': subject,
                        'Charset': EmailConstants.CHARSET
                    },
                    'Body': {
                        'Text': {
                            'Data': body,
                            'Charset': EmailConstants.CHARSET
                        }
                    }
                }
            )
        except (ClientError, BotoCoreError) as e:
            logger.log_email_operation('send_email', recipient, success=False, error=str(e))
            raise error_handler.ses_exception(e, recipient)

        message_id = response.get('MessageId')
        logger.log_email_operation('send_email', recipient, success=True, message_id=message_id)
        return message_id

    def send_login_link(self, recipient: str, login_link: str, ttl_seconds: int) -> str:
        body = EmailConstants.LOGIN_BODY.format(
            login_link=login_link,
            minutes=max(1, ttl_seconds // 60)
        )
        return self.send_text(recipient, EmailConstants.LOGIN_SUBJECT, body)
