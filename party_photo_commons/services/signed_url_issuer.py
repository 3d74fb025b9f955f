"""
Time-limited S3 URL issuance for photo objects
"""
from typing import Optional
from botocore.exceptions import ClientError, BotoCoreError

from ..constants import UrlDirection, TimeConstants
from ..exceptions import ValidationError
from ..logger import photo_logger as logger
from ..error_handler import error_handler


class SignedUrlIssuer:
    """
    Issues presigned GET/PUT URLs for keys in the photo bucket.
    Never checks that the object exists.
    """

    def __init__(self, s3_client, bucket_name: str,
                 download_expiry: int = TimeConstants.DOWNLOAD_URL_EXPIRY,
                 upload_expiry: int = TimeConstants.UPLOAD_URL_EXPIRY):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.download_expiry = download_expiry
        self.upload_expiry = upload_expiry

    def issue(self, object_key: str, direction: str, ttl_seconds: Optional[int] = None,
              content_type: Optional[str] = None) -> str:
        """
        Sign a URL for one object

        Args:
            object_key: S3 object key
            direction: UrlDirection.UPLOAD or UrlDirection.DOWNLOAD
            ttl_seconds: URL lifetime (defaults to the direction's configured expiry)
            content_type: Required for uploads; the URL only accepts this Content-Type

        Returns:
            Presigned URL

        Raises:
            ValidationError: Unknown direction or missing upload content type
            S3OperationError: If signing fails
        """
        if direction not in UrlDirection.ALL:
            raise ValidationError(f"Unknown URL direction: {direction}", field='direction', value=direction)

        params = {'Bucket': self.bucket_name, 'Key': object_key}

        if direction == UrlDirection.UPLOAD:
            if not content_type:
                raise ValidationError("Upload URLs require a content type", field='contentType')
            client_method = 'put_object'
            params['ContentType'] = content_type
            expires_in = ttl_seconds if ttl_seconds is not None else self.upload_expiry
        else:
            client_method = 'get_object'
            expires_in = ttl_seconds if ttl_seconds is not None else self.download_expiry

        try:
            url = self.s3_client.generate_presigned_url(
                client_method,
                Params=params,
                ExpiresIn=expires_in
            )
        except (ClientError, BotoCoreError) as e:
            logger.log_s3_operation(self.bucket_name, f'presign_{direction}', object_key, success=False, error=str(e))
            raise error_handler.s3_exception(e, f'presign_{direction}', self.bucket_name, object_key)

        logger.log_s3_operation(self.bucket_name, f'presign_{direction}', object_key, expires_in=expires_in)
        return url

    def download_url(self, object_key: str) -> str:
        return self.issue(object_key, UrlDirection.DOWNLOAD)

    def upload_url(self, object_key: str, content_type: str) -> str:
        return self.issue(object_key, UrlDirection.UPLOAD, content_type=content_type)
