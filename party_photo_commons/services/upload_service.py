"""
Batch upload service: presigned PUT URLs plus eager metadata records
"""
from typing import Dict, List, Any

from ..constants import ErrorConstants, ValidationConstants
from ..exceptions import ValidationError, PartyPhotoError
from ..validation_utils import generate_photo_key
from ..logger import photo_logger as logger
from ..models.photo import PartyPhoto
from ..utils import utc_now_iso
from .signed_url_issuer import SignedUrlIssuer


class BatchUploadService:
    """
    Prepares uploads for a batch of files.

    Each file is handled on its own: a failure for one file is reported in
    the errors list and never aborts the others. The photo record is written
    when the upload URL is issued, so a record can exist for an object the
    guest never uploaded.
    """

    def __init__(self, url_issuer: SignedUrlIssuer):
        self.url_issuer = url_issuer

    def batch_upload(self, party_key: str, files: Any) -> Dict[str, List[Dict[str, Any]]]:
        """
        Issue upload URLs and create photo records for a batch of files

        Args:
            party_key: Party the photos belong to
            files: List of {'fileName': str, 'contentType': str}

        Returns:
            {'uploads': [{fileName, photoKey, uploadedAt, presignedUrl}],
             'errors': [{fileName, error}]}

        Raises:
            ValidationError: Missing party or empty/non-list files
        """
        if not party_key or not isinstance(files, list) or not files:
            raise ValidationError(ErrorConstants.MISSING_FILES, field='partyName, files')

        logger.log_service_operation("batch_upload", party_key=party_key, file_count=len(files))

        uploads = []
        errors = []

        for file_spec in files:
            try:
                uploads.append(self._prepare_upload(party_key, file_spec))
            except PartyPhotoError as e:
                logger.warning("Error processing file",
                               party_key=party_key,
                               file_name=self._file_name_of(file_spec),
                               error_code=e.error_code,
                               error_message=e.message)
                errors.append({
                    'fileName': self._file_name_of(file_spec),
                    'error': e.message
                })

        logger.info(f"Uploaded {len(uploads)} file(s) for party \"{party_key}\"",
                    party_key=party_key,
                    uploads=len(uploads),
                    errors=len(errors))

        return {'uploads': uploads, 'errors': errors}

    def _prepare_upload(self, party_key: str, file_spec: Any) -> Dict[str, Any]:
        if not isinstance(file_spec, dict):
            raise ValidationError(ErrorConstants.MISSING_FILE_FIELDS)

        file_name = file_spec.get('fileName')
        content_type = file_spec.get('contentType')
        if not file_name or not content_type:
            raise ValidationError(ErrorConstants.MISSING_FILE_FIELDS, field='fileName, contentType')

        photo_key = generate_photo_key(file_name)
        uploaded_at = utc_now_iso()

        presigned_url = self.url_issuer.upload_url(photo_key, content_type)

        PartyPhoto.create_photo(party_key, photo_key, uploaded_at)

        return {
            'fileName': file_name,
            'photoKey': photo_key,
            'uploadedAt': uploaded_at,
            'presignedUrl': presigned_url
        }

    @staticmethod
    def _file_name_of(file_spec: Any) -> str:
        if isinstance(file_spec, dict) and file_spec.get('fileName'):
            return file_spec['fileName']
        return ValidationConstants.UNKNOWN_FILE_NAME
