"""
Photo feed service: paginated listing with signed download URLs and soft delete
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Any, Optional

from ..constants import ErrorConstants
from ..exceptions import ValidationError
from ..validation_utils import parse_page_limit, validate_required_fields
from ..logger import photo_logger as logger
from ..models.photo import PartyPhoto
from .signed_url_issuer import SignedUrlIssuer


class PhotoService:
    """
    Reads a party's photo feed newest first and hands out short-lived
    download URLs for each visible photo
    """

    def __init__(self, url_issuer: SignedUrlIssuer, max_workers: int = 8):
        self.url_issuer = url_issuer
        self.max_workers = max(1, max_workers)

    def list_photos(self, party_key: str, cursor: Optional[str] = None, limit: Any = None) -> Dict[str, Any]:
        """
        List one page of a party's photos

        Args:
            party_key: Party whose photos to list
            cursor: Photo key to start after (exclusive), from a previous page's nextCursor
            limit: Requested page size; clamped to [1, 100], defaults to 20

        Returns:
            {'photos': [...], 'nextCursor': str or None}

        Deleted photos are filtered after the store-side limit, so a page can
        hold fewer than `limit` photos while nextCursor is still set.
        """
        if not party_key:
            raise ValidationError(ErrorConstants.MISSING_PARTY, field='partyName')

        page_size = parse_page_limit(limit)

        logger.log_service_operation(
            "list_photos",
            party_key=party_key,
            limit=page_size,
            has_cursor=bool(cursor)
        )

        records, next_cursor = PartyPhoto.query_page(party_key, page_size, cursor or None)
        visible = [record for record in records if record.is_visible]

        photos = self._annotate_with_urls(visible)

        logger.info("Photo page listed",
                    party_key=party_key,
                    scanned=len(records),
                    returned=len(photos),
                    has_more=next_cursor is not None)

        return {
            'photos': photos,
            'nextCursor': next_cursor
        }

    def _annotate_with_urls(self, records):
        if not records:
            return []

        def annotate(record: PartyPhoto) -> Dict[str, Any]:
            return record.to_dict(url=self.url_issuer.download_url(record.photo_key))

        workers = min(self.max_workers, len(records))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map keeps the store order
            return list(executor.map(annotate, records))

    def soft_delete_photo(self, party_key: str, photo_key: str) -> Dict[str, Any]:
        """
        Hide a photo from the feed without touching the stored object.
        Unknown or already deleted keys are acknowledged the same way.
        """
        missing = validate_required_fields(
            {'partyName': party_key, 'photoKey': photo_key},
            ['partyName', 'photoKey']
        )
        if missing:
            raise ValidationError(ErrorConstants.MISSING_DELETE_FIELDS, field=', '.join(missing))

        logger.log_service_operation("soft_delete_photo", party_key=party_key, photo_key=photo_key)

        PartyPhoto.mark_deleted(party_key, photo_key)

        return {'message': 'Photo soft-deleted successfully'}
