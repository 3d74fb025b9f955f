"""
Service container for dependency injection
Handles are built once per Lambda container and reused across invocations
"""
from typing import Dict, Any
import boto3

from ..config import config
from .signed_url_issuer import SignedUrlIssuer
from .photo_service import PhotoService
from .upload_service import BatchUploadService
from .auth_service import AuthService


class ServiceContainer:
    """
    Simple service container for dependency injection
    Provides lazy loading of services to avoid circular imports
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}

    def get_service(self, service_name: str):
        """
        Get service instance with lazy initialization

        Args:
            service_name: Name of the service to retrieve

        Returns:
            Service instance

        Raises:
            ValueError: If service is unknown
        """
        if service_name not in self._services:
            self._services[service_name] = self._create_service(service_name)

        return self._services[service_name]

    def _create_service(self, service_name: str):
        if service_name == 's3_client':
            return boto3.client('s3', region_name=config.aws_region)
        elif service_name == 'url_issuer':
            return SignedUrlIssuer(
                self.get_service('s3_client'),
                config.photo_bucket_name,
                download_expiry=config.download_url_expiry,
                upload_expiry=config.upload_url_expiry
            )
        elif service_name == 'photo_service':
            return PhotoService(self.get_service('url_issuer'), max_workers=config.list_concurrency)
        elif service_name == 'upload_service':
            return BatchUploadService(self.get_service('url_issuer'))
        elif service_name == 'auth_service':
            return AuthService()
        else:
            raise ValueError(f"Unknown service: {service_name}")

    def clear_services(self):
        """Clear all cached services (useful for testing)"""
        self._services.clear()


# Global service container instance
_service_container = ServiceContainer()


def get_service(service_name: str):
    return _service_container.get_service(service_name)


def clear_services():
    """Clear all services (useful for testing)"""
    _service_container.clear_services()
