"""Object storage transport for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import S3ObjectLister, failure_kind

__all__ = [
    "S3ClientConfig",
    "S3ClientManager",
    "S3ObjectLister",
    "failure_kind",
]
