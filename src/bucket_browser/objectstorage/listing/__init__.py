"""Object storage listing operations."""

from .object_lister import S3ObjectLister, failure_kind

__all__ = ["S3ObjectLister", "failure_kind"]
