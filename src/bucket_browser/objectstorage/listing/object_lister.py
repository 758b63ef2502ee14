"""S3-backed object lister for delimiter-based prefix listings."""

from typing import Any, Optional

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ReadTimeoutError,
)

from bucket_browser.core import get_logger
from bucket_browser.core.exceptions import FailureKind, ListingFailedError
from bucket_browser.namespace.pagination import ListPage, ObjectEntry
from bucket_browser.objectstorage.clients import S3ClientConfig, S3ClientManager

logger = get_logger(__name__)

_ERROR_CODES = {
    "AccessDenied": FailureKind.permission_denied,
    "AllAccessDisabled": FailureKind.permission_denied,
    "InvalidAccessKeyId": FailureKind.invalid_credentials,
    "SignatureDoesNotMatch": FailureKind.invalid_credentials,
    "ExpiredToken": FailureKind.invalid_credentials,
    "NoSuchBucket": FailureKind.bucket_not_found,
    "NoSuchKey": FailureKind.object_not_found,
    "404": FailureKind.object_not_found,
    "403": FailureKind.permission_denied,
}


def failure_kind(error: BaseException) -> FailureKind:
    """Classify a boto3/botocore exception."""
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code", "")
        return _ERROR_CODES.get(code, FailureKind.unknown)
    if isinstance(error, (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)):
        return FailureKind.network_error
    if isinstance(error, NoCredentialsError):
        return FailureKind.invalid_credentials
    if isinstance(error, BotoCoreError):
        return FailureKind.configuration_error
    return FailureKind.unknown


def _strip_etag(etag: Optional[str]) -> Optional[str]:
    return etag.strip('"') if etag else etag


def _to_entry(obj: dict[str, Any]) -> ObjectEntry:
    return ObjectEntry(
        key=obj["Key"],
        size=obj.get("Size"),
        last_modified=obj.get("LastModified"),
        etag=_strip_etag(obj.get("ETag")),
    )


class S3ObjectLister:
    """Lists one page of an S3 bucket per call."""

    def __init__(self, config: S3ClientConfig, bucket: str):
        """Initialize S3 object lister.

        Args:
            config: S3 client configuration
            bucket: Bucket to list
        """
        self.client_manager = S3ClientManager(config)
        self.bucket = bucket
        logger.info("S3 object lister initialized", bucket=bucket)

    def list_page(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: Optional[str] = None,
    ) -> ListPage:
        """Fetch one ``list_objects_v2`` page.

        Raises:
            ListingFailedError: If the S3 call fails
        """
        request: dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": prefix,
            "Delimiter": delimiter,
            "MaxKeys": max_keys,
        }
        if continuation_token:
            request["ContinuationToken"] = continuation_token

        try:
            response = self.client_manager.client.list_objects_v2(**request)
        except (ClientError, BotoCoreError) as e:
            kind = failure_kind(e)
            error_msg = f"Failed to list s3://{self.bucket}/{prefix}: {e}"
            logger.error(error_msg, error=str(e), kind=kind.value)
            raise ListingFailedError(error_msg, kind=kind, cause=e) from e

        is_truncated = bool(response.get("IsTruncated", False))
        return ListPage(
            entries=tuple(_to_entry(obj) for obj in response.get("Contents", [])),
            common_prefixes=tuple(
                cp["Prefix"] for cp in response.get("CommonPrefixes", []) if cp.get("Prefix")
            ),
            is_truncated=is_truncated,
            continuation_token=response.get("NextContinuationToken") if is_truncated else None,
        )

    def head(self, key: str) -> ObjectEntry:
        """Fetch metadata, including the stored content type, for one object.

        Raises:
            ListingFailedError: If the S3 call fails
        """
        try:
            response = self.client_manager.client.head_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            kind = failure_kind(e)
            error_msg = f"Failed to read metadata for s3://{self.bucket}/{key}: {e}"
            logger.warning(error_msg, error=str(e), kind=kind.value)
            raise ListingFailedError(error_msg, kind=kind, cause=e) from e

        return ObjectEntry(
            key=key,
            size=response.get("ContentLength"),
            last_modified=response.get("LastModified"),
            etag=_strip_etag(response.get("ETag")),
            stored_content_type=response.get("ContentType"),
        )
