"""Tests for the S3 object lister."""

import boto3
import pytest
from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
    ParamValidationError,
)
from moto import mock_aws

from bucket_browser.core.exceptions import FailureKind, ListingFailedError, ValidationError
from bucket_browser.namespace import (
    NamespaceProjector,
    PaginationCursor,
    VirtualPath,
    resolve_content_types,
)
from bucket_browser.objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    S3ObjectLister,
    failure_kind,
)


def make_config():
    return S3ClientConfig(
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )


@mock_aws
class TestS3ObjectLister:
    """Test S3ObjectLister against mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        self.s3_client.create_bucket(Bucket="test-bucket")

        self.s3_client.put_object(Bucket="test-bucket", Key="readme.md", Body=b"# hi")
        self.s3_client.put_object(
            Bucket="test-bucket", Key="data/file1.txt", Body=b"content1"
        )
        self.s3_client.put_object(
            Bucket="test-bucket", Key="data/file2.txt", Body=b"content2content2"
        )
        self.s3_client.put_object(
            Bucket="test-bucket",
            Key="data/upload-77",
            Body=b"\x89PNG",
            ContentType="image/png",
        )
        self.s3_client.put_object(
            Bucket="test-bucket", Key="data/subdir/file3.txt", Body=b"content3"
        )
        self.s3_client.put_object(Bucket="test-bucket", Key="data/empty/", Body=b"")

    def test_list_page_with_delimiter(self):
        """Test a single page splits into objects and common prefixes."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        result = lister.list_page("data/", "/", 1000)

        assert {e.key for e in result.entries} == {
            "data/file1.txt",
            "data/file2.txt",
            "data/upload-77",
        }
        assert set(result.common_prefixes) == {"data/subdir/", "data/empty/"}
        assert not result.is_truncated
        assert result.continuation_token is None

    def test_entry_metadata(self):
        """Test sizes, timestamps and etags are carried over."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        entries = {e.key: e for e in lister.list_page("data/", "/", 1000).entries}

        assert entries["data/file2.txt"].size == 16
        assert entries["data/file2.txt"].last_modified is not None
        assert not entries["data/file2.txt"].etag.startswith('"')

    def test_pagination_with_small_pages(self):
        """Test the cursor follows continuation tokens to the end."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        result = PaginationCursor(lister=lister, prefix="data/", max_keys=1).run()

        assert result.page_count > 1
        assert len(result.entries) == 3
        assert set(result.common_prefixes) == {"data/subdir/", "data/empty/"}

    def test_directory_view(self):
        """Test a full directory view built from S3."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        view = NamespaceProjector(lister, root_label="test-bucket", page_size=2).get_directory_view(
            VirtualPath.parse("/data/")
        )

        assert sorted(f.name for f in view.folders) == ["empty", "subdir"]
        assert sorted(f.name for f in view.files) == ["file1.txt", "file2.txt", "upload-77"]
        assert [c.name for c in view.breadcrumbs] == ["test-bucket", "data"]

    def test_root_view(self):
        """Test listing the bucket root."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        view = NamespaceProjector(lister).get_directory_view(VirtualPath.root())

        assert [f.name for f in view.folders] == ["data"]
        assert [f.name for f in view.files] == ["readme.md"]

    def test_head_returns_content_type(self):
        """Test head reports the stored content type."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        result = lister.head("data/upload-77")

        assert result.stored_content_type == "image/png"
        assert result.size == 4

    def test_resolve_content_types(self):
        """Test stored content types re-classify extension-less files."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        view = NamespaceProjector(lister).get_directory_view(VirtualPath.parse("/data/"))
        before = {f.name: f for f in view.files}
        assert before["upload-77"].type_info.category == "Unknown"

        resolved, lookups = resolve_content_types(view, lister, max_workers=2)
        after = {f.name: f for f in resolved.files}

        assert after["upload-77"].type_info.category == "Image"
        assert lookups.failed == 0

    def test_head_missing_object(self):
        """Test head on a missing key reports object_not_found."""
        lister = S3ObjectLister(make_config(), "test-bucket")
        with pytest.raises(ListingFailedError) as exc_info:
            lister.head("data/nope.txt")
        assert exc_info.value.kind is FailureKind.object_not_found

    def test_missing_bucket(self):
        """Test listing a missing bucket reports bucket_not_found."""
        lister = S3ObjectLister(make_config(), "no-such-bucket")
        with pytest.raises(ListingFailedError) as exc_info:
            NamespaceProjector(lister).get_directory_view(VirtualPath.root())

        assert exc_info.value.kind is FailureKind.bucket_not_found
        assert isinstance(exc_info.value.cause, ClientError)


class TestFailureKind:
    """Test mapping of botocore errors."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("AccessDenied", FailureKind.permission_denied),
            ("InvalidAccessKeyId", FailureKind.invalid_credentials),
            ("SignatureDoesNotMatch", FailureKind.invalid_credentials),
            ("NoSuchBucket", FailureKind.bucket_not_found),
            ("SlowDown", FailureKind.unknown),
        ],
    )
    def test_client_error_codes(self, code, expected):
        """Test S3 error codes map to failure kinds."""
        error = ClientError({"Error": {"Code": code, "Message": "x"}}, "ListObjectsV2")
        assert failure_kind(error) is expected

    def test_network_error(self):
        """Test connection failures are network errors."""
        error = EndpointConnectionError(endpoint_url="http://localhost:9000")
        assert failure_kind(error) is FailureKind.network_error

    def test_missing_credentials(self):
        """Test missing credentials are credential errors."""
        assert failure_kind(NoCredentialsError()) is FailureKind.invalid_credentials

    def test_other_botocore_error(self):
        """Test remaining botocore errors are configuration errors."""
        error = ParamValidationError(report="bad bucket")
        assert failure_kind(error) is FailureKind.configuration_error

    def test_unrelated_error(self):
        """Test non-botocore exceptions are unknown."""
        assert failure_kind(ValueError("x")) is FailureKind.unknown


class TestS3ClientManager:
    """Test S3 client configuration helpers."""

    def test_parse_s3_path(self):
        """Test bucket and key are split from an S3 URL."""
        assert S3ClientManager.parse_s3_path("s3://bucket/a/b/") == ("bucket", "a/b/")
        assert S3ClientManager.parse_s3_path("s3://bucket") == ("bucket", "")

    @pytest.mark.parametrize("path", ["bucket/key", "s3://", "http://bucket/key"])
    def test_parse_s3_path_invalid(self, path):
        """Test malformed S3 URLs are rejected."""
        with pytest.raises(ValidationError):
            S3ClientManager.parse_s3_path(path)

    def test_custom_endpoint(self):
        """Test non-AWS endpoints are detected."""
        assert S3ClientConfig(endpoint_url="http://localhost:9000").uses_custom_endpoint
        assert not S3ClientConfig(
            endpoint_url="https://s3.us-west-2.amazonaws.com"
        ).uses_custom_endpoint
        assert not S3ClientConfig().uses_custom_endpoint

    def test_config_rejects_unknown_fields(self):
        """Test unknown configuration keys are rejected."""
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            S3ClientConfig(bucket="oops")

    def test_client_created_lazily(self):
        """Test the boto3 client is only built on first use."""
        manager = S3ClientManager(make_config())
        assert manager._client is None
        client = manager.client
        assert manager.client is client
