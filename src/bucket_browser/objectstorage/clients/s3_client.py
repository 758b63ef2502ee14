"""S3 client configuration and management.

This module provides S3 client configuration and the lazily created boto3
client shared by the object lister.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Custom endpoints (MinIO, DigitalOcean Spaces, Ceph RGW, ...) are reached
    through endpoint_url and use path-style addressing.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from bucket_browser.core import get_logger
from bucket_browser.core.exceptions import ValidationError

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Connection settings for an S3-compatible object store.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin"
        )
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )

    @property
    def uses_custom_endpoint(self) -> bool:
        return bool(self.endpoint_url) and "amazonaws.com" not in (self.endpoint_url or "")


class S3ClientManager:
    """Owns a lazily created boto3 S3 client."""

    def __init__(self, config: S3ClientConfig):
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {"region_name": self.config.region_name}

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url
        if self.config.uses_custom_endpoint:
            kwargs["config"] = Config(s3={"addressing_style": "path"})

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
            return client

        if self.config.access_key_id and self.config.secret_access_key:
            kwargs["aws_access_key_id"] = self.config.access_key_id
            kwargs["aws_secret_access_key"] = self.config.secret_access_key
            if self.config.session_token:
                kwargs["aws_session_token"] = self.config.session_token
            logger.info("S3 client created with explicit credentials")
        else:
            logger.info("S3 client created with default credential chain")

        return boto3.client("s3", **kwargs)  # type: ignore

    @staticmethod
    def parse_s3_path(s3_path: str) -> tuple[str, str]:
        """Parse S3 path into bucket and key components.

        Args:
            s3_path: S3 path in format s3://bucket/prefix or s3://bucket

        Returns:
            Tuple of (bucket_name, key) with the key's leading slash removed

        Raises:
            ValidationError: If path format is invalid
        """
        if not s3_path.startswith("s3://"):
            raise ValidationError(f"S3 path must start with 's3://': {s3_path}")

        parsed = urlparse(s3_path)
        bucket = parsed.netloc
        key = parsed.path.lstrip("/")

        if not bucket:
            raise ValidationError(f"Invalid S3 path, missing bucket: {s3_path}")

        logger.debug("S3 path parsed", bucket=bucket, key=key)
        return bucket, key
