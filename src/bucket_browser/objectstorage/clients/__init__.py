"""Connection settings and the lazily created boto3 S3 client."""

from .s3_client import S3ClientConfig, S3ClientManager

__all__ = ["S3ClientConfig", "S3ClientManager"]
