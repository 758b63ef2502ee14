"""Shared CLI parameter definitions.

S3 connection options are declared once here as ``Annotated`` aliases so
every command that talks to a bucket exposes them with the same flags and
help text.
"""

from typing import Annotated, Optional

import typer

from .objectstorage import S3ClientConfig

AccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", envvar="AWS_ACCESS_KEY_ID", help="AWS access key ID"),
]

SecretKeyOption = Annotated[
    Optional[str],
    typer.Option(
        "--secret-access-key",
        envvar="AWS_SECRET_ACCESS_KEY",
        help="AWS secret access key",
    ),
]

SessionTokenOption = Annotated[
    Optional[str],
    typer.Option("--session-token", envvar="AWS_SESSION_TOKEN", help="AWS session token"),
]

RegionOption = Annotated[str, typer.Option("--region", help="AWS region name")]

EndpointUrlOption = Annotated[
    Optional[str],
    typer.Option(
        "--endpoint-url", help="Custom S3 endpoint URL (MinIO, Spaces, ...)"
    ),
]

ProfileOption = Annotated[
    Optional[str], typer.Option("--aws-profile", help="AWS CLI profile name")
]


def build_client_config(
    access_key_id: Optional[str],
    secret_access_key: Optional[str],
    session_token: Optional[str],
    region_name: str,
    endpoint_url: Optional[str],
    aws_profile: Optional[str],
) -> S3ClientConfig:
    """Create the S3 client configuration from CLI option values."""
    return S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        region_name=region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )
