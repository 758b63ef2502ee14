"""Exception hierarchy for bucket-browser."""

from enum import Enum
from typing import Optional


class BucketBrowserError(Exception):
    """Base exception for all bucket-browser errors."""

    pass


class ValidationError(BucketBrowserError):
    """Raised when validation fails."""

    pass


class InvalidPathError(ValidationError):
    """Raised when a navigation target or storage prefix is malformed."""

    pass


class ListingError(BucketBrowserError):
    """Base class for failures while listing a prefix."""

    pass


class FailureKind(str, Enum):
    """Broad classification of object lister transport failures."""

    invalid_credentials = "invalid_credentials"
    bucket_not_found = "bucket_not_found"
    object_not_found = "object_not_found"
    permission_denied = "permission_denied"
    network_error = "network_error"
    configuration_error = "configuration_error"
    unknown = "unknown"


class ListingFailedError(ListingError):
    """Raised when the object lister itself reports a failure.

    The original exception is kept on ``cause`` and chained as
    ``__cause__``; it is never reinterpreted.
    """

    def __init__(
        self,
        message: str,
        kind: FailureKind = FailureKind.unknown,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.cause = cause


class InconsistentListingError(ListingError):
    """Raised when pagination returns a key twice or breaks the page contract."""

    pass


class TooManyPagesError(ListingError):
    """Raised when pagination exceeds the configured page ceiling."""

    def __init__(self, message: str, max_pages: int):
        super().__init__(message)
        self.max_pages = max_pages


class ListingCancelledError(ListingError):
    """Raised when a listing is cancelled before it completes."""

    pass
