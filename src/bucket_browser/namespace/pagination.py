"""Paginated listing of a single storage prefix.

The cursor drives an injected ObjectLister until the listing is exhausted
and merges every page into one result. It never retries; any failure
aborts the whole listing so no partial result escapes.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from bucket_browser.core import get_logger, settings
from bucket_browser.core.exceptions import (
    BucketBrowserError,
    FailureKind,
    InconsistentListingError,
    ListingCancelledError,
    ListingFailedError,
    TooManyPagesError,
)

logger = get_logger(__name__)

DELIMITER = "/"


@dataclass(frozen=True)
class ObjectEntry:
    """A single object as reported by the lister.

    Attributes:
        key: Full storage key; ends with "/" only for folder marker objects
        size: Size in bytes
        last_modified: Last modification time
        etag: Entity tag without surrounding quotes
        stored_content_type: Content-Type stored with the object, if known
    """

    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    stored_content_type: Optional[str] = None


@dataclass(frozen=True)
class ListPage:
    """One raw page returned by the lister."""

    entries: tuple[ObjectEntry, ...] = ()
    common_prefixes: tuple[str, ...] = ()
    is_truncated: bool = False
    continuation_token: Optional[str] = None


class ObjectLister(Protocol):
    """Capability to list one page of a prefix with delimiter semantics."""

    def list_page(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: Optional[str] = None,
    ) -> ListPage:
        """Return one page; the final page has is_truncated False and no token."""
        ...


class CancellationToken:
    """Thread-safe, one-way cancellation signal."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class ListingResult:
    """Merged output of every page of one prefix listing."""

    prefix: str
    entries: tuple[ObjectEntry, ...] = ()
    common_prefixes: tuple[str, ...] = ()
    page_count: int = 0


@dataclass
class PaginationCursor:
    """Lists one prefix page by page and merges the pages.

    A cursor is single-use: create one per listing request.
    """

    lister: ObjectLister
    prefix: str
    max_keys: int = field(default_factory=lambda: settings.page_size)
    max_pages: int = field(default_factory=lambda: settings.max_pages)
    cancellation: Optional[CancellationToken] = None
    delimiter: str = DELIMITER

    def run(self) -> ListingResult:
        """Fetch every page and return the merged listing.

        Raises:
            ListingFailedError: If the lister fails
            InconsistentListingError: If a key is returned twice or a
                truncated page carries no continuation token
            TooManyPagesError: If more than ``max_pages`` pages are needed
            ListingCancelledError: If cancelled before the listing finished
        """
        entries: list[ObjectEntry] = []
        seen_keys: set[str] = set()
        common_prefixes: dict[str, None] = {}
        token: Optional[str] = None
        page_count = 0

        while True:
            if self.cancellation is not None and self.cancellation.cancelled:
                logger.info("Listing cancelled", prefix=self.prefix, page_count=page_count)
                raise ListingCancelledError(
                    f"Listing of '{self.prefix}' cancelled after {page_count} pages"
                )
            if page_count >= self.max_pages:
                logger.error(
                    "Pagination ceiling exceeded", prefix=self.prefix, max_pages=self.max_pages
                )
                raise TooManyPagesError(
                    f"Listing of '{self.prefix}' needed more than {self.max_pages} pages",
                    max_pages=self.max_pages,
                )

            page = self._fetch(token)
            page_count += 1

            for entry in page.entries:
                if entry.key in seen_keys:
                    logger.error(
                        "Duplicate key across pages", prefix=self.prefix, key=entry.key
                    )
                    raise InconsistentListingError(
                        f"Key '{entry.key}' returned twice while listing '{self.prefix}'"
                    )
                seen_keys.add(entry.key)
                entries.append(entry)

            # Prefixes may legitimately repeat across pages; keep first-seen order
            for common_prefix in page.common_prefixes:
                common_prefixes.setdefault(common_prefix, None)

            logger.debug(
                "Listing page merged",
                prefix=self.prefix,
                page=page_count,
                entry_count=len(page.entries),
                prefix_count=len(page.common_prefixes),
                is_truncated=page.is_truncated,
            )

            if not page.is_truncated:
                break
            if not page.continuation_token:
                raise InconsistentListingError(
                    f"Truncated page {page_count} for '{self.prefix}' has no continuation token"
                )
            token = page.continuation_token

        return ListingResult(
            prefix=self.prefix,
            entries=tuple(entries),
            common_prefixes=tuple(common_prefixes),
            page_count=page_count,
        )

    def _fetch(self, token: Optional[str]) -> ListPage:
        try:
            return self.lister.list_page(
                self.prefix, self.delimiter, self.max_keys, continuation_token=token
            )
        except BucketBrowserError:
            raise
        except Exception as e:
            error_msg = f"Failed to list prefix '{self.prefix}': {e}"
            logger.error(error_msg, error=str(e))
            raise ListingFailedError(error_msg, kind=FailureKind.unknown, cause=e) from e
