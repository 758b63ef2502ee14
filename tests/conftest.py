"""Test configuration and fixtures for bucket-browser."""

from datetime import datetime, timezone
from typing import Optional

import pytest

from bucket_browser.namespace import ListPage, ObjectEntry


class ScriptedLister:
    """Object lister that replays a fixed sequence of pages.

    Pages are served in order regardless of the token passed in; every call
    is recorded so tests can assert on the requests made.
    """

    def __init__(self, pages: list[ListPage]):
        self.pages = list(pages)
        self.calls: list[dict] = []

    def list_page(
        self,
        prefix: str,
        delimiter: str,
        max_keys: int,
        continuation_token: Optional[str] = None,
    ) -> ListPage:
        self.calls.append(
            {
                "prefix": prefix,
                "delimiter": delimiter,
                "max_keys": max_keys,
                "continuation_token": continuation_token,
            }
        )
        return self.pages[len(self.calls) - 1]


def entry(key: str, size: Optional[int] = None, day: Optional[int] = None, **kwargs) -> ObjectEntry:
    """Build an ObjectEntry with an optional day-of-month timestamp."""
    last_modified = datetime(2024, 1, day, tzinfo=timezone.utc) if day else None
    return ObjectEntry(key=key, size=size, last_modified=last_modified, **kwargs)


def page(
    keys=(),
    prefixes=(),
    token: Optional[str] = None,
) -> ListPage:
    """Build a ListPage; a token marks the page as truncated."""
    return ListPage(
        entries=tuple(k if isinstance(k, ObjectEntry) else entry(k) for k in keys),
        common_prefixes=tuple(prefixes),
        is_truncated=token is not None,
        continuation_token=token,
    )


@pytest.fixture
def scripted_lister():
    """Factory for ScriptedLister instances."""
    return ScriptedLister
