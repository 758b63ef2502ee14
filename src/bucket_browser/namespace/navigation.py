"""Last-request-wins bookkeeping for overlapping navigations."""

import threading
from dataclasses import dataclass
from typing import Optional

from bucket_browser.core import get_logger
from bucket_browser.core.exceptions import ListingCancelledError

from .pagination import CancellationToken
from .paths import VirtualPath
from .projector import DirectoryView, NamespaceProjector

logger = get_logger(__name__)


@dataclass(frozen=True)
class NavigationTicket:
    """Identity of one navigation request."""

    generation: int
    cancellation: CancellationToken


class NavigationTracker:
    """Hands out monotonically increasing generations.

    Starting a navigation cancels the token of the one before it, so an
    in-flight listing stops requesting pages once it has been superseded.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._current: Optional[NavigationTicket] = None

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def begin(self) -> NavigationTicket:
        with self._lock:
            self._generation += 1
            previous = self._current
            ticket = NavigationTicket(self._generation, CancellationToken())
            self._current = ticket
        if previous is not None:
            previous.cancellation.cancel()
        return ticket

    def is_current(self, ticket: NavigationTicket) -> bool:
        with self._lock:
            return ticket.generation == self._generation

    def accept(
        self, ticket: NavigationTicket, view: DirectoryView
    ) -> Optional[DirectoryView]:
        """Return ``view`` if ``ticket`` is still the latest request, else None."""
        if self.is_current(ticket):
            return view
        logger.warning(
            "Discarding stale directory view",
            generation=ticket.generation,
            path=str(view.path),
        )
        return None


def navigate(
    tracker: NavigationTracker,
    projector: NamespaceProjector,
    path: VirtualPath,
) -> Optional[DirectoryView]:
    """Load ``path`` as the newest navigation.

    Returns:
        The view, or None if a newer navigation superseded this one
    """
    ticket = tracker.begin()
    try:
        view = projector.get_directory_view(path, cancellation=ticket.cancellation)
    except ListingCancelledError:
        logger.info("Navigation superseded", generation=ticket.generation, path=str(path))
        return None
    return tracker.accept(ticket, view)
