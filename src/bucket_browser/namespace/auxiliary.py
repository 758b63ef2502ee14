"""Per-file follow-up work on a DirectoryView with a bounded worker pool.

Each file is handled independently: one failure is recorded and the
remaining files still run. The view itself is never modified.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar

from bucket_browser.classification import FileTypeClassifier, default_classifier
from bucket_browser.core import get_logger, settings

from .pagination import ObjectEntry
from .projector import DirectoryView, FileNode

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class AuxiliaryResults(Generic[T]):
    """Outcome of a per-file operation, keyed by full storage key."""

    results: dict[str, T] = field(default_factory=dict)
    errors: dict[str, Exception] = field(default_factory=dict)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.errors)


class ObjectInspector(Protocol):
    """Capability to fetch metadata for a single object."""

    def head(self, key: str) -> ObjectEntry:
        ...


def run_per_file(
    files: Iterable[FileNode],
    operation: Callable[[FileNode], T],
    max_workers: Optional[int] = None,
) -> AuxiliaryResults[T]:
    """Run ``operation`` for every file, at most ``max_workers`` at a time.

    Folders are skipped. Exceptions raised by ``operation`` are collected in
    ``errors`` rather than propagated.
    """
    workers = max_workers or settings.auxiliary_workers
    targets = [node for node in files if not node.is_folder]
    outcome: AuxiliaryResults[T] = AuxiliaryResults()
    if not targets:
        return outcome

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(operation, node): node for node in targets}
        for future in as_completed(futures):
            node = futures[future]
            try:
                outcome.results[node.full_key] = future.result()
            except Exception as e:
                logger.warning(
                    "Per-file operation failed", key=node.full_key, error=str(e)
                )
                outcome.errors[node.full_key] = e

    logger.info(
        "Per-file operations completed",
        file_count=len(targets),
        succeeded=outcome.succeeded,
        failed=outcome.failed,
        max_workers=workers,
    )
    return outcome


def resolve_content_types(
    view: DirectoryView,
    inspector: ObjectInspector,
    classifier: Optional[FileTypeClassifier] = None,
    max_workers: Optional[int] = None,
) -> tuple[DirectoryView, AuxiliaryResults[Optional[str]]]:
    """Fetch stored content types and re-classify the files of ``view``.

    Files whose lookup fails keep their original type. Returns a new view
    together with the raw lookup results.
    """
    classifier = classifier or default_classifier
    lookups = run_per_file(
        view.files,
        lambda node: inspector.head(node.full_key).stored_content_type,
        max_workers=max_workers,
    )

    files = []
    for node in view.files:
        content_type = lookups.results.get(node.full_key)
        if content_type:
            node = replace(node, type_info=classifier.classify(node.name, content_type))
        files.append(node)

    return replace(view, files=tuple(files)), lookups
