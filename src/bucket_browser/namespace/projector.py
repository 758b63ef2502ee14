"""Project a delimiter listing onto a virtual directory view."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from bucket_browser.classification import FileTypeClassifier, TypeInfo, default_classifier
from bucket_browser.core import get_logger, get_tracer, settings, traced
from bucket_browser.core.exceptions import ValidationError

from .pagination import CancellationToken, ListingResult, ObjectLister, PaginationCursor
from .paths import SEPARATOR, Breadcrumb, VirtualPath, breadcrumbs, to_storage_prefix

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class FileNode:
    """A folder or file at one level of the virtual tree.

    Attributes:
        name: Segment shown to the user
        full_key: Storage key; folders carry a trailing "/"
        is_folder: True for folders derived from common prefixes
        size: Object size in bytes (files only)
        last_modified: Last modification time (files only)
        type_info: Classification result; always None for folders
    """

    name: str
    full_key: str
    is_folder: bool
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    type_info: Optional[TypeInfo] = None

    def __post_init__(self) -> None:
        if self.is_folder and self.type_info is not None:
            raise ValidationError(f"Folder '{self.name}' cannot carry type information")

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(frozen=True)
class DirectoryView:
    """Unsorted contents of one virtual directory, created per navigation."""

    path: VirtualPath
    folders: tuple[FileNode, ...] = ()
    files: tuple[FileNode, ...] = ()
    breadcrumbs: tuple[Breadcrumb, ...] = ()

    @property
    def prefix(self) -> str:
        return to_storage_prefix(self.path)

    @property
    def nodes(self) -> tuple[FileNode, ...]:
        return self.folders + self.files


def _relative_name(prefix: str, value: str) -> Optional[str]:
    """Strip ``prefix`` from ``value``; None if ``value`` is outside it."""
    if not value.startswith(prefix):
        return None
    return value[len(prefix) :]


def project_listing(
    path: VirtualPath,
    listing: ListingResult,
    classifier: FileTypeClassifier = default_classifier,
    root_label: str = "Root",
    show_hidden: bool = True,
) -> DirectoryView:
    """Build the view of ``path`` from an already merged listing."""
    prefix = to_storage_prefix(path)

    folders: dict[str, FileNode] = {}
    for common_prefix in listing.common_prefixes:
        remainder = _relative_name(prefix, common_prefix)
        if remainder is None:
            continue
        name = remainder.split(SEPARATOR, 1)[0]
        if not name or name in folders:
            continue
        folders[name] = FileNode(name=name, full_key=prefix + name + SEPARATOR, is_folder=True)

    files: list[FileNode] = []
    for entry in listing.entries:
        if entry.key.endswith(SEPARATOR) and entry.key[len(prefix) : -1] in folders:
            # Marker object for a folder that is already shown
            continue
        remainder = _relative_name(prefix, entry.key)
        if not remainder or SEPARATOR in remainder:
            # Marker for this folder itself, or an object at a deeper level
            continue
        files.append(
            FileNode(
                name=remainder,
                full_key=entry.key,
                is_folder=False,
                size=entry.size,
                last_modified=entry.last_modified,
                type_info=classifier.classify(remainder, entry.stored_content_type),
            )
        )

    folder_nodes = tuple(folders.values())
    file_nodes = tuple(files)
    if not show_hidden:
        folder_nodes = tuple(node for node in folder_nodes if not node.is_hidden)
        file_nodes = tuple(node for node in file_nodes if not node.is_hidden)

    return DirectoryView(
        path=path,
        folders=folder_nodes,
        files=file_nodes,
        breadcrumbs=tuple(breadcrumbs(path, root_label)),
    )


class NamespaceProjector:
    """Produces DirectoryViews for a bucket through an ObjectLister."""

    def __init__(
        self,
        lister: ObjectLister,
        classifier: Optional[FileTypeClassifier] = None,
        root_label: Optional[str] = None,
        page_size: Optional[int] = None,
        max_pages: Optional[int] = None,
        show_hidden: Optional[bool] = None,
    ):
        self.lister = lister
        self.classifier = classifier or default_classifier
        self.root_label = root_label if root_label is not None else settings.root_label
        self.page_size = page_size if page_size is not None else settings.page_size
        self.max_pages = max_pages if max_pages is not None else settings.max_pages
        if self.page_size < 1 or self.max_pages < 1:
            raise ValidationError(
                f"page_size and max_pages must be positive, got {self.page_size} and {self.max_pages}"
            )
        self.show_hidden = (
            show_hidden if show_hidden is not None else settings.show_hidden_files
        )

    def get_directory_view(
        self,
        path: VirtualPath,
        cancellation: Optional[CancellationToken] = None,
    ) -> DirectoryView:
        """List ``path`` and return its folders, files and breadcrumbs.

        The result is unsorted; pass it through ``sort_nodes`` for display.

        Raises:
            ListingError: Any listing failure; no partial view is returned
        """
        prefix = to_storage_prefix(path)
        logger.info("Directory view requested", path=str(path), prefix=prefix)

        with traced(tracer, "namespace.get_directory_view", prefix=prefix) as span:
            cursor = PaginationCursor(
                lister=self.lister,
                prefix=prefix,
                max_keys=self.page_size,
                max_pages=self.max_pages,
                cancellation=cancellation,
            )
            listing = cursor.run()
            view = project_listing(
                path,
                listing,
                classifier=self.classifier,
                root_label=self.root_label,
                show_hidden=self.show_hidden,
            )
            span.set_attribute("page_count", listing.page_count)
            span.set_attribute("folder_count", len(view.folders))
            span.set_attribute("file_count", len(view.files))

        logger.info(
            "Directory view produced",
            path=str(path),
            page_count=listing.page_count,
            folder_count=len(view.folders),
            file_count=len(view.files),
        )
        return view
