"""Browse S3-compatible object storage as a conventional folder tree.

The package projects delimiter-based listings of a flat key space onto
virtual directories and annotates every object with a human-meaningful
type (category, display name, icon).

Key Features:
    - Virtual paths, storage prefixes and breadcrumbs
    - Paginated listing with duplicate and runaway-page detection
    - Deterministic file type classification
    - Folder-first sorting by name, modification time, size or type
    - CLI interface

Recommended Usage:

    >>> from bucket_browser import (
    ...     NamespaceProjector, S3ClientConfig, S3ObjectLister, VirtualPath, sort_nodes
    ... )
    >>> lister = S3ObjectLister(S3ClientConfig(aws_profile="dev"), "my-bucket")
    >>> view = NamespaceProjector(lister).get_directory_view(VirtualPath.parse("/data/"))
    >>> nodes = sort_nodes(view.folders, view.files, "modified", "desc")

Classification on its own:

    >>> from bucket_browser import classify
    >>> classify("archive.tar.gz").display_name
    'Gzip Archive'
"""

__version__ = "0.1.0"

from .classification import (
    ClassificationTable,
    FileTypeClassifier,
    TypeInfo,
    classify,
)
from .core.exceptions import (
    BucketBrowserError,
    InconsistentListingError,
    InvalidPathError,
    ListingCancelledError,
    ListingError,
    ListingFailedError,
    TooManyPagesError,
)
from .namespace import (
    Breadcrumb,
    CancellationToken,
    DirectoryView,
    FileNode,
    ListPage,
    NamespaceProjector,
    NavigationTracker,
    ObjectEntry,
    ObjectLister,
    PaginationCursor,
    SortDirection,
    SortField,
    VirtualPath,
    breadcrumbs,
    child_path,
    from_storage_prefix,
    navigate,
    resolve_content_types,
    run_per_file,
    sort_nodes,
    to_storage_prefix,
)
from .objectstorage import S3ClientConfig, S3ObjectLister

__all__ = [
    # Classification
    "ClassificationTable",
    "FileTypeClassifier",
    "TypeInfo",
    "classify",
    # Namespace projection
    "Breadcrumb",
    "CancellationToken",
    "DirectoryView",
    "FileNode",
    "ListPage",
    "NamespaceProjector",
    "NavigationTracker",
    "ObjectEntry",
    "ObjectLister",
    "PaginationCursor",
    "SortDirection",
    "SortField",
    "VirtualPath",
    "breadcrumbs",
    "child_path",
    "from_storage_prefix",
    "navigate",
    "resolve_content_types",
    "run_per_file",
    "sort_nodes",
    "to_storage_prefix",
    # Object storage
    "S3ClientConfig",
    "S3ObjectLister",
    # Errors
    "BucketBrowserError",
    "InconsistentListingError",
    "InvalidPathError",
    "ListingCancelledError",
    "ListingError",
    "ListingFailedError",
    "TooManyPagesError",
]
