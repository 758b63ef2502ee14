"""Virtual directory projection over a flat object key space."""

from .auxiliary import AuxiliaryResults, resolve_content_types, run_per_file
from .navigation import NavigationTicket, NavigationTracker, navigate
from .pagination import (
    CancellationToken,
    ListingResult,
    ListPage,
    ObjectEntry,
    ObjectLister,
    PaginationCursor,
)
from .paths import (
    Breadcrumb,
    VirtualPath,
    breadcrumbs,
    child_path,
    from_storage_prefix,
    to_storage_prefix,
)
from .projector import DirectoryView, FileNode, NamespaceProjector, project_listing
from .sorting import SortDirection, SortField, resolve_sort_options, sort_nodes

__all__ = [
    "AuxiliaryResults",
    "Breadcrumb",
    "CancellationToken",
    "DirectoryView",
    "FileNode",
    "ListPage",
    "ListingResult",
    "NamespaceProjector",
    "NavigationTicket",
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
    "project_listing",
    "resolve_content_types",
    "resolve_sort_options",
    "run_per_file",
    "sort_nodes",
    "to_storage_prefix",
]
