"""Virtual path handling for a flat object key space.

A VirtualPath is the user-facing folder path, stored as a tuple of
validated segments. Its storage form (a StoragePrefix) has no leading
separator and a trailing separator when non-empty; the root is ``""``.
"""

from dataclasses import dataclass

from bucket_browser.core.exceptions import InvalidPathError

SEPARATOR = "/"


def _validate_segment(segment: str) -> str:
    if not segment:
        raise InvalidPathError("Path segments cannot be empty")
    if SEPARATOR in segment:
        raise InvalidPathError(f"Path segment cannot contain '{SEPARATOR}': {segment!r}")
    if segment in (".", ".."):
        raise InvalidPathError(f"Relative path segment not allowed: {segment!r}")
    return segment


@dataclass(frozen=True)
class VirtualPath:
    """A rooted folder path; the root is the empty segment sequence."""

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of strings but always store a tuple
        segments = tuple(self.segments)
        for segment in segments:
            _validate_segment(segment)
        object.__setattr__(self, "segments", segments)

    @classmethod
    def root(cls) -> "VirtualPath":
        return cls()

    @classmethod
    def parse(cls, path: str) -> "VirtualPath":
        """Parse a UI path such as ``"/photos/2024/"``.

        ``""`` and ``"/"`` are the root. One leading and one trailing
        separator are tolerated; anything else that produces an empty
        segment is rejected.

        Raises:
            InvalidPathError: If any segment is empty, ``.`` or ``..``
        """
        if path in ("", SEPARATOR):
            return cls()
        trimmed = path
        if trimmed.startswith(SEPARATOR):
            trimmed = trimmed[1:]
        if trimmed.endswith(SEPARATOR):
            trimmed = trimmed[:-1]
        if not trimmed:
            raise InvalidPathError(f"Path '{path}' contains an empty segment")
        return cls(tuple(trimmed.split(SEPARATOR)))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def name(self) -> str:
        """Last segment, or ``""`` for the root."""
        return self.segments[-1] if self.segments else ""

    @property
    def parent(self) -> "VirtualPath":
        """Parent folder; the root is its own parent."""
        return VirtualPath(self.segments[:-1])

    def __str__(self) -> str:
        if not self.segments:
            return SEPARATOR
        return SEPARATOR + SEPARATOR.join(self.segments) + SEPARATOR


@dataclass(frozen=True)
class Breadcrumb:
    """One navigable ancestor of the current path."""

    name: str
    path: VirtualPath


def to_storage_prefix(path: VirtualPath) -> str:
    """Storage prefix used to list ``path``; ``""`` for the root."""
    if path.is_root:
        return ""
    return SEPARATOR.join(path.segments) + SEPARATOR


def from_storage_prefix(prefix: str) -> VirtualPath:
    """Inverse of :func:`to_storage_prefix`.

    Raises:
        InvalidPathError: If the prefix has a leading separator, lacks the
            trailing one, or contains an invalid segment
    """
    if prefix == "":
        return VirtualPath()
    if prefix.startswith(SEPARATOR):
        raise InvalidPathError(f"Storage prefix cannot start with '{SEPARATOR}': {prefix!r}")
    if not prefix.endswith(SEPARATOR):
        raise InvalidPathError(f"Storage prefix must end with '{SEPARATOR}': {prefix!r}")
    return VirtualPath(tuple(prefix[:-1].split(SEPARATOR)))


def child_path(path: VirtualPath, name: str) -> VirtualPath:
    """Append ``name`` as a new segment.

    Raises:
        InvalidPathError: If ``name`` is empty, ``.``/``..`` or contains ``/``
    """
    return VirtualPath(path.segments + (_validate_segment(name),))


def breadcrumbs(path: VirtualPath, root_label: str) -> list[Breadcrumb]:
    """Root entry labelled ``root_label`` followed by one entry per ancestor.

    The last entry is ``path`` itself.
    """
    crumbs = [Breadcrumb(name=root_label, path=VirtualPath())]
    for depth in range(1, len(path.segments) + 1):
        crumbs.append(
            Breadcrumb(name=path.segments[depth - 1], path=VirtualPath(path.segments[:depth]))
        )
    return crumbs
