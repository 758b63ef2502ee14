"""Ordering of directory entries for display.

Folders always come before files. Within each group the requested field
decides the order; entries missing the field (no size, no timestamp) go
last in either direction.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

from bucket_browser.core.exceptions import ValidationError

from .projector import FileNode


class SortField(str, Enum):
    name = "name"
    modified = "modified"
    size = "size"
    type = "type"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


def _name_key(node: FileNode) -> tuple[str, str]:
    # Raw name breaks ties between names that differ only in case
    return (node.name.casefold(), node.name)


def _type_key(node: FileNode) -> tuple[Any, ...]:
    info = node.type_info
    if info is None:
        return ("", "") + _name_key(node)
    return (info.category.casefold(), info.display_name.casefold()) + _name_key(node)


# Getters for fields a node may lack; None marks the value as missing.
_FIELD_VALUES: dict[SortField, Callable[[FileNode], Any]] = {
    SortField.modified: lambda node: node.last_modified,
    SortField.size: lambda node: node.size,
}


def _coerce(value: Union[str, Enum], enum_type: type) -> Any:
    try:
        return enum_type(value.value if isinstance(value, Enum) else str(value).lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(f"Invalid sort option '{value}'. Must be one of: {allowed}")


def _sort_group(
    nodes: Iterable[FileNode], field: SortField, descending: bool
) -> list[FileNode]:
    if field is SortField.name:
        return sorted(nodes, key=_name_key, reverse=descending)
    if field is SortField.type:
        return sorted(nodes, key=_type_key, reverse=descending)

    value_of = _FIELD_VALUES[field]
    present: list[FileNode] = []
    missing: list[FileNode] = []
    for node in nodes:
        (missing if value_of(node) is None else present).append(node)

    present.sort(key=lambda node: (value_of(node), _name_key(node)), reverse=descending)
    missing.sort(key=_name_key)
    return present + missing


def resolve_sort_options(
    field: Union[SortField, str], direction: Optional[Union[SortDirection, str]]
) -> tuple[SortField, SortDirection]:
    """Validate a field and direction given as enums or case-insensitive strings.

    Raises:
        ValidationError: If either value is not recognised
    """
    return _coerce(field, SortField), _coerce(direction or SortDirection.asc, SortDirection)


def sort_nodes(
    folders: Iterable[FileNode],
    files: Iterable[FileNode],
    field: Union[SortField, str] = SortField.name,
    direction: Optional[Union[SortDirection, str]] = SortDirection.asc,
) -> list[FileNode]:
    """Return folders followed by files, each group ordered by ``field``.

    Args:
        folders: Folder nodes
        files: File nodes
        field: One of name, modified, size, type
        direction: asc or desc; missing values stay last either way

    Raises:
        ValidationError: If ``field`` or ``direction`` is not recognised
    """
    sort_field, sort_direction = resolve_sort_options(field, direction)
    descending = sort_direction is SortDirection.desc

    return _sort_group(folders, sort_field, descending) + _sort_group(
        files, sort_field, descending
    )
