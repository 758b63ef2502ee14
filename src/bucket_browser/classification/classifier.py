"""Map object names (and optional stored content types) to a TypeInfo.

Precedence, first match wins:

1. exact basename (``.gitignore``, ``Dockerfile``), case-sensitive
2. compound extension (``.tar.gz``, ``.min.js``), longest suffix wins
3. single extension (``.png``)
4. stored Content-Type, if one was supplied
5. the default entry

Caller-supplied overrides are merged in front of the built-in rules at
each of steps 1-3, so an override never changes the precedence order.
"""

from typing import Optional

from .tables import (
    BUILTIN_TABLE,
    CONTENT_TYPES,
    DEFAULT_TYPE,
    HIDDEN_FILE_TYPE,
    ICONS,
    MAJOR_CONTENT_TYPES,
)
from .types import ClassificationTable, TypeInfo


def merge_tables(
    overrides: ClassificationTable, base: ClassificationTable
) -> ClassificationTable:
    """Combine two tables so that ``overrides`` wins every conflict."""
    return ClassificationTable.build(
        basenames={**base.basenames, **overrides.basenames},
        # Declaration order breaks length ties, so overrides go first
        compound_extensions=overrides.compound_extensions + base.compound_extensions,
        extensions={**base.extensions, **overrides.extensions},
    )


def _match_compound(table: ClassificationTable, lowered: str) -> Optional[TypeInfo]:
    best_length = 0
    best: Optional[TypeInfo] = None
    for suffix, info in table.compound_extensions:
        # A suffix needs a non-empty stem in front of it
        if len(lowered) > len(suffix) and lowered.endswith(suffix):
            if len(suffix) > best_length:
                best_length = len(suffix)
                best = info
    return best


def _match_filename(table: ClassificationTable, name: str) -> Optional[TypeInfo]:
    info = table.basenames.get(name)
    if info is not None:
        return info

    lowered = name.lower()
    info = _match_compound(table, lowered)
    if info is not None:
        return info

    dot = lowered.rfind(".")
    if dot > 0:
        return table.extensions.get(lowered[dot + 1 :])
    return None


def classify_content_type(content_type: str) -> Optional[TypeInfo]:
    """Resolve a stored Content-Type header value, or None if it is not known."""
    mime_type = content_type.split(";", 1)[0].strip().lower()
    if not mime_type:
        return None

    info = CONTENT_TYPES.get(mime_type)
    if info is not None:
        return info

    major = mime_type.split("/", 1)[0]
    if major in MAJOR_CONTENT_TYPES:
        category, display_name = MAJOR_CONTENT_TYPES[major]
        return TypeInfo(
            mime_type=mime_type,
            category=category,
            display_name=display_name,
            icon=ICONS[category],
        )
    return None


class FileTypeClassifier:
    """Deterministic file type classifier.

    Instances hold only immutable tables, so a single classifier can be
    shared between threads without locking.
    """

    def __init__(
        self,
        overrides: Optional[ClassificationTable] = None,
        table: ClassificationTable = BUILTIN_TABLE,
    ):
        if overrides is not None and not overrides.is_empty():
            table = merge_tables(overrides, table)
        self._table = table

    @property
    def table(self) -> ClassificationTable:
        return self._table

    def classify(self, name: str, content_type: Optional[str] = None) -> TypeInfo:
        """Classify an object by name, falling back to its stored content type.

        Args:
            name: Object name; a full key is accepted and only its last
                segment is considered
            content_type: Stored Content-Type of the object, if known

        Returns:
            The matching TypeInfo; never raises
        """
        basename = name.rsplit("/", 1)[-1]

        info = _match_filename(self._table, basename)
        if info is not None:
            return info

        if content_type:
            info = classify_content_type(content_type)
            if info is not None:
                return info

        if basename.startswith("."):
            return HIDDEN_FILE_TYPE
        return DEFAULT_TYPE


default_classifier = FileTypeClassifier()


def classify(name: str, content_type: Optional[str] = None) -> TypeInfo:
    """Classify with the built-in tables only."""
    return default_classifier.classify(name, content_type)
