"""Value types shared by the classification tables and the classifier."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class TypeInfo:
    """Human-meaningful type of an object.

    Attributes:
        mime_type: MIME type associated with the object
        category: Coarse grouping used for sorting and filtering (e.g. "Image")
        display_name: Label shown to users (e.g. "Gzip Archive")
        icon: Icon glyph rendered next to the name
    """

    mime_type: str
    category: str
    display_name: str
    icon: str


@dataclass(frozen=True)
class ClassificationTable:
    """Immutable set of filename rules.

    ``basenames`` are matched case-sensitively against the whole name.
    ``compound_extensions`` hold multi-segment suffixes (``".tar.gz"``) in
    declaration order. ``extensions`` are keyed by the final segment without
    the dot. Suffix and extension keys are stored lowercase.
    """

    basenames: Mapping[str, TypeInfo] = field(default_factory=dict)
    compound_extensions: tuple[tuple[str, TypeInfo], ...] = ()
    extensions: Mapping[str, TypeInfo] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        basenames: Optional[Mapping[str, TypeInfo]] = None,
        compound_extensions: Optional[Iterable[tuple[str, TypeInfo]]] = None,
        extensions: Optional[Mapping[str, TypeInfo]] = None,
    ) -> "ClassificationTable":
        """Create a table, normalising suffix keys and freezing the mappings."""
        compound = []
        for suffix, info in compound_extensions or ():
            suffix = suffix.lower()
            if not suffix.startswith("."):
                suffix = "." + suffix
            compound.append((suffix, info))

        return cls(
            basenames=MappingProxyType(dict(basenames or {})),
            compound_extensions=tuple(compound),
            extensions=MappingProxyType(
                {ext.lower().lstrip("."): info for ext, info in (extensions or {}).items()}
            ),
        )

    def is_empty(self) -> bool:
        return not (self.basenames or self.compound_extensions or self.extensions)
