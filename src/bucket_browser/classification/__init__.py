"""File type classification for object names."""

from .classifier import (
    FileTypeClassifier,
    classify,
    classify_content_type,
    default_classifier,
)
from .tables import BUILTIN_TABLE, DEFAULT_TYPE, FOLDER_ICON
from .types import ClassificationTable, TypeInfo

__all__ = [
    "BUILTIN_TABLE",
    "ClassificationTable",
    "DEFAULT_TYPE",
    "FOLDER_ICON",
    "FileTypeClassifier",
    "TypeInfo",
    "classify",
    "classify_content_type",
    "default_classifier",
]
