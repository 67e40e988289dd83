"""Shared data types for risio.

This package contains the record model consumed by the parser and the
writer, plus lookup tables for well-known tags.
"""

from risio.models.dates import PublicationDate
from risio.models.records import Document, Field, Record
from risio.models.tags import (
    END_TAG,
    FIELD_TAGS,
    KNOWN_TAGS,
    REFERENCE_TYPES,
    TYPE_TAG,
    describe_tag,
    get_tags,
    reference_type_name,
)

__all__ = [
    # Record models
    "Document",
    "Record",
    "Field",
    "PublicationDate",
    # Tag tables
    "TYPE_TAG",
    "END_TAG",
    "FIELD_TAGS",
    "KNOWN_TAGS",
    "REFERENCE_TYPES",
    "describe_tag",
    "get_tags",
    "reference_type_name",
]
