"""
Readers turning JSON nodes and annotation metadata into Schema models.
"""

from __future__ import annotations

from .annotations import AnnotationInstance, AnnotationValue, ClassIndex, ClassRef
from .document import load_document, read_document_schemas, resolve_pointer
from .schema_factory import read_class_schema
from .schema_reader import read_schema, read_schema_array, read_schema_type, read_schemas, read_schemas_from_node

__all__ = [
    "AnnotationInstance",
    "AnnotationValue",
    "ClassIndex",
    "ClassRef",
    "load_document",
    "read_class_schema",
    "read_document_schemas",
    "read_schema",
    "read_schema_array",
    "read_schema_type",
    "read_schemas",
    "read_schemas_from_node",
    "resolve_pointer",
]
