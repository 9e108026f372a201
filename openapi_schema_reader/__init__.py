"""OpenAPI Schema Reader

A Python package for reading OpenAPI Schema objects from JSON documents
and from annotation metadata into an in-memory model.
"""

__version__ = "1.0.1"

from .config import ReaderConfig
from .errors import SchemaFormatError
from .models import XML, Discriminator, ExternalDocumentation, Schema, SchemaType
from .readers import (
    AnnotationInstance,
    AnnotationValue,
    ClassIndex,
    ClassRef,
    load_document,
    read_document_schemas,
    read_schema,
    read_schema_array,
    read_schemas,
    read_schemas_from_node,
)

__all__ = [
    "Schema",
    "SchemaType",
    "Discriminator",
    "XML",
    "ExternalDocumentation",
    "SchemaFormatError",
    "ReaderConfig",
    "AnnotationInstance",
    "AnnotationValue",
    "ClassIndex",
    "ClassRef",
    "load_document",
    "read_document_schemas",
    "read_schema",
    "read_schema_array",
    "read_schemas",
    "read_schemas_from_node",
]
