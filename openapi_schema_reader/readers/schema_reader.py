"""
Reader for Schema definitions.

Builds Schema models either from a map of schema annotations or from
parsed JSON nodes, recursing into nested schemas (items, not, allOf, oneOf,
anyOf, properties and additionalProperties).
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import SchemaFormatError
from ..models import Schema, SchemaType
from . import schema_constants as c
from . import schema_factory
from .annotations import AnnotationValue, ClassIndex, is_ref, name_from_ref, string_value
from .discriminator import read_discriminator
from .extensions import read_extensions
from .external_docs import read_external_docs
from .json_util import (
    boolean_property,
    decimal_property,
    int_property,
    is_array,
    is_object,
    read_object,
    read_object_array,
    read_string_array,
    string_property,
)
from .xml_metadata import read_xml

logger = logging.getLogger(__name__)


def read_schemas(index: ClassIndex, annotation_value: AnnotationValue | None) -> dict[str, Schema | None] | None:
    """
    Read a map of schema annotations.

    Args:
        index: Class index, passed through to the schema builder
        annotation_value: Array of nested schema annotations

    Returns:
        Schemas keyed by name, in declaration order. Entries that have
        neither a name nor a reference to derive one from are skipped.
    """
    if annotation_value is None:
        return None
    logger.debug("Processing a map of @Schema annotations.")
    schemas: dict[str, Schema | None] = {}
    for nested in annotation_value.as_nested_array():
        name = string_value(nested, c.PROP_NAME) or None

        if name is None and is_ref(nested):
            name = name_from_ref(nested) or None

        # A name is only mandatory for schemas declared in the components map
        if name is None:
            logger.debug("Skipping a @Schema annotation without name or ref.")
            continue
        schemas[name] = schema_factory.read_schema(index, nested)
    return schemas


def read_schema(node: Any) -> Schema | None:
    """
    Read a Schema JSON node.

    Args:
        node: The schema node (may be None)

    Returns:
        Schema model, or None if the node is not an object

    Raises:
        SchemaFormatError: If a scalar field holds a malformed value
    """
    if not is_object(node):
        return None
    logger.debug("Processing a Schema from json.")

    schema = Schema(name=string_property(node, c.PROP_NAME))
    schema.ref = string_property(node, c.PROP_REF)
    schema.format = string_property(node, c.PROP_FORMAT)
    schema.title = string_property(node, c.PROP_TITLE)
    schema.description = string_property(node, c.PROP_DESCRIPTION)
    schema.default_value = read_object(node.get(c.PROP_DEFAULT))
    schema.multiple_of = decimal_property(node, c.PROP_MULTIPLE_OF)
    schema.maximum = decimal_property(node, c.PROP_MAXIMUM)
    schema.exclusive_maximum = boolean_property(node, c.PROP_EXCLUSIVE_MAXIMUM)
    schema.minimum = decimal_property(node, c.PROP_MINIMUM)
    schema.exclusive_minimum = boolean_property(node, c.PROP_EXCLUSIVE_MINIMUM)
    schema.max_length = int_property(node, c.PROP_MAX_LENGTH)
    schema.min_length = int_property(node, c.PROP_MIN_LENGTH)
    schema.pattern = string_property(node, c.PROP_PATTERN)
    schema.max_items = int_property(node, c.PROP_MAX_ITEMS)
    schema.min_items = int_property(node, c.PROP_MIN_ITEMS)
    schema.unique_items = boolean_property(node, c.PROP_UNIQUE_ITEMS)
    schema.max_properties = int_property(node, c.PROP_MAX_PROPERTIES)
    schema.min_properties = int_property(node, c.PROP_MIN_PROPERTIES)
    schema.required = read_string_array(node.get(c.PROP_REQUIRED), c.PROP_REQUIRED)
    schema.enumeration = read_object_array(node.get(c.PROP_ENUM))
    schema.type = read_schema_type(node.get(c.PROP_TYPE))
    schema.items = read_schema(node.get(c.PROP_ITEMS))
    schema.not_ = read_schema(node.get(c.PROP_NOT))
    schema.all_of = read_schema_array(node.get(c.PROP_ALL_OF))
    schema.one_of = read_schema_array(node.get(c.PROP_ONE_OF))
    schema.any_of = read_schema_array(node.get(c.PROP_ANY_OF))
    schema.properties = read_schemas_from_node(node.get(c.PROP_PROPERTIES))

    additional = node.get(c.PROP_ADDITIONAL_PROPERTIES)
    if is_object(additional):
        schema.additional_properties = read_schema(additional)
    else:
        schema.additional_properties = boolean_property(node, c.PROP_ADDITIONAL_PROPERTIES)

    schema.read_only = boolean_property(node, c.PROP_READ_ONLY)
    schema.write_only = boolean_property(node, c.PROP_WRITE_ONLY)
    schema.nullable = boolean_property(node, c.PROP_NULLABLE)
    schema.deprecated = boolean_property(node, c.PROP_DEPRECATED)
    schema.xml = read_xml(node.get(c.PROP_XML))
    schema.external_docs = read_external_docs(node.get(c.PROP_EXTERNAL_DOCS))
    schema.example = read_object(node.get(c.PROP_EXAMPLE))
    schema.discriminator = read_discriminator(node.get(c.PROP_DISCRIMINATOR))
    read_extensions(node, schema)
    return schema


def read_schema_type(node: Any) -> SchemaType | None:
    """Read a schema type name, case-insensitively."""
    if not isinstance(node, str):
        return None
    try:
        return SchemaType[node.upper()]
    except KeyError as e:
        raise SchemaFormatError(c.PROP_TYPE, node, f"one of {[t.value for t in SchemaType]}") from e


def read_schema_array(node: Any) -> list[Schema | None] | None:
    """Read a list of schemas, keeping the array order."""
    if not is_array(node):
        return None
    return [read_schema(item) for item in node]


def read_schemas_from_node(node: Any) -> dict[str, Schema | None] | None:
    """Read a map of schema JSON nodes, keeping the field order."""
    if not is_object(node):
        return None
    return {field_name: read_schema(child) for field_name, child in node.items()}
