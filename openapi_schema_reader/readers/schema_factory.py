"""
Builds Schema models from schema annotations.

The annotation carries the same fields as a Schema JSON node, with a few
attribute names of its own (requiredProperties, enumeration, defaultValue,
implementation, discriminatorProperty, ...). Nested schemas are given as
class references, which are resolved through the ClassIndex.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ..models import Schema, SchemaType
from ..utils import schema_ref
from . import schema_constants as c
from .annotations import AnnotationInstance, AnnotationValue, ClassIndex, ClassRef, ref_value, string_value
from .discriminator import read_discriminator_annotation
from .extensions import read_extensions_annotation
from .external_docs import read_external_docs_annotation

logger = logging.getLogger(__name__)

# Classes that map to a schema type instead of a reference
PRIMITIVE_TYPES = {
    "str": SchemaType.STRING,
    "int": SchemaType.INTEGER,
    "float": SchemaType.NUMBER,
    "decimal.Decimal": SchemaType.NUMBER,
    "bool": SchemaType.BOOLEAN,
    "list": SchemaType.ARRAY,
    "dict": SchemaType.OBJECT,
}


def read_schema(index: ClassIndex, annotation: AnnotationInstance | None) -> Schema | None:
    """
    Read a schema annotation into a Schema model.

    Args:
        index: Class index used to resolve class references
        annotation: The schema annotation (may be None)

    Returns:
        Schema model, or None if there is no annotation or it is hidden
    """
    if annotation is None:
        return None
    if _boolean(annotation, c.ANN_HIDDEN):
        return None
    logger.debug("Processing a single @Schema annotation.")

    schema = Schema(name=string_value(annotation, c.PROP_NAME) or None)
    schema.ref = ref_value(annotation)
    schema.title = string_value(annotation, c.PROP_TITLE)
    schema.description = string_value(annotation, c.PROP_DESCRIPTION)
    schema.format = string_value(annotation, c.PROP_FORMAT)
    schema.type = _schema_type(annotation.value(c.PROP_TYPE))
    schema.default_value = string_value(annotation, c.ANN_DEFAULT_VALUE)
    schema.example = string_value(annotation, c.PROP_EXAMPLE)

    schema.multiple_of = _decimal(annotation, c.PROP_MULTIPLE_OF)
    schema.maximum = _decimal(annotation, c.PROP_MAXIMUM)
    schema.exclusive_maximum = _boolean(annotation, c.PROP_EXCLUSIVE_MAXIMUM)
    schema.minimum = _decimal(annotation, c.PROP_MINIMUM)
    schema.exclusive_minimum = _boolean(annotation, c.PROP_EXCLUSIVE_MINIMUM)
    schema.max_length = _int(annotation, c.PROP_MAX_LENGTH)
    schema.min_length = _int(annotation, c.PROP_MIN_LENGTH)
    schema.pattern = string_value(annotation, c.PROP_PATTERN)
    schema.max_items = _int(annotation, c.PROP_MAX_ITEMS)
    schema.min_items = _int(annotation, c.PROP_MIN_ITEMS)
    schema.unique_items = _boolean(annotation, c.PROP_UNIQUE_ITEMS)
    schema.max_properties = _int(annotation, c.PROP_MAX_PROPERTIES)
    schema.min_properties = _int(annotation, c.PROP_MIN_PROPERTIES)

    schema.required = _string_array(annotation, c.ANN_REQUIRED_PROPERTIES)
    schema.enumeration = _string_array(annotation, c.ANN_ENUMERATION)

    schema.read_only = _boolean(annotation, c.PROP_READ_ONLY)
    schema.write_only = _boolean(annotation, c.PROP_WRITE_ONLY)
    schema.nullable = _boolean(annotation, c.PROP_NULLABLE)
    schema.deprecated = _boolean(annotation, c.PROP_DEPRECATED)

    schema.not_ = _class_schema(index, annotation.value(c.PROP_NOT))
    schema.all_of = _class_schemas(index, annotation.value(c.PROP_ALL_OF))
    schema.one_of = _class_schemas(index, annotation.value(c.PROP_ONE_OF))
    schema.any_of = _class_schemas(index, annotation.value(c.PROP_ANY_OF))
    _read_properties(index, annotation.value(c.PROP_PROPERTIES), schema)

    additional = annotation.value(c.PROP_ADDITIONAL_PROPERTIES)
    if additional is not None:
        if isinstance(additional.raw, bool):
            schema.additional_properties = additional.raw
        else:
            schema.additional_properties = read_class_schema(index, additional.as_class())

    schema.discriminator = read_discriminator_annotation(
        index,
        annotation.value(c.ANN_DISCRIMINATOR_PROPERTY),
        annotation.value(c.ANN_DISCRIMINATOR_MAPPING),
    )
    external_docs = annotation.value(c.PROP_EXTERNAL_DOCS)
    if external_docs is not None:
        schema.external_docs = read_external_docs_annotation(external_docs.as_nested())
    read_extensions_annotation(annotation.value(c.ANN_EXTENSIONS), schema)

    implementation = annotation.value(c.ANN_IMPLEMENTATION)
    if implementation is not None:
        _apply_implementation(schema, read_class_schema(index, implementation.as_class()))
    return schema


def read_class_schema(index: ClassIndex, class_ref: ClassRef) -> Schema:
    """
    Build the schema standing for a class.

    Builtin types become a schema of the matching type. Any other class
    becomes a reference to its entry in the components map, named after the
    class's schema annotation when it has one.
    """
    schema_type = PRIMITIVE_TYPES.get(class_ref.name)
    if schema_type is not None:
        return Schema(type=schema_type)

    annotation = index.get_schema_annotation(class_ref)
    name = string_value(annotation, c.PROP_NAME) if annotation is not None else None
    return Schema(ref=schema_ref(name or class_ref.simple_name))


def _apply_implementation(schema: Schema, class_schema: Schema) -> None:
    # For arrays the implementation class describes the items
    if schema.type is SchemaType.ARRAY:
        if schema.items is None:
            schema.items = class_schema
        return
    if schema.type is None and schema.ref is None:
        schema.type = class_schema.type
        schema.ref = class_schema.ref


def _read_properties(index: ClassIndex, value: AnnotationValue | None, schema: Schema) -> None:
    if value is None:
        return
    for nested in value.as_nested_array():
        name = string_value(nested, c.PROP_NAME)
        if not name:
            continue
        property_schema = read_schema(index, nested)
        if property_schema is not None:
            schema.add_property(name, property_schema)


def _class_schema(index: ClassIndex, value: AnnotationValue | None) -> Schema | None:
    if value is None:
        return None
    return read_class_schema(index, value.as_class())


def _class_schemas(index: ClassIndex, value: AnnotationValue | None) -> list[Schema | None] | None:
    if value is None:
        return None
    return [read_class_schema(index, class_ref) for class_ref in value.as_class_array()]


def _schema_type(value: AnnotationValue | None) -> SchemaType | None:
    if value is None:
        return None
    return value.as_enum(SchemaType)


def _boolean(annotation: AnnotationInstance, prop: str) -> bool | None:
    value = annotation.value(prop)
    return value.as_boolean() if value is not None else None


def _int(annotation: AnnotationInstance, prop: str) -> int | None:
    value = annotation.value(prop)
    return value.as_int() if value is not None else None


def _decimal(annotation: AnnotationInstance, prop: str) -> Decimal | None:
    value = annotation.value(prop)
    return value.as_decimal() if value is not None else None


def _string_array(annotation: AnnotationInstance, prop: str) -> list[str] | None:
    value = annotation.value(prop)
    return value.as_string_array() if value is not None else None
