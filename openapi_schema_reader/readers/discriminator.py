"""
Reader for the Discriminator object of a schema.
"""

from __future__ import annotations

import logging
from typing import Any

from ..models import Discriminator
from ..utils import schema_ref
from .annotations import AnnotationValue, ClassIndex, string_value
from .json_util import as_text, is_object, string_property

logger = logging.getLogger(__name__)

PROP_PROPERTY_NAME = "propertyName"
PROP_MAPPING = "mapping"


def read_discriminator(node: Any) -> Discriminator | None:
    """
    Read a Discriminator JSON node.

    Args:
        node: The discriminator node (may be None)

    Returns:
        Discriminator model, or None if the node is not an object
    """
    if not is_object(node):
        return None
    logger.debug("Processing a Discriminator from json.")
    discriminator = Discriminator(property_name=string_property(node, PROP_PROPERTY_NAME))

    mapping_node = node.get(PROP_MAPPING)
    if is_object(mapping_node):
        discriminator.mapping = {key: as_text(key, value) for key, value in mapping_node.items()}
    return discriminator


def read_discriminator_annotation(
    index: ClassIndex,
    property_name: AnnotationValue | None,
    mapping: AnnotationValue | None,
) -> Discriminator | None:
    """
    Build a Discriminator from the discriminatorProperty/discriminatorMapping
    attributes of a schema annotation.

    Each @DiscriminatorMapping entry maps its "value" to a reference to the
    class given in "schema".
    """
    if property_name is None and mapping is None:
        return None

    discriminator = Discriminator()
    if property_name is not None:
        discriminator.property_name = property_name.as_string()

    if mapping is not None:
        discriminator.mapping = {}
        for entry in mapping.as_nested_array():
            value = string_value(entry, "value")
            schema_value = entry.value("schema")
            if value is None or schema_value is None:
                continue
            discriminator.mapping[value] = _class_ref_target(index, schema_value)
    return discriminator


def _class_ref_target(index: ClassIndex, schema_value: AnnotationValue) -> str:
    class_ref = schema_value.as_class()
    annotation = index.get_schema_annotation(class_ref)
    name = string_value(annotation, "name") if annotation is not None else None
    return schema_ref(name or class_ref.simple_name)
