"""
Reader for vendor extensions (x-* keys).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..errors import SchemaFormatError
from ..models import Extensible
from .annotations import AnnotationValue, string_value
from .json_util import is_object, read_object

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = "x-"


def is_extension_field(name: str) -> bool:
    return name.lower().startswith(EXTENSION_PREFIX)


def read_extensions(node: Any, model: Extensible) -> None:
    """Add every x-* field of the node to the model's extensions."""
    if not is_object(node):
        return
    for field_name, value in node.items():
        if is_extension_field(field_name):
            model.add_extension(field_name, read_object(value))


def read_extensions_annotation(annotation_value: AnnotationValue | None, model: Extensible) -> None:
    """Add the @Extension entries of an annotation array to the model's extensions."""
    if annotation_value is None:
        return
    logger.debug("Processing an array of @Extension annotations.")
    for nested in annotation_value.as_nested_array():
        name = string_value(nested, "name")
        if not name:
            continue
        if not is_extension_field(name):
            name = EXTENSION_PREFIX + name
        model.add_extension(name, _extension_value(nested.value("value"), nested.value("parseValue")))


def _extension_value(value: AnnotationValue | None, parse_value: AnnotationValue | None) -> Any:
    if value is None:
        return None
    text = value.as_string()
    if parse_value is None or not parse_value.as_boolean():
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaFormatError(value.name, text, "valid JSON") from e
