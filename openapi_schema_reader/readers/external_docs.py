"""
Reader for the ExternalDocumentation object.
"""

from __future__ import annotations

import logging
from typing import Any

from ..models import ExternalDocumentation
from .annotations import AnnotationInstance, string_value
from .extensions import read_extensions, read_extensions_annotation
from .json_util import is_object, string_property

logger = logging.getLogger(__name__)


def read_external_docs(node: Any) -> ExternalDocumentation | None:
    """Read an ExternalDocumentation JSON node."""
    if not is_object(node):
        return None
    logger.debug("Processing an ExternalDocumentation from json.")
    docs = ExternalDocumentation(
        description=string_property(node, "description"),
        url=string_property(node, "url"),
    )
    read_extensions(node, docs)
    return docs


def read_external_docs_annotation(annotation: AnnotationInstance | None) -> ExternalDocumentation | None:
    """Read an @ExternalDocumentation annotation."""
    if annotation is None:
        return None
    logger.debug("Processing an @ExternalDocumentation annotation.")
    docs = ExternalDocumentation(
        description=string_value(annotation, "description"),
        url=string_value(annotation, "url"),
    )
    read_extensions_annotation(annotation.value("extensions"), docs)
    return docs
