"""
Loading of JSON documents and lookup of the schemas they contain.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from ..config import ReaderConfig
from ..models import Schema
from .json_util import is_array, is_object
from .schema_reader import read_schema, read_schemas_from_node


def load_document(path: str | Path) -> Any:
    """Load a JSON document, keeping decimal numbers exact."""
    with open(path, encoding="utf-8") as f:
        return json.load(f, parse_float=Decimal)


def pointer_segments(pointer: str) -> list[str] | None:
    """
    Split a JSON pointer (RFC 6901) into unescaped reference tokens.

    Examples:
        "" or "#" -> []
        "/" -> [""]
        "#/components/schemas" -> ["components", "schemas"]
        "//a" -> ["", "a"]

    Returns:
        The tokens, or None if the pointer does not start with "/"
    """
    pointer = pointer.removeprefix("#")
    if not pointer:
        return []
    if not pointer.startswith("/"):
        return None
    return [segment.replace("~1", "/").replace("~0", "~") for segment in pointer[1:].split("/")]


def resolve_pointer(document: Any, pointer: str) -> Any:
    """
    Resolve a JSON pointer (RFC 6901) inside a document.

    Args:
        document: The parsed document
        pointer: Pointer such as "/components/schemas" or "#/components/schemas";
            "" and "#" point at the whole document

    Returns:
        The node at the pointer, or None if a segment does not exist or the
        pointer is malformed
    """
    segments = pointer_segments(pointer)
    if segments is None:
        return None

    node = document
    for segment in segments:
        if is_object(node):
            node = node.get(segment)
        elif is_array(node) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return None
    return node


def read_document_schemas(document: Any, config: ReaderConfig) -> dict[str, Schema | None] | None:
    """
    Read the schemas found at the configured pointer.

    With ``single_schema`` set, the node at the pointer is read as one schema
    and returned under the last token of the pointer ("schema" for the
    document root).
    """
    node = resolve_pointer(document, config.schemas_pointer)
    if config.single_schema:
        if node is None:
            return None
        segments = pointer_segments(config.schemas_pointer)
        name = segments[-1] if segments and segments[-1] else "schema"
        return {name: read_schema(node)}
    return read_schemas_from_node(node)
