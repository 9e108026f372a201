"""
Reader for the XML object of a schema.
"""

from __future__ import annotations

from typing import Any

from ..models import XML
from .extensions import read_extensions
from .json_util import boolean_property, is_object, string_property


def read_xml(node: Any) -> XML | None:
    """Read an XML JSON node, or return None if the node is not an object."""
    if not is_object(node):
        return None
    xml = XML(
        name=string_property(node, "name"),
        namespace=string_property(node, "namespace"),
        prefix=string_property(node, "prefix"),
        attribute=boolean_property(node, "attribute"),
        wrapped=boolean_property(node, "wrapped"),
    )
    read_extensions(node, xml)
    return xml
