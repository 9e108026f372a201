"""
Schema model definitions.

These dataclasses hold an OpenAPI Schema object once it has been read from
a JSON document or from annotation metadata. Every attribute defaults to
None so that a missing field stays distinguishable from an explicit
false/zero value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class SchemaType(Enum):
    """The data types a Schema can declare."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass
class Extensible:
    """Base class for models carrying vendor extensions (x-* keys)."""

    extensions: dict[str, Any] | None = field(default=None, kw_only=True)

    def add_extension(self, name: str, value: Any) -> None:
        if self.extensions is None:
            self.extensions = {}
        self.extensions[name] = value


@dataclass
class Discriminator:
    """Discriminator used to tell polymorphic payloads apart."""

    property_name: str | None = None
    mapping: dict[str, str] | None = None


@dataclass
class XML(Extensible):
    """XML representation metadata of a schema."""

    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


@dataclass
class ExternalDocumentation(Extensible):
    """Pointer to additional documentation."""

    description: str | None = None
    url: str | None = None


@dataclass
class Schema(Extensible):
    """An OpenAPI Schema object.

    ``additional_properties`` holds either a bool or a nested Schema, never
    both: assigning one variant replaces the other.
    """

    # Only meaningful for members of a components map
    name: str | None = None
    ref: str | None = None

    title: str | None = None
    description: str | None = None
    format: str | None = None
    type: SchemaType | None = None

    # Numeric constraints
    multiple_of: Decimal | None = None
    maximum: Decimal | None = None
    exclusive_maximum: bool | None = None
    minimum: Decimal | None = None
    exclusive_minimum: bool | None = None

    # String constraints
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None

    # Collection constraints
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    max_properties: int | None = None
    min_properties: int | None = None

    required: list[str] | None = None
    enumeration: list[Any] | None = None
    items: Schema | None = None
    not_: Schema | None = None
    all_of: list[Schema | None] | None = None
    one_of: list[Schema | None] | None = None
    any_of: list[Schema | None] | None = None
    properties: dict[str, Schema | None] | None = None
    additional_properties: bool | Schema | None = None

    default_value: Any = None
    example: Any = None
    read_only: bool | None = None
    write_only: bool | None = None
    nullable: bool | None = None
    deprecated: bool | None = None

    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None
    discriminator: Discriminator | None = None

    @property
    def additional_properties_boolean(self) -> bool | None:
        if isinstance(self.additional_properties, bool):
            return self.additional_properties
        return None

    @property
    def additional_properties_schema(self) -> Schema | None:
        if isinstance(self.additional_properties, Schema):
            return self.additional_properties
        return None

    def add_property(self, name: str, schema: Schema | None) -> None:
        if self.properties is None:
            self.properties = {}
        self.properties[name] = schema
