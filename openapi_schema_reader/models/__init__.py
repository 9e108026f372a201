"""
OpenAPI model module.

Contains the Schema model and the auxiliary objects it owns.
"""

from __future__ import annotations

from .schema import XML, Discriminator, Extensible, ExternalDocumentation, Schema, SchemaType

__all__ = [
    "Schema",
    "SchemaType",
    "Discriminator",
    "XML",
    "ExternalDocumentation",
    "Extensible",
]
