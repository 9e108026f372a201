"""
Utility functions for working with schema references.
"""

COMPONENTS_SCHEMAS_REF = "#/components/schemas/"


def schema_ref(name: str) -> str:
    """Build a reference to a schema of the components map.

    Examples:
        "Pet" -> "#/components/schemas/Pet"
        "#/components/schemas/Pet" -> "#/components/schemas/Pet"
        "other.json#/Pet" -> "other.json#/Pet"
    """
    if "/" in name or "#" in name:
        return name
    return COMPONENTS_SCHEMAS_REF + name


def name_from_ref_path(ref: str) -> str:
    """Return the last path segment of a reference.

    Examples:
        "#/components/schemas/Pet" -> "Pet"
        "Pet" -> "Pet"
    """
    return ref.rsplit("/", 1)[-1]
