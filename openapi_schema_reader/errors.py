"""
Exceptions raised while reading schema definitions.
"""

from __future__ import annotations

from typing import Any


class SchemaFormatError(ValueError):
    """Raised when a schema source holds a malformed value.

    This can happen when:
    - A numeric field holds text that is not a number
    - A boolean field holds something other than true/false
    - The type name is not one of the known schema types
    - An annotation attribute holds a value of the wrong kind
    """

    def __init__(self, key: str, value: Any, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value for '{key}': expected {expected}, got {value!r}")
