"""
Configuration for reading schema documents.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ReaderConfig:
    """Configuration options for reading and outlining schemas."""

    # JSON pointer to the schema map inside the document
    schemas_pointer: str = "/components/schemas"

    # Treat the node at the pointer as one schema instead of a map of schemas
    single_schema: bool = False

    # Deepest nesting level shown in the outline
    outline_max_depth: int = 8

    # Whether to list vendor extensions in the outline
    show_extensions: bool = True

    # Add a comment with the command line at the top of the outline
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> ReaderConfig:
        """
        Create a config from a dictionary.

        Unknown keys are ignored. A known key must hold a value of the same
        type as its default (so `"3"` or `true` is rejected for
        `outline_max_depth`).

        Raises:
            ValueError: If `d` is not a dictionary or a value has the wrong type
        """
        if not isinstance(d, dict):
            raise ValueError(f"Config must be a JSON object, got {type(d).__name__}")
        config = ReaderConfig()
        for k, v in d.items():
            if not hasattr(config, k):
                continue
            expected = type(getattr(config, k))
            if type(v) is not expected:
                raise ValueError(f"Config option '{k}' must be {expected.__name__}, got {type(v).__name__}")
            setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schemas_pointer": self.schemas_pointer,
            "single_schema": self.single_schema,
            "outline_max_depth": self.outline_max_depth,
            "show_extensions": self.show_extensions,
            "add_generation_comment": self.add_generation_comment,
        }
