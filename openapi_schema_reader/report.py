"""
Text outline of read schemas.

Flattens a schema map into indented rows and renders them with a Jinja2
template. This is a diagnostic view of the model, not an OpenAPI writer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import jinja2

from .cli_utils import reconstruct_command_line
from .config import ReaderConfig
from .models import Schema

CURRENT_DIR = Path(__file__).parent.resolve().absolute()


@dataclass
class OutlineRow:
    """One line of the outline."""

    depth: int = 0
    label: str = ""
    summary: str = ""


def summarize(schema: Schema | None, show_extensions: bool = True) -> str:
    """Describe a schema on one line: type or $ref, format and constraints."""
    if schema is None:
        return "<absent>"

    parts = []
    if schema.ref is not None:
        parts.append(f"$ref {schema.ref}")
    if schema.type is not None:
        parts.append(schema.type.value)
    if schema.format is not None:
        parts.append(f"({schema.format})")
    if schema.required:
        parts.append(f"required=[{', '.join(schema.required)}]")
    if schema.enumeration is not None:
        parts.append(f"enum={schema.enumeration!r}")
    if schema.additional_properties_boolean is not None:
        parts.append(f"additionalProperties={str(schema.additional_properties_boolean).lower()}")
    if schema.nullable:
        parts.append("nullable")
    if schema.deprecated:
        parts.append("deprecated")
    if show_extensions and schema.extensions:
        parts.append(f"extensions=[{', '.join(schema.extensions)}]")
    return " ".join(parts) if parts else "{}"


def outline_rows(
    schemas: dict[str, Schema | None] | None,
    max_depth: int = 8,
    show_extensions: bool = True,
) -> list[OutlineRow]:
    """
    Flatten a schema map into outline rows.

    Args:
        schemas: Schemas keyed by name
        max_depth: Deepest nesting level to descend into
        show_extensions: Whether to list extension names

    Returns:
        Rows in depth-first order
    """
    rows: list[OutlineRow] = []
    for name, schema in (schemas or {}).items():
        _add_rows(rows, name, schema, 0, max_depth, show_extensions)
    return rows


def _add_rows(
    rows: list[OutlineRow],
    label: str,
    schema: Schema | None,
    depth: int,
    max_depth: int,
    show_extensions: bool,
) -> None:
    rows.append(OutlineRow(depth=depth, label=label, summary=summarize(schema, show_extensions)))
    if schema is None or depth >= max_depth:
        return

    children: list[tuple[str, Schema | None]] = []
    for prop_name, prop_schema in (schema.properties or {}).items():
        children.append((prop_name, prop_schema))
    if schema.items is not None:
        children.append(("items", schema.items))
    if schema.additional_properties_schema is not None:
        children.append(("additionalProperties", schema.additional_properties_schema))
    if schema.not_ is not None:
        children.append(("not", schema.not_))
    for keyword, members in (("allOf", schema.all_of), ("oneOf", schema.one_of), ("anyOf", schema.any_of)):
        for i, member in enumerate(members or []):
            children.append((f"{keyword}[{i}]", member))

    for child_label, child in children:
        _add_rows(rows, child_label, child, depth + 1, max_depth, show_extensions)


def render_outline(schemas: dict[str, Schema | None] | None, config: ReaderConfig | None = None) -> str:
    """Render the outline of a schema map as text."""
    config = config or ReaderConfig()
    jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
    template = jinja_env.from_string((CURRENT_DIR / "templates" / "outline.txt.jinja2").read_text(encoding="utf-8"))

    header = None
    if config.add_generation_comment:
        header = reconstruct_command_line()

    return template.render(
        header=header,
        count=len(schemas or {}),
        rows=outline_rows(schemas, config.outline_max_depth, config.show_extensions),
    )
