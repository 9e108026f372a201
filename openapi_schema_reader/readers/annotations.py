"""
Annotation source model.

Annotation metadata is read without executing the annotated program: an
index produced elsewhere hands over AnnotationInstance objects whose values
are plain Python data (str, bool, int, float, lists, ClassRef and nested
AnnotationInstance). The helpers in this module read typed values off them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from ..errors import SchemaFormatError
from ..utils import name_from_ref_path, schema_ref
from .json_util import parse_decimal

PROP_REF = "ref"


@dataclass(frozen=True)
class ClassRef:
    """Reference to a class by its qualified name (e.g. "shop.models.Pet" or "str")."""

    name: str

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    @staticmethod
    def of(cls: type) -> ClassRef:
        if cls.__module__ == "builtins":
            return ClassRef(cls.__qualname__)
        return ClassRef(f"{cls.__module__}.{cls.__qualname__}")


@dataclass
class AnnotationInstance:
    """A single annotation: its type name and the attributes set explicitly."""

    name: str
    values: dict[str, Any] = field(default_factory=dict)

    # Declaration the annotation is attached to, if known
    target: str | None = None

    def value(self, name: str) -> AnnotationValue | None:
        raw = self.values.get(name)
        if raw is None:
            return None
        return AnnotationValue(name, raw)


@dataclass(frozen=True)
class AnnotationValue:
    """A named attribute value of an annotation."""

    name: str
    raw: Any

    def as_string(self) -> str:
        if not isinstance(self.raw, str):
            raise SchemaFormatError(self.name, self.raw, "a string")
        return self.raw

    def as_boolean(self) -> bool:
        if not isinstance(self.raw, bool):
            raise SchemaFormatError(self.name, self.raw, "a boolean")
        return self.raw

    def as_int(self) -> int:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise SchemaFormatError(self.name, self.raw, "an integer")
        return self.raw

    def as_decimal(self) -> Decimal:
        return parse_decimal(self.name, self.raw)

    def as_enum(self, enum_type: type[Enum]) -> Enum:
        if isinstance(self.raw, enum_type):
            return self.raw
        if isinstance(self.raw, str):
            try:
                return enum_type[self.raw.upper()]
            except KeyError as e:
                raise SchemaFormatError(self.name, self.raw, f"one of {[m.name for m in enum_type]}") from e
        raise SchemaFormatError(self.name, self.raw, f"a {enum_type.__name__} value")

    def as_class(self) -> ClassRef:
        return self._to_class_ref(self.raw)

    def as_nested(self) -> AnnotationInstance:
        if not isinstance(self.raw, AnnotationInstance):
            raise SchemaFormatError(self.name, self.raw, "a nested annotation")
        return self.raw

    def as_string_array(self) -> list[str]:
        return [AnnotationValue(self.name, item).as_string() for item in self._as_list()]

    def as_class_array(self) -> list[ClassRef]:
        return [self._to_class_ref(item) for item in self._as_list()]

    def as_nested_array(self) -> list[AnnotationInstance]:
        return [AnnotationValue(self.name, item).as_nested() for item in self._as_list()]

    def _as_list(self) -> list[Any]:
        # A single value is accepted where an array is expected
        if isinstance(self.raw, (list, tuple)):
            return list(self.raw)
        return [self.raw]

    def _to_class_ref(self, value: Any) -> ClassRef:
        if isinstance(value, ClassRef):
            return value
        if isinstance(value, type):
            return ClassRef.of(value)
        raise SchemaFormatError(self.name, value, "a class reference")


class ClassIndex:
    """Index of classes carrying a schema annotation, keyed by qualified class name."""

    def __init__(self, annotations: dict[str, AnnotationInstance] | None = None):
        self._annotations: dict[str, AnnotationInstance] = dict(annotations or {})

    def add(self, class_ref: ClassRef, annotation: AnnotationInstance) -> None:
        self._annotations[class_ref.name] = annotation

    def get_schema_annotation(self, class_ref: ClassRef) -> AnnotationInstance | None:
        return self._annotations.get(class_ref.name)

    def __contains__(self, class_ref: ClassRef) -> bool:
        return class_ref.name in self._annotations

    def __len__(self) -> int:
        return len(self._annotations)


def string_value(annotation: AnnotationInstance, prop: str) -> str | None:
    """Return a string attribute, or None when it is not set."""
    value = annotation.value(prop)
    if value is None:
        return None
    return value.as_string()


def is_ref(annotation: AnnotationInstance) -> bool:
    """Check if the annotation declares a reference instead of inline fields."""
    return bool(string_value(annotation, PROP_REF))


def ref_value(annotation: AnnotationInstance) -> str | None:
    """Return the annotation's reference, expanding a bare schema name to a components ref."""
    ref = string_value(annotation, PROP_REF)
    if not ref:
        return None
    return schema_ref(ref)


def name_from_ref(annotation: AnnotationInstance) -> str | None:
    """Derive a schema name from the last segment of the annotation's reference."""
    ref = ref_value(annotation)
    if ref is None:
        return None
    return name_from_ref_path(ref)
