"""
Schema node definitions.

These nodes mirror the Prisma DMMF datamodel: enums, models and their
fields, already parsed and ready for translation. They are read-only
during generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldKind(str, Enum):
    """Kind of a model field."""

    SCALAR = "scalar"  # String, Int, DateTime, ...
    ENUM = "enum"  # Reference to an enum of the datamodel
    OBJECT = "object"  # Relation to another model
    UNSUPPORTED = "unsupported"  # Unsupported("...") database types


@dataclass
class DefaultFunction:
    """A default computed by the database or client, e.g. ``autoincrement()``."""

    name: str = ""
    args: list[Any] = field(default_factory=list)


@dataclass
class EnumValueDef:
    """A single enum member."""

    name: str = ""
    db_name: str | None = None


@dataclass
class EnumDef:
    """An enum definition."""

    name: str = ""
    values: list[EnumValueDef] = field(default_factory=list)
    documentation: str | None = None
    db_name: str | None = None


@dataclass
class FieldDef:
    """A field of a model."""

    name: str = ""
    kind: FieldKind = FieldKind.SCALAR

    # Scalar name, enum name or related model name depending on kind
    type: str = ""

    is_list: bool = False
    is_required: bool = True
    is_id: bool = False
    is_unique: bool = False
    is_updated_at: bool = False

    # Literal value, DefaultFunction, or a list for scalar lists
    has_default_value: bool = False
    default: Any = None

    documentation: str | None = None
    db_name: str | None = None

    # For relation fields
    relation_name: str | None = None
    relation_from_fields: list[str] = field(default_factory=list)
    relation_to_fields: list[str] = field(default_factory=list)


@dataclass
class ModelDef:
    """A model definition."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)
    documentation: str | None = None
    db_name: str | None = None


@dataclass
class Datamodel:
    """The complete datamodel of one generation run."""

    enums: list[EnumDef] = field(default_factory=list)
    models: list[ModelDef] = field(default_factory=list)

    @property
    def enum_names(self) -> set[str]:
        """Names of all enums, for resolving enum fields."""
        return {e.name for e in self.enums}
