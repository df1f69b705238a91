"""
Schema AST module.

Contains the datamodel node definitions and the DMMF parser.
"""

from __future__ import annotations

from .nodes import (
    Datamodel,
    DefaultFunction,
    EnumDef,
    EnumValueDef,
    FieldDef,
    FieldKind,
    ModelDef,
)
from .parser import SchemaParser, load_datamodel, parse_datamodel

__all__ = [
    "Datamodel",
    "DefaultFunction",
    "EnumDef",
    "EnumValueDef",
    "FieldDef",
    "FieldKind",
    "ModelDef",
    "SchemaParser",
    "load_datamodel",
    "parse_datamodel",
]
