"""
Code generation backends.

Contains the pydantic generator and the type and import helpers it uses.
"""

from __future__ import annotations

from .base import CodeBackend
from .imports import PythonImports, build_import_block
from .pydantic_backend import PydanticBackend
from .type_map import SCALAR_TYPE_MAP, PrismaScalar, map_scalar_type

__all__ = [
    "CodeBackend",
    "PydanticBackend",
    "PythonImports",
    "build_import_block",
    "PrismaScalar",
    "SCALAR_TYPE_MAP",
    "map_scalar_type",
]
