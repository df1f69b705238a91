"""
Prisma scalar to Python type mapping.
"""

from __future__ import annotations

from enum import Enum

from .imports import PythonImports


class PrismaScalar(str, Enum):
    """Scalar types of the Prisma schema language."""

    STRING = "String"
    BOOLEAN = "Boolean"
    INT = "Int"
    BIG_INT = "BigInt"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    DATE_TIME = "DateTime"
    JSON = "Json"
    BYTES = "Bytes"


ANY_TYPE = "Any"

_SCALAR_NAMES = frozenset(s.value for s in PrismaScalar)

SCALAR_TYPE_MAP: dict[PrismaScalar, str] = {
    PrismaScalar.STRING: "str",
    PrismaScalar.BOOLEAN: "bool",
    PrismaScalar.INT: "int",
    PrismaScalar.BIG_INT: "int",
    PrismaScalar.FLOAT: "float",
    PrismaScalar.DECIMAL: "Decimal",
    PrismaScalar.DATE_TIME: "datetime",
    PrismaScalar.JSON: ANY_TYPE,
    PrismaScalar.BYTES: "bytes",
}


def is_known_scalar(prisma_type: str) -> bool:
    return prisma_type in _SCALAR_NAMES


def map_scalar_type(prisma_type: str, imports: PythonImports) -> str:
    """
    Translate a Prisma scalar type name to a Python type and track its imports.

    Args:
        prisma_type: Scalar name as found in the DMMF (e.g. "DateTime")
        imports: Import tracker of the model being generated

    Returns:
        Python type string; "Any" for unknown scalars
    """
    if not is_known_scalar(prisma_type):
        imports.add_typing(ANY_TYPE)
        return ANY_TYPE

    py_type = SCALAR_TYPE_MAP[PrismaScalar(prisma_type)]
    if py_type == "datetime":
        imports.datetime = True
    elif py_type == "Decimal":
        imports.decimal = True
    elif py_type == ANY_TYPE:
        imports.add_typing(ANY_TYPE)
    return py_type
