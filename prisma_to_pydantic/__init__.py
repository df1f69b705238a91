"""Prisma to Pydantic Generator

A Python package for generating pydantic models and enums from a Prisma
datamodel (DMMF), usable as a Prisma generator or from the command line.
"""

__version__ = "0.1.0"

from .pipeline import (
    AtomicWriter,
    GenerationError,
    GeneratorConfig,
    PipelineGenerator,
    SchemaParseError,
)
from .pipeline.schema_ast import load_datamodel, parse_datamodel

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GenerationError",
    "SchemaParseError",
    "AtomicWriter",
    "load_datamodel",
    "parse_datamodel",
]
