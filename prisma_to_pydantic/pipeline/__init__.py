"""
Pipeline - Prisma datamodel to pydantic code generator.

The generator runs in three phases:

1. Phase 1 (Parser): Parse the DMMF datamodel into schema nodes
2. Phase 2 (Backend): Translate enums and models into Python source
3. Phase 3 (Writer): Assemble the package and write it atomically
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import GenerationError, SchemaParseError
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GenerationError",
    "SchemaParseError",
    "AtomicWriter",
]
