"""
Exceptions raised outside the translation core.

The translators themselves never raise for imprecise input; they fall back
to the closest safe representation instead.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when a generation run cannot produce or write its files."""


class SchemaParseError(GenerationError):
    """Raised when the DMMF input does not have the expected structure."""
