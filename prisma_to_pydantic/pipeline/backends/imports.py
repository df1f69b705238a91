"""
Import tracking for generated model files.

A PythonImports instance is created for one model, filled while its fields
are translated, then rendered once into the file's import block.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PythonImports:
    """Imports needed by one generated model file.

    Flags and name sets only ever grow while a model is translated.
    """

    datetime: bool = False
    decimal: bool = False
    typing: set[str] = field(default_factory=set)
    enum: bool = False
    pydantic: set[str] = field(default_factory=lambda: {"BaseModel"})

    def add_typing(self, name: str) -> None:
        self.typing.add(name)

    def add_pydantic(self, name: str) -> None:
        self.pydantic.add(name)


def build_import_block(
    imports: PythonImports,
    enum_names: list[str],
    relation_model_names: list[str],
    enums_module: str = "enums",
) -> str:
    """
    Build the import block of a model file.

    Args:
        imports: Tracked imports of the model
        enum_names: Enums used by the model, in first-use order
        relation_model_names: Related models, in first-use order. They need no
            import: annotations stay unevaluated until the package rebuilds
            its models.
        enums_module: Module of the package holding the enums

    Returns:
        The import lines followed by one blank line
    """
    lines = ["from __future__ import annotations", ""]

    if imports.datetime:
        lines.append("from datetime import datetime")
    if imports.decimal:
        lines.append("from decimal import Decimal")
    if imports.typing:
        lines.append(f"from typing import {', '.join(sorted(imports.typing))}")
    if imports.enum:
        lines.append("from enum import Enum")

    # BaseModel is always present
    lines.append(f"from pydantic import {', '.join(sorted(imports.pydantic))}")

    for name in enum_names:
        lines.append(f"from .{enums_module} import {name}")

    return "\n".join(lines) + "\n\n"
