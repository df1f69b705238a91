"""
Configuration for the generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from ..utils import to_snake_case


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Whether the run writes anything at all
    enabled: bool = False

    # Directory of the generated package
    output_dir: str | None = None

    # Module holding the generated enums, imported by model files
    enums_module: str = "enums"

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Write the PEP 561 py.typed marker
    write_py_typed: bool = True

    # Parse generated Python before replacing the target file
    validate_before_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_generator_options(options: dict[str, str]) -> GeneratorConfig:
        """Create a config from the string values of a Prisma generator block.

        Keys may be camelCase (``enumsModule``); "true"/"false" become booleans
        for boolean options.
        """
        config = GeneratorConfig()
        types = {f.name: f.type for f in fields(GeneratorConfig)}
        for k, v in options.items():
            key = to_snake_case(k)
            if key not in types:
                continue
            if types[key] == "bool" and isinstance(v, str):
                v = v.strip().lower() == "true"
            setattr(config, key, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "enabled": self.enabled,
            "output_dir": self.output_dir,
            "enums_module": self.enums_module,
            "add_generation_comment": self.add_generation_comment,
            "write_py_typed": self.write_py_typed,
            "validate_before_write": self.validate_before_write,
        }
