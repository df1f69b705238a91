"""
Base class for code generation backends.

Defines the interface that the language-specific backend implements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..config import GeneratorConfig
from ..schema_ast.nodes import EnumDef, FieldDef, ModelDef
from .imports import PythonImports


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config or GeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )

        self.model_template = self.jinja_env.get_template(f"model.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.package_init_template = self.jinja_env.get_template(f"package_init.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def translate_enum(self, enum_def: EnumDef) -> str:
        """
        Generate the source of one enum class.

        Args:
            enum_def: The enum definition

        Returns:
            Class source ending with a newline
        """

    @abstractmethod
    def translate_model(self, model_def: ModelDef, known_enum_names: set[str]) -> str:
        """
        Generate the source of one model file, imports included.

        Args:
            model_def: The model definition
            known_enum_names: Names of every enum of the datamodel

        Returns:
            File source ending with a newline
        """

    @abstractmethod
    def translate_field(
        self,
        field: FieldDef,
        imports: PythonImports,
        known_enum_names: set[str],
        enums_used: list[str],
        relation_models: list[str],
    ) -> str | None:
        """
        Generate one field declaration.

        Args:
            field: The field definition
            imports: Import tracker of the model being generated
            known_enum_names: Names of every enum of the datamodel
            enums_used: Enums referenced so far, appended to in first-use order
            relation_models: Related models so far, appended to in first-use order

        Returns:
            The declaration line, or None to leave the field out
        """

    @abstractmethod
    def format_default_value(self, value: Any) -> str | None:
        """
        Format a default value for the target language.

        Args:
            value: The default value from the schema

        Returns:
            Formatted literal, or None when it cannot be represented
        """
