"""
Pydantic code generation backend.

Generates pydantic v2 model and str-backed enum source from schema nodes.
"""

from __future__ import annotations

import keyword
import logging
from typing import Any

from ...utils import escape_string, format_docstring, to_snake_case
from ..schema_ast.nodes import DefaultFunction, EnumDef, FieldDef, FieldKind, ModelDef
from .base import CodeBackend
from .imports import PythonImports, build_import_block
from .type_map import ANY_TYPE, is_known_scalar, map_scalar_type

logger = logging.getLogger(__name__)

# Module-level names of a model file a field must not shadow in the class body
RESERVED_FIELD_NAMES = frozenset({"datetime", "Decimal", "Any", "BaseModel", "ConfigDict", "Field", "model_config"})


def _enum_member_name(value: str) -> str:
    return f"{value}_" if keyword.iskeyword(value) else value


class PydanticBackend(CodeBackend):
    """Pydantic code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def translate_enum(self, enum_def: EnumDef) -> str:
        """
        Generate a ``(str, Enum)`` class whose member values are their names.

        Keyword values (``None``, ``True``, ``class``) get a trailing
        underscore on the member name only, so ``Flag("None")`` still works.
        """
        return self.enum_template.render(
            enum_name=enum_def.name,
            docstring=format_docstring(enum_def.documentation) if enum_def.documentation else None,
            members=[(_enum_member_name(value.name), value.name) for value in enum_def.values],
        )

    def translate_enums_file(self, enums: list[EnumDef]) -> str:
        """Generate the enums module; empty when the datamodel has no enums."""
        if not enums:
            return ""

        classes = [self.translate_enum(enum_def) for enum_def in enums]
        return "from enum import Enum\n\n\n" + "\n\n".join(classes)

    def translate_model(self, model_def: ModelDef, known_enum_names: set[str]) -> str:
        """Generate a model file: import block, BaseModel class and model_config."""
        imports = PythonImports()
        field_lines = []
        enums_used: list[str] = []
        relation_models: list[str] = []

        for field in model_def.fields:
            line = self.translate_field(field, imports, known_enum_names, enums_used, relation_models)
            if line is not None:
                field_lines.append(line)

        # model_config is always emitted
        imports.add_pydantic("ConfigDict")

        # Imports are rendered last, once every field has been tracked
        import_block = build_import_block(imports, enums_used, relation_models, self.config.enums_module)

        return self.model_template.render(
            import_block=import_block,
            model_name=model_def.name,
            docstring=format_docstring(model_def.documentation) if model_def.documentation else None,
            field_lines=field_lines,
        )

    def translate_field(
        self,
        field: FieldDef,
        imports: PythonImports,
        known_enum_names: set[str],
        enums_used: list[str],
        relation_models: list[str],
    ) -> str | None:
        """Generate one ``name: type [= default]`` line of a model body."""
        py_name = to_snake_case(field.name)
        if keyword.iskeyword(py_name) or py_name in RESERVED_FIELD_NAMES or py_name in known_enum_names:
            py_name += "_"
        needs_alias = py_name != field.name

        py_type = self._translate_field_type(field, imports, known_enum_names, enums_used, relation_models)

        if field.is_list:
            py_type = f"list[{py_type}]"
        elif not field.is_required:
            py_type = f"{py_type} | None"

        default, factory = self._field_default(field)

        parts = []
        if needs_alias:
            parts.append(f'alias="{field.name}"')
        if field.documentation:
            parts.append(f'description="{escape_string(field.documentation)}"')

        if parts or factory:
            if factory:
                parts.insert(0, f"default_factory={factory}")
            elif default is not None:
                parts.insert(0, f"default={default}")
            imports.add_pydantic("Field")
            return f"{py_name}: {py_type} = Field({', '.join(parts)})"

        if default is not None:
            return f"{py_name}: {py_type} = {default}"
        return f"{py_name}: {py_type}"

    def _translate_field_type(
        self,
        field: FieldDef,
        imports: PythonImports,
        known_enum_names: set[str],
        enums_used: list[str],
        relation_models: list[str],
    ) -> str:
        """Resolve the base type of a field, before list/optional wrapping."""
        if field.kind == FieldKind.SCALAR:
            if not is_known_scalar(field.type):
                logger.debug("Field %s has unknown scalar type %r, using Any", field.name, field.type)
            return map_scalar_type(field.type, imports)

        if field.kind == FieldKind.ENUM:
            if field.type in known_enum_names:
                if field.type not in enums_used:
                    enums_used.append(field.type)
            else:
                logger.debug("Field %s references unknown enum %r, using the bare name", field.name, field.type)
            return field.type

        if field.kind == FieldKind.OBJECT:
            # Unquoted: `from __future__ import annotations` already defers evaluation
            if field.type not in relation_models:
                relation_models.append(field.type)
            return field.type

        imports.add_typing(ANY_TYPE)
        return ANY_TYPE

    def _field_default(self, field: FieldDef) -> tuple[str | None, str | None]:
        """
        Work out the default of a field.

        Returns:
            (default literal, default factory); at most one is set
        """
        if field.has_default_value and not field.is_id and field.default is not None:
            default = self.format_default_value(field.default)
            if default is None:
                logger.debug("Field %s has a default that is not a Python literal, dropping it", field.name)
            return default, None
        if not field.is_required and not field.is_list:
            return "None", None
        if field.is_list:
            return None, "list"
        return None, None

    def format_default_value(self, value: Any) -> str | None:
        """Format a Prisma default as a Python literal."""
        if value is None:
            return None

        # autoincrement(), now(), uuid(), cuid(): assigned at runtime
        if isinstance(value, DefaultFunction):
            return None

        # bool before int: bool is a subclass of int
        if isinstance(value, bool):
            return "True" if value else "False"

        if isinstance(value, str):
            return f'"{escape_string(value)}"'

        if isinstance(value, (int, float)):
            return str(value)

        # Scalar list and object defaults are not supported
        return None

    def render_package_init(self, enum_names: list[str], models: list[tuple[str, str]]) -> str:
        """
        Generate the package ``__init__.py``.

        Args:
            enum_names: Enum names, in datamodel order
            models: (module, model name) pairs, in datamodel order

        Returns:
            Source re-exporting everything and rebuilding the models
        """
        exports = list(enum_names) + [name for _, name in models]
        return self.package_init_template.render(
            enum_names=enum_names,
            enums_module=self.config.enums_module,
            models=models,
            exports=exports,
        )
