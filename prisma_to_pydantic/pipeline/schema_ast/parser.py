"""
DMMF parser that builds the schema nodes.

Phase 1 of the pipeline: turn the JSON datamodel Prisma hands to its
generators into typed nodes, without any Python-specific processing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SchemaParseError
from .nodes import Datamodel, DefaultFunction, EnumDef, EnumValueDef, FieldDef, FieldKind, ModelDef

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a DMMF datamodel into schema nodes."""

    def parse(self, data: dict[str, Any]) -> Datamodel:
        """
        Parse a DMMF document or its datamodel.

        Args:
            data: Either the full DMMF (``{"datamodel": {...}}``) or the
                datamodel itself (``{"models": [...], "enums": [...]}``)

        Returns:
            Datamodel with enums and models in input order

        Raises:
            SchemaParseError: If the input is not a DMMF datamodel
        """
        if not isinstance(data, dict):
            raise SchemaParseError(f"Expected a JSON object, got {type(data).__name__}")

        datamodel = data.get("datamodel", data)
        if not isinstance(datamodel, dict) or ("models" not in datamodel and "enums" not in datamodel):
            raise SchemaParseError("Input has no datamodel: expected 'models' and 'enums' lists")

        enums = [self._parse_enum(e) for e in self._get_list(datamodel, "enums", "datamodel")]
        models = [self._parse_model(m) for m in self._get_list(datamodel, "models", "datamodel")]
        return Datamodel(enums=enums, models=models)

    def _get_list(self, node: dict[str, Any], key: str, path: str) -> list[Any]:
        value = node.get(key) or []
        if not isinstance(value, list):
            raise SchemaParseError(f"{path}.{key} must be a list, got {type(value).__name__}")
        return value

    def _get_name(self, node: Any, path: str) -> str:
        if not isinstance(node, dict) or not node.get("name"):
            raise SchemaParseError(f"{path} has no name")
        if not isinstance(node["name"], str):
            raise SchemaParseError(f"{path} name must be a string, got {type(node['name']).__name__}")
        return node["name"]

    def _parse_enum(self, node: dict[str, Any]) -> EnumDef:
        name = self._get_name(node, "enum")
        values = []
        for value in self._get_list(node, "values", f"enum {name}"):
            values.append(
                EnumValueDef(
                    name=self._get_name(value, f"value of enum {name}"),
                    db_name=value.get("dbName"),
                )
            )
        return EnumDef(
            name=name,
            values=values,
            documentation=node.get("documentation"),
            db_name=node.get("dbName"),
        )

    def _parse_model(self, node: dict[str, Any]) -> ModelDef:
        name = self._get_name(node, "model")
        fields = [self._parse_field(f, name) for f in self._get_list(node, "fields", f"model {name}")]
        return ModelDef(
            name=name,
            fields=fields,
            documentation=node.get("documentation"),
            db_name=node.get("dbName"),
        )

    def _parse_field(self, node: dict[str, Any], model_name: str) -> FieldDef:
        name = self._get_name(node, f"field of model {model_name}")

        raw_kind = node.get("kind", "scalar")
        try:
            kind = FieldKind(raw_kind)
        except ValueError:
            logger.debug("Field %s.%s has unknown kind %r, treating it as unsupported", model_name, name, raw_kind)
            kind = FieldKind.UNSUPPORTED

        return FieldDef(
            name=name,
            kind=kind,
            type=node.get("type", ""),
            is_list=bool(node.get("isList", False)),
            is_required=bool(node.get("isRequired", True)),
            is_id=bool(node.get("isId", False)),
            is_unique=bool(node.get("isUnique", False)),
            is_updated_at=bool(node.get("isUpdatedAt", False)),
            has_default_value=bool(node.get("hasDefaultValue", False)),
            default=self._parse_default(node.get("default")),
            documentation=node.get("documentation"),
            db_name=node.get("dbName"),
            relation_name=node.get("relationName"),
            relation_from_fields=list(node.get("relationFromFields") or []),
            relation_to_fields=list(node.get("relationToFields") or []),
        )

    def _parse_default(self, value: Any) -> Any:
        """Function defaults become DefaultFunction, literals are kept as is."""
        if isinstance(value, dict) and "name" in value:
            return DefaultFunction(name=value["name"], args=list(value.get("args") or []))
        return value


def parse_datamodel(data: dict[str, Any]) -> Datamodel:
    """Parse a DMMF document or datamodel dictionary."""
    return SchemaParser().parse(data)


def load_datamodel(path: str | Path) -> Datamodel:
    """Read a DMMF JSON file and parse it."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"{path} is not valid JSON: {e}") from e
    return parse_datamodel(data)
