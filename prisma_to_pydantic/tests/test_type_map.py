import pytest

from prisma_to_pydantic.pipeline.backends import PrismaScalar, PythonImports, build_import_block, map_scalar_type
from prisma_to_pydantic.pipeline.backends.type_map import SCALAR_TYPE_MAP


class TestMapScalarType:
    @pytest.mark.parametrize(
        "prisma_type,expected",
        [
            ("String", "str"),
            ("Boolean", "bool"),
            ("Int", "int"),
            ("BigInt", "int"),
            ("Float", "float"),
            ("Bytes", "bytes"),
        ],
    )
    def test_plain_types_need_no_import(self, prisma_type, expected):
        imports = PythonImports()
        assert map_scalar_type(prisma_type, imports) == expected
        assert imports == PythonImports()

    def test_datetime_tracks_import(self):
        imports = PythonImports()
        assert map_scalar_type("DateTime", imports) == "datetime"
        assert imports.datetime is True
        assert imports.decimal is False
        assert imports.typing == set()

    def test_decimal_tracks_import(self):
        imports = PythonImports()
        assert map_scalar_type("Decimal", imports) == "Decimal"
        assert imports.decimal is True
        assert imports.datetime is False

    def test_json_maps_to_any(self):
        imports = PythonImports()
        assert map_scalar_type("Json", imports) == "Any"
        assert imports.typing == {"Any"}

    @pytest.mark.parametrize("prisma_type", ["UnknownType", "string", "", "Unsupported"])
    def test_unknown_types_map_to_any(self, prisma_type):
        imports = PythonImports()
        assert map_scalar_type(prisma_type, imports) == "Any"
        assert imports.typing == {"Any"}

    def test_flags_are_never_cleared(self):
        imports = PythonImports()
        map_scalar_type("DateTime", imports)
        map_scalar_type("String", imports)
        map_scalar_type("DateTime", imports)
        assert imports.datetime is True

    def test_every_scalar_is_mapped(self):
        assert set(SCALAR_TYPE_MAP) == set(PrismaScalar)


class TestBuildImportBlock:
    def test_minimal_block(self):
        block = build_import_block(PythonImports(), [], [])
        assert block == "from __future__ import annotations\n\nfrom pydantic import BaseModel\n\n"

    def test_future_annotations_first(self):
        imports = PythonImports(datetime=True, decimal=True)
        block = build_import_block(imports, ["Role"], [])
        assert block.splitlines()[0] == "from __future__ import annotations"

    def test_full_block_order(self):
        imports = PythonImports(datetime=True, decimal=True, enum=True)
        imports.add_typing("Any")
        imports.add_pydantic("Field")
        imports.add_pydantic("ConfigDict")

        block = build_import_block(imports, ["Status", "Role"], ["User"])

        assert block == (
            "from __future__ import annotations\n"
            "\n"
            "from datetime import datetime\n"
            "from decimal import Decimal\n"
            "from typing import Any\n"
            "from enum import Enum\n"
            "from pydantic import BaseModel, ConfigDict, Field\n"
            "from .enums import Status\n"
            "from .enums import Role\n"
            "\n"
        )

    def test_typing_names_sorted(self):
        imports = PythonImports()
        imports.add_typing("Literal")
        imports.add_typing("Any")
        assert "from typing import Any, Literal\n" in build_import_block(imports, [], [])

    def test_relations_are_not_imported(self):
        block = build_import_block(PythonImports(), [], ["User", "Post"])
        assert "User" not in block
        assert "Post" not in block

    def test_custom_enums_module(self):
        block = build_import_block(PythonImports(), ["Role"], [], enums_module="types_enums")
        assert "from .types_enums import Role" in block

    def test_deterministic(self):
        def build():
            imports = PythonImports()
            for name in ["Field", "ConfigDict"]:
                imports.add_pydantic(name)
            return build_import_block(imports, ["Role"], [])

        def build_reversed():
            imports = PythonImports()
            for name in ["ConfigDict", "Field"]:
                imports.add_pydantic(name)
            return build_import_block(imports, ["Role"], [])

        assert build() == build_reversed()
