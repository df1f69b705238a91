"""
Pipeline generator: assembles the generated package.

Translates every enum and model of a datamodel, adds the package
``__init__.py`` and ``py.typed`` marker, and writes the files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils import file_header, model_to_file_name
from .backends import PydanticBackend
from .config import GeneratorConfig
from .errors import GenerationError
from .schema_ast import Datamodel
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates a pydantic package from a Prisma datamodel."""

    def __init__(self, datamodel: Datamodel, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            datamodel: Parsed datamodel
            config: Generation configuration
        """
        self.datamodel = datamodel
        self.config = config or GeneratorConfig()
        self.backend = PydanticBackend(self.config)

    def generate(self) -> dict[str, str]:
        """
        Generate every file of the package.

        Returns:
            Mapping of file name to content, in writing order

        Raises:
            GenerationError: If two generated modules would share a file name
        """
        header = file_header() if self.config.add_generation_comment else ""
        enums = self.datamodel.enums
        models = self.datamodel.models
        enum_names = self.datamodel.enum_names

        files: dict[str, str] = {}

        if enums:
            files[f"{self.config.enums_module}.py"] = header + self.backend.translate_enums_file(enums)

        model_modules = []
        for model in models:
            module = model_to_file_name(model.name)
            file_name = f"{module}.py"
            if file_name in files or module == "__init__":
                raise GenerationError(f"Model {model.name} would overwrite the generated file {file_name}")
            files[file_name] = header + self.backend.translate_model(model, enum_names)
            model_modules.append((module, model.name))

        init = self.backend.render_package_init([e.name for e in enums], model_modules)
        files["__init__.py"] = header + init

        if self.config.write_py_typed:
            files["py.typed"] = ""

        return files

    def write(self, output_dir: str | Path | None = None) -> list[Path]:
        """
        Generate the package and write it to disk.

        Args:
            output_dir: Target directory; defaults to ``config.output_dir``

        Returns:
            Paths written, empty when generation is disabled

        Raises:
            GenerationError: If no output directory is configured or a
                generated file does not validate
        """
        if not self.config.enabled:
            logger.info("Generation disabled, skipping (enable it with GENERATE_PYTHON=true)")
            return []

        target = output_dir or self.config.output_dir
        if not target:
            raise GenerationError("No output directory specified for the generated package")

        out = Path(target)
        out.mkdir(parents=True, exist_ok=True)

        writer = AtomicWriter()
        written = []
        for file_name, content in self.generate().items():
            path = out / file_name
            writer.write(path, content, validate=self.config.validate_before_write)
            written.append(path)
            logger.debug("Wrote %s", path)

        logger.info(
            "Generated %d enum(s) and %d model(s) in %s",
            len(self.datamodel.enums),
            len(self.datamodel.models),
            out,
        )
        return written
