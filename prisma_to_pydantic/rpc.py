"""
Prisma generator process.

``prisma generate`` starts the generator named in the schema's generator
block and talks to it with newline-delimited JSON-RPC 2.0: requests arrive on
stdin, responses go to stderr. Two methods exist: ``getManifest`` and
``generate``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, TextIO

from .pipeline import GenerationError, GeneratorConfig, PipelineGenerator
from .pipeline.schema_ast import parse_datamodel

logger = logging.getLogger(__name__)

PRETTY_NAME = "Prisma Pydantic Generator"
DEFAULT_OUTPUT = "./generated/prisma_models"
ENABLE_ENV_VAR = "GENERATE_PYTHON"

# JSON-RPC error codes
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
GENERATION_FAILED = -32000


def is_enabled(environ: dict[str, str] | None = None) -> bool:
    """Whether GENERATE_PYTHON asks for generation; off unless set to "true"."""
    environ = os.environ if environ is None else environ
    return environ.get(ENABLE_ENV_VAR, "").strip().lower() == "true"


def get_manifest() -> dict[str, Any]:
    return {"manifest": {"prettyName": PRETTY_NAME, "defaultOutput": DEFAULT_OUTPUT}}


def generate(params: dict[str, Any], environ: dict[str, str] | None = None) -> None:
    """Run one generation from the options Prisma sends."""
    generator = params.get("generator") or {}
    config = GeneratorConfig.from_generator_options(generator.get("config") or {})
    config.enabled = is_enabled(environ)
    config.output_dir = (generator.get("output") or {}).get("value")

    datamodel = parse_datamodel(params.get("dmmf") or {})
    PipelineGenerator(datamodel, config).write()


def _generation_failed(request_id: Any, error: Exception) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": GENERATION_FAILED, "message": str(error), "data": {"type": type(error).__name__}},
    }


def handle_request(request: Any, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Answer one JSON-RPC request.

    Args:
        request: Decoded request with ``method``, ``params`` and ``id``
        environ: Environment to read GENERATE_PYTHON from

    Returns:
        The JSON-RPC response object
    """
    if not isinstance(request, dict):
        return {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": INVALID_REQUEST, "message": f"Request must be an object, got {type(request).__name__}"},
        }

    method = request.get("method")
    request_id = request.get("id")
    logger.debug("Received %s request %s", method, request_id)

    if method == "getManifest":
        return {"jsonrpc": "2.0", "id": request_id, "result": get_manifest()}

    if method == "generate":
        try:
            generate(request.get("params") or {}, environ)
        except (GenerationError, OSError) as e:
            logger.error("Generation failed: %s", e)
            return _generation_failed(request_id, e)
        except Exception as e:
            logger.exception("Unexpected error during generation")
            return _generation_failed(request_id, e)
        return {"jsonrpc": "2.0", "id": request_id, "result": None}

    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": METHOD_NOT_FOUND, "message": f"Method not found: {method}"},
    }


def serve(stdin: TextIO, stderr: TextIO, environ: dict[str, str] | None = None) -> None:
    """Answer requests line by line until stdin closes."""
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Ignoring a line that is not JSON: %.80s", line)
            continue

        response = handle_request(request, environ)
        stderr.write(json.dumps(response) + "\n")
        stderr.flush()


def main() -> None:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    serve(sys.stdin, sys.stderr)
