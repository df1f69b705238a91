import json
import logging

import click

from .pipeline import GenerationError, GeneratorConfig, PipelineGenerator
from .pipeline.schema_ast import load_datamodel


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--enums-module", default=None, type=str, help="Module name of the generated enums")
@click.option(
    "--enable/--disable",
    "enabled",
    default=False,
    envvar="GENERATE_PYTHON",
    show_envvar=True,
    help="Whether to write anything (defaults to the GENERATE_PYTHON environment variable)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every file written and every type fallback")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def prisma_to_pydantic(config, enums_module, enabled, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    config.enabled = enabled
    config.output_dir = output
    if enums_module is not None:
        config.enums_module = enums_module

    try:
        datamodel = load_datamodel(path)
        written = PipelineGenerator(datamodel, config).write()
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    if not written:
        click.echo("prisma_to_pydantic: skipping, pass --enable or set GENERATE_PYTHON=true to enable.")
