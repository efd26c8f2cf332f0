import json
import logging
from pathlib import Path

import click

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    ConfigurationError,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
)
from .pipeline.analyzer import to_pascal_case


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Name of the root declaration (defaults to the schema's name, then the file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--no-export", is_flag=True, default=False, help="Do not prefix declarations with `export`")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log compilation details")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_ts(name, config, force, no_export, verbose, path, output):
    """Generate TypeScript declarations from the JSON shape description in PATH."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(path) as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{config} is not valid JSON: {e}") from e
        except ConfigurationError as e:
            raise click.ClickException(f"{config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if force:
        config.output.mode = OutputMode.FORCE
    if no_export:
        config.export_types = False

    if name is None and not (isinstance(schema, dict) and schema.get("name")):
        name = to_pascal_case(Path(path).stem.removesuffix(".schema"))

    try:
        result = PipelineGenerator(schema, config, name).generate()
        AtomicWriter().write(
            Path(output),
            result.full_text + "\n",
            mode=config.output.mode,
            validate=config.output.validate_before_write,
        )
    except (ConfigurationError, OutputWriteError) as e:
        raise click.ClickException(str(e)) from e
