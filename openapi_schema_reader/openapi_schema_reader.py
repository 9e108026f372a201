import json
import logging

import click

from .config import ReaderConfig
from .errors import SchemaFormatError
from .readers import load_document, read_document_schemas
from .report import render_outline


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--pointer", "-p", default=None, type=str, help="JSON pointer to the schemas, e.g. /components/schemas")
@click.option("--single", is_flag=True, default=False, help="Read the node at the pointer as a single schema")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def openapi_schema_reader(config, pointer, single, verbose, path, output):
    """Read the schemas of a JSON document and print their outline."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        config_path = config
        try:
            with open(config_path) as f:
                config = ReaderConfig.from_dict(json.load(f))
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{config_path} is not valid JSON: {e}") from e
        except ValueError as e:
            raise click.ClickException(f"{config_path}: {e}") from e
    else:
        config = ReaderConfig()

    # CLI flags override the config file
    if pointer is not None:
        config.schemas_pointer = pointer
    if single:
        config.single_schema = True

    try:
        document = load_document(path)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e

    try:
        schemas = read_document_schemas(document, config)
    except SchemaFormatError as e:
        raise click.ClickException(str(e)) from e

    if schemas is None:
        raise click.ClickException(f"No schemas found at '{config.schemas_pointer}'")

    out = render_outline(schemas, config)
    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)
