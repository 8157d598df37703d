import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pulumi_xyz.config.logging_config import configure_logging, get_logger
from pulumi_xyz.config.metadata import load_api_metadata
from pulumi_xyz.errors import SchemaGenerationError

console = Console()
log = get_logger(__name__)


def _fail(message: str) -> None:
    console.print(f"[bold red]Failed: {escape(message)}[/]")
    sys.exit(1)


@click.group()
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...).")
def cli(log_level: Optional[str]):
    """pulumi-sdkgen-xyz - generate the xyz Pulumi schema from an OpenAPI document."""
    try:
        configure_logging(level=log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e


@cli.command("schema")
@click.argument("swagger", type=str)
@click.argument("out_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--version", "version", required=True, help="Version stamped into the schema.")
@click.option("--package-name", default="xyz", help="Pulumi package name.")
def schema(swagger: str, out_dir: Path, version: str, package_name: str):
    """Emit schema.json and metadata.json for SWAGGER (file path or URL) into OUT_DIR."""
    import httpx

    from pulumi_xyz.gen.schema import (
        emit_metadata,
        emit_schema,
        generate_schema,
        load_swagger_spec,
    )

    try:
        spec = load_swagger_spec(swagger)
        pkg, metadata = generate_schema(spec, package_name=package_name)
        schema_path = emit_schema(pkg, version, out_dir)
        metadata_path = emit_metadata(metadata, out_dir)
    except (OSError, httpx.HTTPError, SchemaGenerationError) as e:
        _fail(str(e))
        return

    table = Table(title=f"{package_name} {version}")
    table.add_column("Resource", style="cyan")
    table.add_column("Inputs", style="green")
    table.add_column("Required", style="yellow")
    for tok, resource in pkg.resources.items():
        table.add_row(
            tok,
            ", ".join(sorted(resource.input_properties)),
            ", ".join(resource.required_inputs),
        )
    console.print(table)
    console.print(f"[green]Wrote {schema_path}[/]")
    console.print(f"[green]Wrote {metadata_path}[/]")


@cli.command("resources")
@click.option(
    "--metadata",
    "metadata_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="metadata.json to read instead of the bundled one.",
)
def resources(metadata_path: Optional[Path]):
    """List resource types and their API endpoints."""
    try:
        metadata = load_api_metadata(metadata_path)
    except (OSError, ValidationError) as e:
        _fail(str(e))
        return

    if not metadata.resource_urls:
        console.print("[bold yellow]No resources defined.[/]")
        return

    table = Table(title=f"Resources at {metadata.base_url}")
    table.add_column("Type", style="cyan")
    table.add_column("URL", style="green")
    for tok in sorted(metadata.resource_urls):
        table.add_row(tok, metadata.resource_url(tok))
    console.print(table)


if __name__ == "__main__":
    cli()
