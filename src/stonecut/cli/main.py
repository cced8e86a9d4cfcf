"""Typer CLI for stone slab nesting."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stonecut.application import (
    NestingResult,
    NestingService,
    SlabSelectionError,
)
from stonecut.application.config import (
    ConfigError,
    config_to_catalog,
    config_to_initial_slabs,
    config_to_nesting,
    config_to_pieces,
    load_config,
    validate_job,
)
from stonecut.cli.commands import display_validation_result, validate_command
from stonecut.domain import DimensionNormalizer
from stonecut.infrastructure import JsonExporter, LayoutReportFormatter

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="stonecut",
    help="Nest rectangular stone pieces onto rectangular and L-shaped slabs.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _ask_for_slabs(service: NestingService, result: NestingResult) -> NestingResult:
    """Offer the remaining candidates of each material that still needs slabs.

    An empty answer stops asking for that material.
    """
    for material_run in result.materials:
        material_id = material_run.material_id
        while True:
            current = result.for_material(material_id)
            if current is None or not current.needs_additional_slab:
                break
            candidates = service.candidates_for(result, material_id)
            if not candidates:
                typer.echo(f"No more slabs available for material '{material_id}'.")
                break

            typer.echo(
                f"Material '{material_id}': {len(current.unplaced)} piece(s) unplaced. "
                "Available slabs:"
            )
            for slab in candidates:
                typer.echo(f"  {slab.id:<16} {slab.width:g} x {slab.height:g} cm  {slab.location}")

            slab_id = typer.prompt(
                "Slab to add (leave empty to stop)", default="", show_default=False
            ).strip()
            if not slab_id:
                break
            try:
                result = service.add_slab(result, material_id, slab_id)
            except SlabSelectionError as e:
                typer.echo(f"Error: {e}", err=True)
    return result


@app.command()
def optimize(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    auto_fill: Annotated[
        bool,
        typer.Option("--auto-fill", help="Add catalog slabs automatically while pieces remain"),
    ] = False,
    max_extra_slabs: Annotated[
        int | None,
        typer.Option(
            "--max-extra-slabs",
            min=0,
            help="Maximum slabs added per material by --auto-fill",
        ),
    ] = None,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Ask which slab to add when pieces remain"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Nest the pieces of a job onto its slabs and print the layout.

    Exit codes:
        0 - Every piece was placed
        1 - The job file could not be loaded or is invalid
        2 - Some pieces remain unplaced

    Examples:
        stonecut optimize kitchen-order.json
        stonecut optimize kitchen-order.json --auto-fill --max-extra-slabs 2
        stonecut optimize kitchen-order.json --format json --output layout.json
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        job = load_config(job_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    validation = validate_job(job)
    if not validation.is_valid:
        display_validation_result(validation)
        raise typer.Exit(code=1)

    nesting = config_to_nesting(job)
    normalizer = DimensionNormalizer(nesting)
    service = NestingService(config_to_catalog(job, normalizer), nesting)

    try:
        result = service.optimize(
            config_to_pieces(job, normalizer),
            config_to_initial_slabs(job),
        )
    except SlabSelectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if auto_fill:
        result = service.auto_fill(result, max_extra_slabs)
    if interactive:
        result = _ask_for_slabs(service, result)

    if output_format == "json":
        report = JsonExporter().export(result)
    else:
        report = LayoutReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Report written to {output_file}")
    else:
        typer.echo(report)

    raise typer.Exit(code=0 if result.is_complete else 2)


if __name__ == "__main__":
    app()
