"""Canonical spec commands."""

import json
from pathlib import Path

import click

from ..config import get_settings
from ..data import load_canonical_spec
from ..errors import ValidationError
from .base import echo_error, echo_success, format_table


@click.group()
def spec():
    """Inspect the canonical catalog."""


@spec.command(name="show")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Canonical catalog JSON (default: built-in catalog)",
)
@click.pass_context
def show_spec(ctx, spec_path: Path | None):
    """List canonical class types and their exercises."""
    try:
        canonical = load_canonical_spec(spec_path or get_settings().canonical_spec)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    rows = [
        [ct.name, str(len(ct.exercises)), ", ".join(ct.exercise_names)]
        for ct in canonical
    ]
    click.echo(format_table(["Class Type", "Count", "Exercises"], rows))


@spec.command(name="dump")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Canonical catalog JSON (default: built-in catalog)",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.pass_context
def dump_spec(ctx, spec_path: Path | None, output: Path | None):
    """Write the canonical catalog as JSON (to stdout by default)."""
    try:
        canonical = load_canonical_spec(spec_path or get_settings().canonical_spec)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    text = json.dumps(canonical.to_dict(), indent=2)
    if output is None:
        click.echo(text)
        return
    output.write_text(text)
    echo_success(f"Canonical spec written to {output}")
