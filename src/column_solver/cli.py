"""Command-line interface for the Column Solver.

Usage::

    column-solver [interactive]
    column-solver run <case_yaml> [-o output_dir]
    column-solver template
    column-solver validate <case_yaml>
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import yaml

from .input_parser import InputError, generate_template, parse_cases
from .report import evaluation_to_dict, format_report


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group(invoke_without_command=True)
@click.version_option(package_name="column-solver")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Column Solver - Euler and Johnson buckling loads."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive)


# ---------------------------------------------------------------------------
# interactive
# ---------------------------------------------------------------------------

@main.command()
def interactive() -> None:
    """Start the menu-driven calculator."""
    from .shell import run_session

    run_session()


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

def _load(input_path: Path):
    try:
        return parse_cases(input_path)
    except yaml.YAMLError as exc:
        click.secho(f"YAML syntax error:\n  {exc}", fg="red", err=True)
        raise SystemExit(1) from exc
    except InputError as exc:
        click.secho(f"Error parsing input: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output",
    default="./output",
    show_default=True,
    help="Output directory for results.",
)
def run(input_file: str, output: str) -> None:
    """Evaluate every column case in INPUT_FILE."""
    input_path = Path(input_file)
    click.echo(f"Reading input file: {input_path}")
    project, cases = _load(input_path)

    from .runner import run_cases

    outcome = run_cases(cases)

    click.echo("")
    click.secho("=" * 60, bold=True)
    click.secho(f"  COLUMN SOLVER  {project.get('name', '')}".rstrip(), bold=True)
    click.secho("=" * 60, bold=True)

    for case, evaluation in outcome["results"]:
        click.echo(f"\n  --- {case.name} ({case.case.value}, {case.section.kind.value}) ---")
        for line in format_report(evaluation):
            click.echo(f"  {line}")

    for err in outcome["errors"]:
        click.secho(f"  {err}", fg="red", err=True)

    click.secho("\n" + "=" * 60, bold=True)

    output_dir = Path(output)
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / "results.json"
    serialisable = {
        "project": project,
        "cases": [
            {"name": case.name, **evaluation_to_dict(evaluation)}
            for case, evaluation in outcome["results"]
        ],
        "errors": outcome["errors"],
    }
    with open(results_file, "w", encoding="utf-8") as fh:
        json.dump(serialisable, fh, indent=2, default=str)

    click.echo(f"\nResults saved to {results_file.resolve()}")
    if outcome["errors"]:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
def template() -> None:
    """Print a sample case file to stdout."""
    click.echo(generate_template())


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
def validate(input_file: str) -> None:
    """Validate a case file without evaluating it."""
    input_path = Path(input_file)
    click.echo(f"Validating: {input_path}")
    _, cases = _load(input_path)
    click.secho(f"\nInput file is valid ({len(cases)} case(s)).", fg="green")


# ---------------------------------------------------------------------------
# Allow ``python -m column_solver.cli``
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
