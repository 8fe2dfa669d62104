from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .errors import PlannerError
from .models import load_planner_config
from .pipeline.resolve import Sectioner
from .pipeline.run import run_planner
from .registry import build_registry

app = typer.Typer(help="LaTeX planner generator")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def build(
    config_path: Path = typer.Argument(..., help="Planner YAML config"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    with_pdf: bool = typer.Option(False, "--compile", help="Run pdflatex and render previews"),
) -> None:
    if out:
        config.set_out_dir(out)
    try:
        planner_config = load_planner_config(config_path)
        results = run_planner(planner_config, registry=build_registry(), with_pdf=with_pdf)
    except (PlannerError, FileNotFoundError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"READY: {len(results['READY'])}")
    typer.echo(f"FAILED: {len(results['FAILED'])}")
    for name in results["FAILED"]:
        typer.echo(f"FAILED: {name}")
    for name in results["ARTIFACTS"]:
        typer.echo(f"WROTE: {config.OUT_DIR / name}")
    if results["FAILED"]:
        raise typer.Exit(code=1)


@app.command()
def sections(config_path: Path = typer.Argument(..., help="Planner YAML config")) -> None:
    """List enabled sections and the template family each one resolves to."""
    try:
        planner_config = load_planner_config(config_path)
        sectioner = Sectioner(planner_config, build_registry())
        sectioner.sections()
    except (PlannerError, FileNotFoundError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1)
    for name, family in sectioner.resolved_families():
        typer.echo(f"{name}: {family}")


if __name__ == "__main__":
    app()
