"""Entry point for benchmarks CLI."""

from pathlib import Path
from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, to_table, write_csv
from ._registery import CASES, CONSOLE

app = typer.Typer(help="Benchmarks for pyosafe containers.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for case in CASES:
        CONSOLE.print(f"{case.group}.{case.name} [dim]@ {case.size}[/dim]")


@app.command()
def run(
    *,
    csv: Annotated[
        Path | None,
        typer.Option("--csv", help="Also write the aggregated results to this file."),
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    df = run_pipeline()
    CONSOLE.print(to_table(df))
    if csv is not None:
        written = write_csv(df, csv)
        CONSOLE.print(f"✓ Results written to {written}", style="bold green")


if __name__ == "__main__":
    app()
