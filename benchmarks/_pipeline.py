"""Aggregation and reporting of benchmark timings."""

import subprocess
from datetime import UTC, datetime
from pathlib import Path

import polars as pl
from rich.table import Table

import pyosafe as ps

from ._registery import CASES, time_cases


def run_pipeline() -> pl.DataFrame:
    """Time every registered case and aggregate the samples into medians."""
    return (
        ps.Option.from_(CASES or None)
        .to_result("No benchmarks registered!")
        .map(time_cases)
        .map(_aggregate)
        .flat_map(_try_collect)
        .unwrap()
    )


def _try_collect(lf: pl.LazyFrame) -> ps.Result[pl.DataFrame, str]:
    try:
        return ps.Ok(lf.collect())
    except (
        pl.exceptions.ColumnNotFoundError,
        pl.exceptions.InvalidOperationError,
    ) as e:
        return ps.Err(f"{e}")


def _git_hash() -> ps.Try[str]:
    return ps.sync_try(
        subprocess.run,
        ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
        capture_output=True,
        text=True,
        check=True,
    ).map(lambda proc: proc.stdout.strip())


def _aggregate(samples: dict[str, list[object]]) -> pl.LazyFrame:
    return (
        pl.LazyFrame(samples)
        .group_by("group", "name", "size")
        .agg(
            (pl.col("time").median() * 1_000_000).alias("median_us"),
            (pl.col("time").std() * 1_000_000).alias("std_us"),
        )
        .with_columns(
            (pl.col("median_us") / pl.col("size") * 1_000).alias("ns_per_item"),
            pl.lit(datetime.now(tz=UTC)).alias("timestamp"),
            pl.lit(_git_hash().unwrap_or("unknown")).alias("git_hash"),
        )
        .sort("group", "name", "size")
    )


def to_table(df: pl.DataFrame) -> Table:
    """Render aggregated results as a rich table."""
    table = Table(title="pyosafe benchmarks")
    table.add_column("group")
    table.add_column("name")
    for column in ("size", "median (µs)", "std (µs)", "ns/item"):
        table.add_column(column, justify="right")
    for row in df.iter_rows(named=True):
        table.add_row(
            row["group"],
            row["name"],
            str(row["size"]),
            f"{row['median_us']:.2f}",
            f"{row['std_us']:.2f}",
            f"{row['ns_per_item']:.1f}",
        )
    return table


def write_csv(df: pl.DataFrame, path: Path) -> Path:
    """Write aggregated results to **path**, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_csv(path)
    return path
