"""Registration and timing of container benchmarks."""

import timeit
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Final

from rich.console import Console
from rich.progress import Progress

SIZES: Final = (256, 1024, 4096)
REPEATS: Final = 15
"""Timed samples per case; the median is reported."""
TARGET_SAMPLE_SEC: Final = 0.02

CONSOLE: Final = Console()


@dataclass(slots=True)
class Case:
    """One benchmark function bound to an input of a given size."""

    group: str
    name: str
    size: int
    call: Callable[[], object]
    loops: int = field(init=False, default=1)

    def calibrate(self) -> None:
        """Pick the loop count so one sample lasts about `TARGET_SAMPLE_SEC`."""
        loops, total = timeit.Timer(self.call).autorange()
        self.loops = max(1, round(loops * TARGET_SAMPLE_SEC / max(total, 1e-9)))

    def sample(self) -> float:
        """Seconds per call, averaged over one sample."""
        return timeit.timeit(self.call, number=self.loops) / self.loops


CASES: list[Case] = []


def bench[P](
    *, gen: Callable[[range], P] = list
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Register the decorated function once per size in `SIZES`.

    **gen** builds the function input from a `range` of each size. The enclosing class name becomes the group.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        group, _, name = func.__qualname__.rpartition(".")
        CASES.extend(
            Case(group or "misc", name, size, partial(func, gen(range(size))))
            for size in SIZES
        )
        return func

    return decorator


def time_cases(cases: list[Case]) -> dict[str, list[object]]:
    """Time every case `REPEATS` times and return the samples column by column."""
    columns: dict[str, list[object]] = {"group": [], "name": [], "size": [], "time": []}
    with Progress(console=CONSOLE, transient=True) as progress:
        task = progress.add_task("calibrating", total=len(cases) * REPEATS)
        for case in cases:
            progress.update(task, description=f"{case.group}.{case.name} @ {case.size}")
            case.calibrate()
            for _ in range(REPEATS):
                columns["group"].append(case.group)
                columns["name"].append(case.name)
                columns["size"].append(case.size)
                columns["time"].append(case.sample())
                progress.advance(task)
    return columns
