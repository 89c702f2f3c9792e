"""Benchmarks for pyosafe containers - benchs.py."""

import pyosafe as ps

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _add(x: int, y: int) -> int:
    return x + y


def _scaled(x: int, factor: int, *, offset: int) -> int:
    return x * factor + offset


def _half(x: int) -> ps.Option[int]:
    return ps.Some(x // 2) if x % 2 == 0 else ps.NONE


def _checked(x: int) -> ps.Result[int, str]:
    return ps.Ok(x) if x >= 0 else ps.Err("negative")


def _parse(s: str) -> ps.Try[int]:
    return ps.sync_try(int, s)


# Benchmark classes
# ------------------------------------------------------------


class MapChain:
    """Benchmark chained `map` calls on each container."""

    @bench()
    @staticmethod
    def option(data: list[int]) -> object:
        """Three maps on a `Some` per item."""
        return [ps.Some(x).map(_add, 1).map(_add, 2).map(_add, 3) for x in data]

    @bench()
    @staticmethod
    def option_kwargs(data: list[int]) -> object:
        """Maps forwarding positional and keyword arguments."""
        return [ps.Some(x).map(_scaled, 2, offset=1) for x in data]

    @bench()
    @staticmethod
    def result(data: list[int]) -> object:
        """Three maps on an `Ok` per item."""
        return [ps.Ok(x).map(_add, 1).map(_add, 2).map(_add, 3) for x in data]

    @bench()
    @staticmethod
    def result_err(data: list[int]) -> object:
        """Maps skipped on an `Err` per item."""
        return [ps.Err(x).map(_add, 1).map(_add, 2).map(_add, 3) for x in data]

    @bench()
    @staticmethod
    def try_(data: list[int]) -> object:
        """Three capturing maps on a `Success` per item."""
        return [ps.Success(x).map(_add, 1).map(_add, 2).map(_add, 3) for x in data]


class Match:
    """Benchmark exhaustive matching against class patterns."""

    @bench(gen=lambda size: [ps.Some(x) if x % 3 else ps.NONE for x in size])
    @staticmethod
    def method(data: list[ps.Option[int]]) -> object:
        """Using the `match` method."""
        return [opt.match(some=lambda x: x, none=lambda: 0) for opt in data]

    @bench(gen=lambda size: [ps.Some(x) if x % 3 else ps.NONE for x in size])
    @staticmethod
    def statement(data: list[ps.Option[int]]) -> object:
        """Using a `match` statement."""
        out: list[int] = []
        for opt in data:
            match opt:
                case ps.Some(x):
                    out.append(x)
                case _:
                    out.append(0)
        return out


class Lift:
    """Benchmark `sequence` and `traverse`."""

    @bench(gen=lambda size: [ps.Some(x) for x in size])
    @staticmethod
    def sequence_option(data: list[ps.Option[int]]) -> object:
        """Sequence a list of `Some`."""
        return ps.sequence.option(data)

    @bench(gen=lambda size: [x * 2 for x in size])
    @staticmethod
    def traverse_option(data: list[int]) -> object:
        """Traverse with a function returning `Some` for every item."""
        return ps.traverse.option(data, _half)

    @bench()
    @staticmethod
    def traverse_result(data: list[int]) -> object:
        """Traverse with a function returning `Ok` for every item."""
        return ps.traverse.result(data, _checked)

    @bench(gen=lambda size: [str(x) for x in size])
    @staticmethod
    def traverse_try(data: list[str]) -> object:
        """Traverse with `sync_try` parsing every item."""
        return ps.traverse.try_(data, _parse)


class Capture:
    """Benchmark the cost of capturing exceptions."""

    @bench(gen=lambda size: [str(x) for x in size])
    @staticmethod
    def sync_try_success(data: list[str]) -> object:
        """No exception raised."""
        return [ps.sync_try(int, s) for s in data]

    @bench(gen=lambda size: [f"x{x}" for x in size])
    @staticmethod
    def sync_try_failure(data: list[str]) -> object:
        """Every call raises and is captured."""
        with ps.config_context(log_captured=False):
            return [ps.sync_try(int, s) for s in data]
