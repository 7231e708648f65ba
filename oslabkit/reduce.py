"""Scatter a data set over workers, reduce each share, then combine the results."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

DEFAULT_SIZE = 1000
DEFAULT_WORKERS = 4


class Reduction(Enum):
    """An operation that folds the numbers of a data set into one result."""

    SUM = "sum"
    MIN = "min"
    MAX = "max"
    EVEN_SUM = "even"
    ODD_SUM = "odd"

    @property
    def label(self) -> str:
        """The text printed in front of the result."""
        return {
            Reduction.SUM: "Sum",
            Reduction.MIN: "Minimum number",
            Reduction.MAX: "Maximum number",
            Reduction.EVEN_SUM: "Sum of all even numbers",
            Reduction.ODD_SUM: "Sum of all odd numbers",
        }[self]

    @property
    def upper(self) -> int:
        """Exclusive upper bound of the random data this reduction is run over."""
        return 10000 if self in (Reduction.MIN, Reduction.MAX) else 100

    def local(self, chunk: Iterable[int]) -> int | None:
        """Reduce one worker's share; None when a min or max share is empty."""
        values = list(chunk)
        if self is Reduction.SUM:
            return sum(values)
        if self is Reduction.EVEN_SUM:
            return sum(v for v in values if v % 2 == 0)
        if self is Reduction.ODD_SUM:
            return sum(v for v in values if v % 2 != 0)
        if not values:
            return None
        return min(values) if self is Reduction.MIN else max(values)

    def combine(self, partials: Iterable[int | None]) -> int:
        """Fold the workers' partial results into the final one."""
        present = [p for p in partials if p is not None]
        if self is Reduction.MIN:
            if not present:
                raise ValueError("no data to reduce")
            return min(present)
        if self is Reduction.MAX:
            if not present:
                raise ValueError("no data to reduce")
            return max(present)
        return sum(present)


def generate_data(
    size: int, upper: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``size`` random integers from 0 up to, but not including, ``upper``."""
    if size < 0:
        raise ValueError("size cannot be negative")
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(upper) for _ in range(size)]


def scatter(data: Sequence[int], workers: int) -> list[list[int]]:
    """Split ``data`` into ``workers`` equal shares; any remainder is left out."""
    if workers <= 0:
        raise ValueError("there must be at least one worker")
    chunk = len(data) // workers
    return [list(data[i * chunk : (i + 1) * chunk]) for i in range(workers)]


def parallel_reduce(
    data: Sequence[int], workers: int, reduction: Reduction
) -> int:
    """Reduce each worker's share concurrently and combine the partial results."""
    shares = scatter(data, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(reduction.local, shares))
    return reduction.combine(partials)


def average(total: int, size: int) -> float:
    """Return ``total`` spread over ``size`` items."""
    if size <= 0:
        raise ValueError("size must be positive")
    return total / size


def main(argv: Sequence[str] | None = None) -> int:
    """Generate random data, reduce it over several workers and print the result."""
    parser = argparse.ArgumentParser(
        prog="oslabkit-reduce", description="Parallel reduction over random data."
    )
    parser.add_argument("reduction", choices=[r.value for r in Reduction])
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--seed", type=int, help="seed for the random data")
    parser.add_argument(
        "--average", action="store_true", help="also print the average of a sum"
    )
    args = parser.parse_args(argv)

    reduction = Reduction(args.reduction)
    try:
        data = generate_data(args.size, reduction.upper, random.Random(args.seed))
        result = parallel_reduce(data, args.workers, reduction)
        print(f"{reduction.label}: {result}")
        if args.average and reduction is Reduction.SUM:
            print(f"Average: {average(result, args.size):.2f}")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())