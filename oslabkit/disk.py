"""Disk-arm scheduling: FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import TextIO


class Direction(Enum):
    """Direction in which the head first travels."""

    LEFT = 0
    RIGHT = 1

    @classmethod
    def from_flag(cls, flag: int) -> Direction:
        """Map the conventional flag (1 for right, anything else left)."""
        return cls.RIGHT if flag == 1 else cls.LEFT


@dataclass(frozen=True)
class Schedule:
    """The positions a head visits, in order, starting from ``start``."""

    start: int
    order: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", tuple(self.order))

    @property
    def total_movement(self) -> int:
        """Total number of cylinders the head travels."""
        return sum(abs(b - a) for a, b in pairwise((self.start, *self.order)))

    def __iter__(self) -> Iterator[int]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)


def _split(
    requests: Iterable[int], head: int, *boundaries: int
) -> tuple[list[int], list[int]]:
    """Sort requests, boundaries and head together; return what lies either side."""
    positions = sorted([*requests, *boundaries, head])
    pos = positions.index(head)
    return positions[:pos], positions[pos + 1 :]


def _check_bounds(requests: Sequence[int], head: int, disk_size: int) -> None:
    if disk_size <= 0:
        raise ValueError("disk size must be positive")
    for position in (head, *requests):
        if not 0 <= position < disk_size:
            raise ValueError(
                f"position {position} lies outside a disk of {disk_size} blocks"
            )


def fcfs(requests: Iterable[int], head: int) -> Schedule:
    """Serve requests in arrival order."""
    return Schedule(head, tuple(requests))


def sstf(requests: Iterable[int], head: int) -> Schedule:
    """Always serve the pending request nearest the head; ties go to the earliest."""
    pending = list(requests)
    position = head
    order: list[int] = []
    while pending:
        index, position = min(
            enumerate(pending), key=lambda item: abs(item[1] - position)
        )
        pending.pop(index)
        order.append(position)
    return Schedule(head, tuple(order))


def scan(
    requests: Iterable[int], head: int, disk_size: int, direction: Direction
) -> Schedule:
    """Sweep to the disk's end in ``direction``, then reverse over the rest."""
    requests = list(requests)
    _check_bounds(requests, head, disk_size)
    if direction is Direction.LEFT:
        boundary = 0
        lower, upper = _split(requests, head, boundary)
        order = [*reversed(lower), *(p for p in upper if p != boundary)]
    else:
        boundary = disk_size - 1
        lower, upper = _split(requests, head, boundary)
        order = [*upper, *(p for p in reversed(lower) if p != boundary)]
    return Schedule(head, tuple(order))


def cscan(
    requests: Iterable[int], head: int, disk_size: int, direction: Direction
) -> Schedule:
    """Sweep to the disk's end, jump to the opposite end and sweep on the same way."""
    requests = list(requests)
    _check_bounds(requests, head, disk_size)
    bottom, top = 0, disk_size - 1
    lower, upper = _split(requests, head, bottom, top)
    if direction is Direction.RIGHT:
        order = [*upper, bottom, *(p for p in lower if p != bottom)]
    else:
        order = [*reversed(lower), top, *(p for p in reversed(upper) if p != top)]
    return Schedule(head, tuple(order))


def look(requests: Iterable[int], head: int, direction: Direction) -> Schedule:
    """Sweep to the last request in ``direction``, then reverse."""
    lower, upper = _split(requests, head)
    if direction is Direction.RIGHT:
        order = [*upper, *reversed(lower)]
    else:
        order = [*reversed(lower), *upper]
    return Schedule(head, tuple(order))


def clook(requests: Iterable[int], head: int, direction: Direction) -> Schedule:
    """Sweep to the last request, jump to the farthest one behind and go on."""
    lower, upper = _split(requests, head)
    if direction is Direction.RIGHT:
        order = [*upper, *lower]
    else:
        order = [*reversed(lower), *reversed(upper)]
    return Schedule(head, tuple(order))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _integer(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _integers(tokens: Iterator[str], count: int) -> list[int]:
    return [_integer(tokens) for _ in range(count)]


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _report(schedule: Schedule, label: str) -> None:
    print("Order: " + " ".join(str(p) for p in schedule))
    print(f"{label}: {schedule.total_movement}")


def _run(command: str, tokens: Iterator[str]) -> None:
    if command == "fcfs":
        _prompt("Enter number of requests: ")
        count = _integer(tokens)
        _prompt("Enter requests: ")
        requests = _integers(tokens, count)
        _prompt("Enter starting head: ")
        head = _integer(tokens)
        _report(fcfs(requests, head), "Total head movement")
        return
    if command == "sstf":
        _prompt("Enter num requests and head: ")
        count, head = _integer(tokens), _integer(tokens)
        _prompt("Enter requests: ")
        _report(sstf(_integers(tokens, count), head), "Total movement")
        return
    if command in ("scan", "cscan"):
        _prompt("Enter max blocks, num requests, head: ")
        disk_size, count, head = _integers(tokens, 3)
        _prompt("Enter requests: ")
        requests = _integers(tokens, count)
        _prompt("Direction (1 for Right, 0 for Left): ")
        direction = Direction.from_flag(_integer(tokens))
        algorithm = scan if command == "scan" else cscan
        _report(algorithm(requests, head, disk_size, direction), "Total movement")
        return
    _prompt("Enter num requests, head: ")
    count, head = _integer(tokens), _integer(tokens)
    _prompt("Enter requests: ")
    requests = _integers(tokens, count)
    _prompt("Direction (1 for Right, 0 for Left): ")
    direction = Direction.from_flag(_integer(tokens))
    algorithm = look if command == "look" else clook
    _report(algorithm(requests, head, direction), "Total movement")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one disk-scheduling algorithm over requests read from standard input."""
    parser = argparse.ArgumentParser(
        prog="oslabkit-disk", description="Disk-arm scheduling algorithms."
    )
    parser.add_argument(
        "algorithm", choices=("fcfs", "sstf", "scan", "cscan", "look", "clook")
    )
    args = parser.parse_args(argv)
    try:
        _run(args.algorithm, _tokens(sys.stdin))
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())