"""Banker's algorithm: need matrices, safety checks and request checks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO

Matrix = list[list[int]]


def _as_matrix(rows: Iterable[Iterable[int]], name: str) -> Matrix:
    matrix = [list(row) for row in rows]
    if matrix:
        width = len(matrix[0])
        if any(len(row) != width for row in matrix):
            raise ValueError(f"{name} rows must all have the same length")
    return matrix


def _check_same_shape(first: Matrix, second: Matrix, names: str) -> None:
    if len(first) != len(second) or any(
        len(a) != len(b) for a, b in zip(first, second)
    ):
        raise ValueError(f"{names} must have the same shape")


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> Matrix:
    """Return the need matrix, maximum minus allocation."""
    alloc = _as_matrix(allocation, "allocation")
    maxi = _as_matrix(maximum, "maximum")
    _check_same_shape(alloc, maxi, "allocation and maximum")
    return [[m - a for a, m in zip(arow, mrow)] for arow, mrow in zip(alloc, maxi)]


def request_need_matrix(
    allocation: Sequence[Sequence[int]], request: Sequence[Sequence[int]]
) -> Matrix:
    """Return request minus allocation, with negative entries clamped to zero."""
    alloc = _as_matrix(allocation, "allocation")
    req = _as_matrix(request, "request")
    _check_same_shape(alloc, req, "allocation and request")
    return [
        [max(r - a, 0) for a, r in zip(arow, rrow)] for arow, rrow in zip(alloc, req)
    ]


def available_after_allocation(
    total: Sequence[int], allocation: Sequence[Sequence[int]]
) -> list[int]:
    """Return what is left of each resource once every allocation is taken out."""
    alloc = _as_matrix(allocation, "allocation")
    if any(len(row) != len(total) for row in alloc):
        raise ValueError("allocation rows must match the number of resources")
    used = [sum(column) for column in zip(*alloc)] if alloc else [0] * len(total)
    return [t - u for t, u in zip(total, used)]


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int] | None:
    """Return a safe order of process indices, or None if the state is unsafe.

    Processes are scanned in index order, pass after pass; each one whose need
    fits in the work vector finishes at once and returns its allocation.
    """
    alloc = _as_matrix(allocation, "allocation")
    need = need_matrix(alloc, maximum)
    if any(len(row) != len(available) for row in alloc):
        raise ValueError("matrix rows must match the number of resources")
    work = list(available)
    finished = [False] * len(alloc)
    order: list[int] = []
    for _ in range(len(alloc)):
        progressed = False
        for index, (row_need, row_alloc) in enumerate(zip(need, alloc)):
            if finished[index]:
                continue
            if all(n <= w for n, w in zip(row_need, work)):
                work = [w + a for w, a in zip(work, row_alloc)]
                order.append(index)
                finished[index] = True
                progressed = True
        if not progressed:
            break
    return order if all(finished) else None


def can_grant(
    need: Sequence[Sequence[int]],
    available: Sequence[int],
    process: int,
    request: Sequence[int],
) -> bool:
    """Tell whether a request fits both the process's need and what is available."""
    if not 0 <= process < len(need):
        raise ValueError(f"no process numbered {process}")
    row = need[process]
    if len(request) != len(available) or len(row) != len(available):
        raise ValueError("request must name every resource type")
    return all(
        req <= n and req <= avail for req, n, avail in zip(request, row, available)
    )


def format_matrix(rows: Iterable[Iterable[int]]) -> str:
    """Render rows of integers as space-separated lines."""
    return "\n".join(" ".join(str(value) for value in row) for row in rows)


@dataclass
class BankerState:
    """Allocation, maximum claim and available vector of one system."""

    allocation: Matrix
    maximum: Matrix
    available: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.allocation = _as_matrix(self.allocation, "allocation")
        self.maximum = _as_matrix(self.maximum, "maximum")
        self.available = list(self.available)
        _check_same_shape(self.allocation, self.maximum, "allocation and maximum")
        if any(len(row) != len(self.available) for row in self.allocation):
            raise ValueError("matrix rows must match the number of resources")

    def need(self) -> Matrix:
        """Return the need matrix of this state."""
        return need_matrix(self.allocation, self.maximum)

    def safe_sequence(self) -> list[int] | None:
        """Return a safe order of processes, or None if there is none."""
        return safe_sequence(self.allocation, self.maximum, self.available)

    def can_grant(self, process: int, request: Sequence[int]) -> bool:
        """Tell whether the request can be granted immediately."""
        return can_grant(self.need(), self.available, process, request)


_EXAMPLES: dict[str, BankerState] = {
    "zero-available": BankerState(
        [[0, 1, 0], [2, 0, 0], [3, 0, 3], [2, 1, 1], [0, 0, 2]],
        [[0, 0, 0], [2, 0, 2], [0, 0, 0], [1, 0, 0], [0, 0, 2]],
        [0, 0, 0],
    ),
    "four-resources": BankerState(
        [[0, 0, 1, 2], [1, 0, 0, 0], [1, 3, 5, 4], [0, 6, 3, 2], [0, 0, 1, 4]],
        [[0, 0, 1, 2], [1, 7, 5, 0], [2, 3, 5, 6], [0, 6, 5, 2], [0, 6, 5, 6]],
        [1, 5, 2, 0],
    ),
    "five-processes": BankerState(
        [[2, 0, 0, 1], [3, 1, 2, 1], [2, 1, 0, 3], [1, 3, 1, 2], [1, 4, 3, 2]],
        [[4, 2, 1, 2], [5, 2, 5, 2], [2, 3, 1, 6], [1, 4, 2, 4], [3, 6, 6, 5]],
        [3, 3, 2, 1],
    ),
    "six-processes": BankerState(
        [[0, 3, 2, 4], [1, 2, 0, 1], [0, 0, 0, 0], [3, 3, 2, 2], [1, 4, 3, 2],
         [2, 4, 1, 4]],
        [[6, 5, 4, 4], [4, 4, 4, 4], [0, 0, 1, 2], [3, 9, 3, 4], [2, 5, 3, 3],
         [4, 6, 3, 4]],
        [3, 4, 4, 2],
    ),
}


class _Reader:
    """Reads whitespace-separated tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def vector(self, length: int) -> list[int]:
        return [self.integer() for _ in range(length)]

    def matrix(self, rows: int, cols: int) -> Matrix:
        return [self.vector(cols) for _ in range(rows)]


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _print_safety(state: BankerState) -> None:
    print("Need Matrix:")
    print(format_matrix(state.need()))
    order = state.safe_sequence()
    if order is None:
        print("Not in safe state.")
    else:
        print("Safe state. Sequence: " + " ".join(f"P{i}" for i in order))


def _read_state(reader: _Reader) -> BankerState:
    _prompt("Enter number of processes & resources: ")
    processes, resources = reader.integer(), reader.integer()
    print("Enter Allocation Matrix:")
    allocation = reader.matrix(processes, resources)
    print("Enter Max Matrix:")
    maximum = reader.matrix(processes, resources)
    print("Enter Available Resources:")
    available = reader.vector(resources)
    return BankerState(allocation, maximum, available)


def _run_menu(reader: _Reader) -> None:
    _prompt("Enter number of processes: ")
    processes = reader.integer()
    _prompt("Enter number of resource types: ")
    resources = reader.integer()
    state = BankerState(
        [[0] * resources for _ in range(processes)],
        [[0] * resources for _ in range(processes)],
        [0] * resources,
    )
    while True:
        print("\n--- Banker's Algorithm Menu ---")
        print("a) Accept Available")
        print("b) Display Allocation and Max")
        print("c) Display Need Matrix")
        print("d) Display Available")
        print("e) Exit")
        _prompt("Enter your choice: ")
        choice = reader.word()[0]
        if choice == "a":
            print("Enter Allocation Matrix:")
            allocation = reader.matrix(processes, resources)
            print("Enter Max Matrix:")
            maximum = reader.matrix(processes, resources)
            _prompt("Enter Available Resources: ")
            state = BankerState(allocation, maximum, reader.vector(resources))
        elif choice == "b":
            print("\nProcess\tAllocation\tMax")
            for index, (arow, mrow) in enumerate(zip(state.allocation, state.maximum)):
                print(f"P{index}\t{format_matrix([arow])}\t{format_matrix([mrow])}")
        elif choice == "c":
            print("\nNeed Matrix:")
            for index, row in enumerate(state.need()):
                print(f"P{index}\t{format_matrix([row])}")
        elif choice == "d":
            print("\nAvailable Resources: " + format_matrix([state.available]))
        elif choice == "e":
            return
        else:
            print("Invalid choice!")


def _run_request(reader: _Reader) -> None:
    state = _read_state(reader)
    print("\nNeed Matrix:")
    print(format_matrix(state.need()))
    _prompt("\nEnter process number making request: ")
    process = reader.integer()
    _prompt("Enter request: ")
    request = reader.vector(len(state.available))
    if state.can_grant(process, request):
        print("Request can be granted immediately.")
    else:
        print("Request CANNOT be granted immediately.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the banker's algorithm tools from the command line."""
    parser = argparse.ArgumentParser(
        prog="oslabkit-banker", description="Banker's algorithm tools."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("menu", help="interactive menu over one state")
    safety = commands.add_parser("safety", help="show need and a safe sequence")
    safety.add_argument(
        "--example", choices=sorted(_EXAMPLES), help="use a built-in state"
    )
    commands.add_parser("request", help="check whether a request can be granted")
    args = parser.parse_args(argv)

    reader = _Reader(sys.stdin)
    try:
        if args.command == "menu":
            _run_menu(reader)
        elif args.command == "safety":
            state = _EXAMPLES[args.example] if args.example else _read_state(reader)
            _print_safety(state)
        else:
            _run_request(reader)
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())