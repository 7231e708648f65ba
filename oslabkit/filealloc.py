"""Disk block allocation over a bit vector: contiguous, linked and indexed."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

MAX_FILES = 10
MAX_INDEXED_BLOCKS = 10


class AllocationError(Exception):
    """Raised when the disk or the directory cannot hold a new file."""


@dataclass(frozen=True)
class ContiguousFile:
    """A file stored as one run of consecutive blocks."""

    name: str
    start: int
    length: int

    @property
    def blocks(self) -> tuple[int, ...]:
        return tuple(range(self.start, self.start + self.length))

    def __str__(self) -> str:
        return f"{self.name}: {self.start} (len {self.length})"


@dataclass(frozen=True)
class LinkedFile:
    """A file stored as a chain of blocks."""

    name: str
    blocks: tuple[int, ...]

    def __str__(self) -> str:
        chain = "".join(f"{block}->" for block in self.blocks)
        return f"{self.name}: {chain}NULL"


@dataclass(frozen=True)
class IndexedFile:
    """A file whose blocks are listed in one index block."""

    name: str
    index_block: int
    blocks: tuple[int, ...]

    def __str__(self) -> str:
        listed = " ".join(str(block) for block in self.blocks)
        return f"{self.name} (Index: {self.index_block}): {listed}"


def format_bits(bits: Iterable[int]) -> str:
    """Render a bit vector as space-separated digits."""
    return " ".join(str(int(bit)) for bit in bits)


def mark_random_used(
    bits: Sequence[int], count: int, rng: random.Random | None = None
) -> list[int]:
    """Return a copy of ``bits`` with ``count`` randomly drawn blocks set to used.

    Draws may repeat, so fewer than ``count`` new blocks can end up used.
    """
    marked = [int(bit) for bit in bits]
    if count <= 0:
        return marked
    if not marked:
        raise ValueError("cannot mark blocks on an empty disk")
    rng = rng if rng is not None else random.Random()
    for _ in range(count):
        marked[rng.randrange(len(marked))] = 1
    return marked


class _Allocator:
    """Bit vector of a disk plus the directory of files stored on it."""

    def __init__(self, blocks: int, used: Iterable[int] = ()) -> None:
        if blocks <= 0:
            raise ValueError("a disk needs at least one block")
        self._bits = [0] * blocks
        for block in used:
            self._check_block(block)
            self._bits[block] = 1
        self._files: list = []

    @property
    def bits(self) -> list[int]:
        """A copy of the bit vector: 1 for a used block, 0 for a free one."""
        return list(self._bits)

    def _check_block(self, block: int) -> None:
        if not 0 <= block < len(self._bits):
            raise ValueError(
                f"block {block} lies outside a disk of {len(self._bits)} blocks"
            )

    def _is_free(self, block: int) -> bool:
        self._check_block(block)
        return self._bits[block] == 0

    def _ensure_room(self) -> None:
        if len(self._files) >= MAX_FILES:
            raise AllocationError("Directory full!")

    def _release(self, blocks: Iterable[int]) -> None:
        for block in blocks:
            self._bits[block] = 0

    def _pop(self, name: str):
        for position, entry in enumerate(self._files):
            if entry.name == name:
                return self._files.pop(position)
        raise KeyError(name)

    def directory(self) -> list:
        """Return the files on the disk, in the order they were created."""
        return list(self._files)


class ContiguousAllocator(_Allocator):
    """Places each file in the first run of free blocks long enough for it."""

    def create(self, name: str, length: int) -> ContiguousFile:
        """Store a file of ``length`` blocks in the first free run that fits."""
        if length <= 0:
            raise ValueError("a file needs at least one block")
        self._ensure_room()
        run = 0
        for index, bit in enumerate(self._bits):
            run = run + 1 if bit == 0 else 0
            if run == length:
                start = index - length + 1
                break
        else:
            raise AllocationError("No contiguous space!")
        self._bits[start : start + length] = [1] * length
        entry = ContiguousFile(name, start, length)
        self._files.append(entry)
        return entry

    def delete(self, name: str) -> ContiguousFile:
        """Remove the first file called ``name`` and free its blocks."""
        entry = self._pop(name)
        self._release(entry.blocks)
        return entry

    def directory(self) -> list[ContiguousFile]:
        """Return the files on the disk, in the order they were created."""
        return list(self._files)


class LinkedAllocator(_Allocator):
    """Chains each file through the lowest-numbered free blocks."""

    def create(self, name: str, size: int) -> LinkedFile:
        """Store a file of ``size`` blocks, taking free blocks in order."""
        if size < 0:
            raise ValueError("a file cannot have a negative size")
        self._ensure_room()
        chosen = [index for index, bit in enumerate(self._bits) if bit == 0][:size]
        if len(chosen) < size:
            raise AllocationError("No space!")
        for block in chosen:
            self._bits[block] = 1
        entry = LinkedFile(name, tuple(chosen))
        self._files.append(entry)
        return entry

    def directory(self) -> list[LinkedFile]:
        """Return the files on the disk, in the order they were created."""
        return list(self._files)


class IndexedAllocator(_Allocator):
    """Stores files whose index block and data blocks are given by the caller."""

    def create(
        self, name: str, index_block: int, blocks: Sequence[int]
    ) -> IndexedFile:
        """Store a file; its index block must be free, its data blocks are taken."""
        blocks = tuple(blocks)
        if len(blocks) > MAX_INDEXED_BLOCKS:
            raise ValueError(
                f"an index block holds at most {MAX_INDEXED_BLOCKS} entries"
            )
        for block in blocks:
            self._check_block(block)
        self._ensure_room()
        if not self._is_free(index_block):
            raise AllocationError("Index block busy!")
        self._bits[index_block] = 1
        for block in blocks:
            self._bits[block] = 1
        entry = IndexedFile(name, index_block, blocks)
        self._files.append(entry)
        return entry

    def delete(self, name: str) -> IndexedFile:
        """Remove the first file called ``name``, freeing its index and data."""
        entry = self._pop(name)
        self._release((entry.index_block, *entry.blocks))
        return entry

    def directory(self) -> list[IndexedFile]:
        """Return the files on the disk, in the order they were created."""
        return list(self._files)


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


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _show_directory(allocator: _Allocator) -> None:
    for entry in allocator.directory():
        print(entry)


def _delete(allocator: ContiguousAllocator | IndexedAllocator, reader: _Reader) -> None:
    _prompt("Enter name to delete: ")
    try:
        allocator.delete(reader.word())
    except KeyError:
        print("No such file.")
    else:
        print("Deleted.")


def _contiguous_menu(allocator: ContiguousAllocator, reader: _Reader) -> None:
    while True:
        _prompt(
            "\n1.Bit Vector\n2.Create File\n3.Show Directory\n"
            "4.Delete File\n5.Exit\nChoice: "
        )
        choice = reader.integer()
        if choice == 1:
            print(format_bits(allocator.bits))
        elif choice == 2:
            _prompt("Enter name and length: ")
            name, length = reader.word(), reader.integer()
            try:
                allocator.create(name, length)
            except AllocationError as error:
                print(error)
            else:
                print("Created.")
        elif choice == 3:
            _show_directory(allocator)
        elif choice == 4:
            _delete(allocator, reader)
        else:
            return


def _linked_menu(allocator: LinkedAllocator, reader: _Reader) -> None:
    while True:
        _prompt(
            "\n1.Show Bit Vector\n2.Create New File\n3.Show Directory\n"
            "4.Exit\nChoice: "
        )
        choice = reader.integer()
        if choice == 1:
            print(format_bits(allocator.bits))
        elif choice == 2:
            _prompt("Enter file name and size: ")
            name, size = reader.word(), reader.integer()
            try:
                allocator.create(name, size)
            except AllocationError as error:
                print(error)
            else:
                print("Created.")
        elif choice == 3:
            _show_directory(allocator)
        else:
            return


def _indexed_menu(allocator: IndexedAllocator, reader: _Reader) -> None:
    while True:
        _prompt("\n1.Bit Vector\n2.Create\n3.Directory\n4.Delete\n5.Exit\nChoice: ")
        choice = reader.integer()
        if choice == 1:
            print(format_bits(allocator.bits))
        elif choice == 2:
            _prompt("Name, Index Block, Size: ")
            name, index_block, size = reader.word(), reader.integer(), reader.integer()
            if not allocator._is_free(index_block):
                print("Index block busy!")
                continue
            _prompt(f"Enter {size} blocks: ")
            blocks = [reader.integer() for _ in range(size)]
            try:
                allocator.create(name, index_block, blocks)
            except AllocationError as error:
                print(error)
            else:
                print("Created.")
        elif choice == 3:
            _show_directory(allocator)
        elif choice == 4:
            _delete(allocator, reader)
        else:
            return


_DEFAULT_RESERVED = {"contiguous": 10, "linked": 5, "indexed": 0}


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive file-allocation menu over a simulated disk."""
    parser = argparse.ArgumentParser(
        prog="oslabkit-filealloc", description="File allocation methods."
    )
    parser.add_argument("method", choices=("contiguous", "linked", "indexed"))
    parser.add_argument(
        "--reserved",
        type=int,
        help="number of random draws marking blocks used at start "
        "(default: a tenth of the disk for contiguous, a fifth for linked, "
        "none for indexed)",
    )
    parser.add_argument("--seed", type=int, help="seed for the random draws")
    args = parser.parse_args(argv)

    reader = _Reader(sys.stdin)
    try:
        _prompt("Enter number of disk blocks: ")
        blocks = reader.integer()
        if args.reserved is not None:
            reserved = args.reserved
        else:
            divisor = _DEFAULT_RESERVED[args.method]
            reserved = blocks // divisor if divisor else 0
        bits = mark_random_used([0] * max(blocks, 0), reserved, random.Random(args.seed))
        used = [index for index, bit in enumerate(bits) if bit]
        if args.method == "contiguous":
            _contiguous_menu(ContiguousAllocator(blocks, used), reader)
        elif args.method == "linked":
            _linked_menu(LinkedAllocator(blocks, used), reader)
        else:
            _indexed_menu(IndexedAllocator(blocks, used), reader)
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())