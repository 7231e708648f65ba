import io
import random

import pytest

from oslabkit.filealloc import (
    MAX_FILES,
    MAX_INDEXED_BLOCKS,
    AllocationError,
    ContiguousAllocator,
    IndexedAllocator,
    LinkedAllocator,
    format_bits,
    main,
    mark_random_used,
)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_format_bits_joins_with_spaces():
    assert format_bits([0, 1, 1, 0]) == "0 1 1 0"


def test_mark_random_used_leaves_input_alone_and_is_seeded():
    original = [0] * 20
    first = mark_random_used(original, 5, random.Random(7))
    second = mark_random_used(original, 5, random.Random(7))
    assert original == [0] * 20
    assert first == second
    assert len(first) == 20
    assert 1 <= sum(first) <= 5


def test_mark_random_used_zero_count_copies():
    bits = [0, 1, 0]
    result = mark_random_used(bits, 0, random.Random(1))
    assert result == bits
    assert result is not bits


def test_mark_random_used_empty_disk_raises():
    with pytest.raises(ValueError):
        mark_random_used([], 3, random.Random(1))


def test_contiguous_first_file_starts_at_zero():
    disk = ContiguousAllocator(10)
    entry = disk.create("a", 3)
    assert entry.start == 0
    assert all(disk.bits[block] == 1 for block in entry.blocks)
    assert sum(disk.bits) == 3


def test_contiguous_skips_used_block():
    disk = ContiguousAllocator(10, used=[2])
    entry = disk.create("a", 3)
    assert entry.start > 2
    assert entry.length == 3
    assert sum(disk.bits) == 4
    assert all(disk.bits[block] == 1 for block in entry.blocks)


def test_contiguous_no_space_keeps_bits():
    disk = ContiguousAllocator(6, used=[2, 4])
    before = disk.bits
    with pytest.raises(AllocationError, match="No contiguous space!"):
        disk.create("big", 3)
    assert disk.bits == before
    assert disk.directory() == []


def test_contiguous_delete_restores_bits():
    disk = ContiguousAllocator(8, used=[1])
    before = disk.bits
    disk.create("a", 2)
    removed = disk.delete("a")
    assert removed.name == "a"
    assert disk.bits == before
    assert disk.directory() == []
    with pytest.raises(KeyError):
        disk.delete("a")


def test_contiguous_directory_keeps_creation_order():
    disk = ContiguousAllocator(10)
    disk.create("a", 2)
    disk.create("b", 3)
    assert [entry.name for entry in disk.directory()] == ["a", "b"]


def test_contiguous_directory_limit():
    disk = ContiguousAllocator(MAX_FILES + 5)
    for number in range(MAX_FILES):
        disk.create(f"f{number}", 1)
    with pytest.raises(AllocationError):
        disk.create("extra", 1)
    assert len(disk.directory()) == MAX_FILES


def test_contiguous_rejects_non_positive_length():
    with pytest.raises(ValueError):
        ContiguousAllocator(5).create("a", 0)


def test_allocator_rejects_bad_sizes():
    with pytest.raises(ValueError):
        LinkedAllocator(0)
    with pytest.raises(ValueError):
        ContiguousAllocator(4, used=[4])


def test_linked_takes_lowest_free_blocks():
    disk = LinkedAllocator(6, used=[0, 2])
    entry = disk.create("f", 3)
    assert entry.blocks == (1, 3, 4)
    assert disk.bits.count(0) == 1


def test_linked_no_space_keeps_bits():
    disk = LinkedAllocator(4, used=[1])
    before = disk.bits
    with pytest.raises(AllocationError, match="No space!"):
        disk.create("f", 4)
    assert disk.bits == before
    assert disk.directory() == []


def test_linked_files_never_share_blocks():
    disk = LinkedAllocator(12, used=[3, 7])
    first = disk.create("a", 4)
    second = disk.create("b", 4)
    assert set(first.blocks).isdisjoint(second.blocks)
    assert not {3, 7} & set(first.blocks + second.blocks)
    assert str(second).endswith("NULL")


def test_indexed_create_and_delete_round_trip():
    disk = IndexedAllocator(10)
    before = disk.bits
    entry = disk.create("f", 4, [1, 2, 8])
    assert all(disk.bits[block] == 1 for block in (4, 1, 2, 8))
    assert disk.directory() == [entry]
    disk.delete("f")
    assert disk.bits == before
    assert disk.directory() == []


def test_indexed_busy_index_block():
    disk = IndexedAllocator(10)
    disk.create("f", 4, [1])
    before = disk.bits
    with pytest.raises(AllocationError, match="Index block busy!"):
        disk.create("g", 1, [5])
    assert disk.bits == before
    assert [entry.name for entry in disk.directory()] == ["f"]


def test_indexed_validates_blocks():
    disk = IndexedAllocator(20)
    with pytest.raises(ValueError):
        disk.create("f", 0, [25])
    with pytest.raises(ValueError):
        disk.create("f", 30, [1])
    with pytest.raises(ValueError):
        disk.create("f", 0, list(range(1, MAX_INDEXED_BLOCKS + 2)))
    with pytest.raises(KeyError):
        disk.delete("missing")


def test_main_contiguous_session(monkeypatch, capsys):
    code, out = _run(
        monkeypatch,
        capsys,
        ["contiguous", "--reserved", "0"],
        "5 2 a 3 2 b 3 4 a 5\n",
    )
    assert code == 0
    assert "Created." in out
    assert "No contiguous space!" in out
    assert "Deleted." in out


def test_main_linked_session(monkeypatch, capsys):
    code, out = _run(
        monkeypatch,
        capsys,
        ["linked", "--reserved", "0"],
        "4 2 f 2 2 g 5 3 4\n",
    )
    assert code == 0
    assert "Created." in out
    assert "No space!" in out


def test_main_indexed_busy_skips_block_list(monkeypatch, capsys):
    code, out = _run(
        monkeypatch,
        capsys,
        ["indexed"],
        "5 2 f 1 1 2 2 g 1 0 5\n",
    )
    assert code == 0
    assert "Created." in out
    assert "Index block busy!" in out


def test_main_reports_truncated_input(monkeypatch, capsys):
    code, _ = _run(monkeypatch, capsys, ["contiguous", "--reserved", "0"], "5\n")
    assert code == 1