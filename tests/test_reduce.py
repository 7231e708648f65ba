import random

import pytest

from oslabkit.reduce import (
    Reduction,
    average,
    generate_data,
    main,
    parallel_reduce,
    scatter,
)


def test_generate_data_in_range_and_length():
    data = generate_data(1000, 100, random.Random(7))
    assert len(data) == 1000
    assert all(0 <= v < 100 for v in data)


def test_generate_data_deterministic_with_seed():
    first = generate_data(50, 10000, random.Random(3))
    second = generate_data(50, 10000, random.Random(3))
    other = generate_data(50, 10000, random.Random(4))
    assert len(first) == 50
    assert all(0 <= v < 10000 for v in first)
    assert first == second
    assert first != other


def test_generate_data_rejects_bad_bounds():
    with pytest.raises(ValueError):
        generate_data(10, 0)
    with pytest.raises(ValueError):
        generate_data(-1, 10)


def test_scatter_equal_shares():
    shares = scatter(list(range(12)), 4)
    assert shares == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 10, 11]]


def test_scatter_drops_remainder():
    shares = scatter(list(range(10)), 3)
    assert [len(s) for s in shares] == [3, 3, 3]
    assert 9 not in [v for s in shares for v in s]


def test_scatter_rejects_no_workers():
    with pytest.raises(ValueError):
        scatter([1, 2, 3], 0)


@pytest.mark.parametrize("workers", [1, 2, 4, 5, 8])
def test_sum_matches_builtin_when_divisible(workers):
    data = generate_data(1000, 100, random.Random(11))
    assert parallel_reduce(data, workers, Reduction.SUM) == sum(data)


def test_min_and_max():
    data = generate_data(1000, 10000, random.Random(5))
    assert parallel_reduce(data, 4, Reduction.MIN) == min(data)
    assert parallel_reduce(data, 4, Reduction.MAX) == max(data)


def test_even_and_odd_sums_partition_total():
    data = generate_data(1000, 100, random.Random(2))
    even = parallel_reduce(data, 4, Reduction.EVEN_SUM)
    odd = parallel_reduce(data, 4, Reduction.ODD_SUM)
    assert even + odd == parallel_reduce(data, 4, Reduction.SUM)
    assert even == sum(v for v in data if v % 2 == 0)


def test_even_sum_small_example():
    assert parallel_reduce([1, 2, 3, 4], 2, Reduction.EVEN_SUM) == 6
    assert parallel_reduce([1, 2, 3, 4], 2, Reduction.ODD_SUM) == 4


def test_remainder_not_reduced():
    assert parallel_reduce([1, 2, 3, 4, 100], 2, Reduction.SUM) == 10


def test_min_with_no_data_raises():
    with pytest.raises(ValueError):
        parallel_reduce([1, 2], 4, Reduction.MIN)


def test_average():
    assert average(500, 1000) == 0.5
    with pytest.raises(ValueError):
        average(10, 0)


def test_main_prints_sum_and_average(capsys):
    assert main(["sum", "--seed", "9", "--average"]) == 0
    out = capsys.readouterr().out.splitlines()
    data = generate_data(1000, 100, random.Random(9))
    assert out[0] == f"Sum: {sum(data)}"
    assert out[1] == f"Average: {sum(data) / 1000:.2f}"


def test_main_prints_maximum(capsys):
    assert main(["max", "--seed", "4", "--workers", "5"]) == 0
    out = capsys.readouterr().out.strip()
    data = generate_data(1000, 10000, random.Random(4))
    assert out == f"Maximum number: {max(data)}"


def test_main_reports_bad_workers(capsys):
    assert main(["sum", "--workers", "0"]) == 1
    assert "error" in capsys.readouterr().err