# oslabkit

Classic operating-systems lab exercises, usable as a library and from the
command line. It needs nothing beyond the standard library.

- `oslabkit.banker`: Banker's algorithm — need matrices, safe-sequence search
  and checking whether a request can be granted immediately.
- `oslabkit.disk`: disk-arm scheduling — FCFS, SSTF, SCAN, C-SCAN, LOOK and
  C-LOOK.
- `oslabkit.filealloc`: contiguous, linked and indexed block allocation over a
  bit vector, with a directory of files.
- `oslabkit.reduce`: random data split among workers, each share reduced and
  the partial results combined.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Every command reads its input as whitespace-separated tokens from standard
input, printing prompts as it goes. Bad or missing input ends the command with
an error message and exit status 1.

### oslabkit-banker

```
oslabkit-banker menu
oslabkit-banker safety
oslabkit-banker safety --example four-resources
oslabkit-banker request
```

- `menu` asks for the number of processes and resource types, then offers
  a menu: `a` enter allocation, max and available; `b` show allocation and
  max; `c` show the need matrix; `d` show available; `e` exit.
- `safety` reads the process and resource counts, the allocation matrix, the
  max matrix and the available vector, prints the need matrix and either a
  safe sequence or `Not in safe state.`. With `--example` it uses a built-in
  state instead: `five-processes`, `four-resources`, `six-processes` or
  `zero-available`.
- `request` reads a state the same way, then a process number and a request,
  and says whether the request can be granted immediately.

### oslabkit-disk

```
oslabkit-disk fcfs
oslabkit-disk sstf
oslabkit-disk scan
oslabkit-disk cscan
oslabkit-disk look
oslabkit-disk clook
```

`fcfs` reads the number of requests, the requests and the starting head.
`sstf` reads the number of requests and the head, then the requests. `scan`
and `cscan` read the disk size, the number of requests and the head, then the
requests and a direction flag (1 for right, anything else for left). `look`
and `clook` read the number of requests and the head, the requests and a
direction flag. Each prints the service order and the total head movement.

### oslabkit-filealloc

```
oslabkit-filealloc contiguous
oslabkit-filealloc linked
oslabkit-filealloc indexed
```

The command asks for the number of disk blocks, marks some blocks used at
random, then runs a menu for the chosen method:

- `contiguous`: show the bit vector, create a file, show the directory,
  delete a file.
- `linked`: show the bit vector, create a file, show the directory.
- `indexed`: show the bit vector, create a file from a given index block and
  list of data blocks, show the directory, delete a file.

`--reserved N` sets the number of random draws that mark blocks used (by
default a tenth of the disk for contiguous, a fifth for linked and none for
indexed; draws may repeat). `--seed S` makes the draws repeatable.

### oslabkit-reduce

```
oslabkit-reduce sum --average
oslabkit-reduce min --workers 8 --seed 1
oslabkit-reduce max
oslabkit-reduce even
oslabkit-reduce odd --size 500
```

Generates random integers (below 10000 for `min` and `max`, below 100
otherwise), reduces them and prints the result. Options: `--size` (default
1000), `--workers` (default 4), `--seed`, and `--average`, which also prints
the average when the reduction is `sum`.

## Library use

### Banker's algorithm

```python
from oslabkit.banker import BankerState, format_matrix

state = BankerState(
    allocation=[[0, 0, 1, 2], [1, 0, 0, 0], [1, 3, 5, 4], [0, 6, 3, 2], [0, 0, 1, 4]],
    maximum=[[0, 0, 1, 2], [1, 7, 5, 0], [2, 3, 5, 6], [0, 6, 5, 2], [0, 6, 5, 6]],
    available=[1, 5, 2, 0],
)
print(format_matrix(state.need()))
print(state.safe_sequence())        # list of process indices, or None
print(state.can_grant(1, [0, 4, 2, 0]))
```

The same operations exist as functions: `need_matrix`, `safe_sequence`,
`can_grant` and `format_matrix`. `request_need_matrix` gives request minus
allocation with negative entries set to zero, and `available_after_allocation`
subtracts the column sums of an allocation from a total vector. Matrices of
mismatched shape, and unknown process numbers, raise `ValueError`.

### Disk scheduling

```python
from oslabkit.disk import Direction, fcfs, sstf, scan, cscan, look, clook

schedule = sstf([98, 183, 37, 122, 14, 124, 65, 67], 53)
print(list(schedule), schedule.total_movement)

schedule = scan([98, 183, 37, 122, 14, 124, 65, 67], 53, 200, Direction.LEFT)
```

Each function returns a `Schedule` with `start`, `order` and
`total_movement`; iterating it yields the order. `scan` and `cscan` take the
disk size and raise `ValueError` for positions outside the disk.
`Direction.from_flag(1)` is `Direction.RIGHT`; any other flag is
`Direction.LEFT`.

### File allocation

```python
from oslabkit.filealloc import AllocationError, ContiguousAllocator, format_bits

disk = ContiguousAllocator(16, used=[3])
disk.create("a", 3)                 # first free run that fits: blocks 0-2
print(format_bits(disk.bits))
disk.delete("a")
```

`ContiguousAllocator`, `LinkedAllocator` and `IndexedAllocator` each take a
block count and an optional iterable of used blocks, and offer `create`,
`directory` and `bits`; the contiguous and indexed allocators also offer
`delete`, which raises `KeyError` for an unknown name. A file that does not
fit, an index block already in use, or an eleventh file in the directory
raises `AllocationError`. An indexed file lists at most ten data blocks.
`mark_random_used(bits, count, rng)` returns a copy of a bit vector with
`count` random draws set to used.

### Parallel reductions

```python
import random
from oslabkit.reduce import Reduction, average, generate_data, parallel_reduce

data = generate_data(1000, 100, random.Random(0))
total = parallel_reduce(data, 4, Reduction.SUM)
print(total, average(total, len(data)))
```

`scatter(data, workers)` splits data into equal shares, leaving out any
remainder; `parallel_reduce` reduces the shares on a thread pool and combines
them with `Reduction.SUM`, `MIN`, `MAX`, `EVEN_SUM` or `ODD_SUM`.

## What it does not do

The reductions run on threads inside one Python process; nothing is spread
across separate processes or machines.