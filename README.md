# algolab

A small library of classic algorithms as they appear in algorithms and
operating-systems coursework. Each function takes ordinary Python values
and returns plain results; several sorts also come with generators that
yield their intermediate states.

## Installation

```
pip install algolab
```

For running the test suite:

```
pip install "algolab[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.arrayops` | `insert_front`, `insert_at`, `insert_end`, `delete_front`, `delete_at`, `delete_end`, `minimum`, `maximum`, `linear_search`, `binary_search` |
| `algolab.digits` | `is_armstrong` |
| `algolab.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sort`, `heap_sort`, `build_max_heap`, `merge_sorted`, plus step-by-step generators `insertion_sort_steps`, `selection_sort_passes`, `quick_sort_partitions`, `merge_sort_steps` |
| `algolab.graphs` | `depth_first_search` (returns `DfsRecord` per node), `breadth_first_search` (returns `BfsRecord` per node), `dijkstra` |
| `algolab.optimization` | `fractional_knapsack` (returns `KnapsackResult`), `cut_rod` (returns `RodCutting`) |
| `algolab.huffman` | `build_tree` (returns a `HuffmanNode`), `huffman_codes`, `encoded_bits` |
| `algolab.scheduling` | `fcfs`, `sjf` over `Process`, returning a `ScheduleResult` of `ScheduledProcess` rows |
| `algolab.memory` | `allocate` with a `Strategy` (first, best or worst fit), `first_fit`, returning `AllocationResult` |
| `algolab.banker` | `need_matrix`, `safe_sequence`, raising `UnsafeStateError` |

## Examples

Array operations work in place on a list; searches return an index or
`None`:

```python
from algolab.arrayops import insert_at, delete_front, linear_search

items = [8, 7, 4, 9]
insert_at(items, 2, 400)   # items is now [8, 7, 400, 4, 9]
delete_front(items)        # returns 8
linear_search(items, 5)    # None
```

Sorting returns a new list; the generators show each step:

```python
from algolab.sorting import heap_sort, merge_sorted, quick_sort_partitions
from algolab.arrayops import binary_search

data = heap_sort([4, 1, 3, 2, 16, 9, 10, 14, 8, 7])
# [1, 2, 3, 4, 7, 8, 9, 10, 14, 16]
binary_search(data, 9)           # 5
merge_sorted([1, 3, 5], [2, 4])  # [1, 2, 3, 4, 5]

for pivot_index, snapshot in quick_sort_partitions([5, 1, 4, 3, 2]):
    print(pivot_index, snapshot)
```

Graphs are given as a mapping from node to neighbours, or as a list of
neighbour lists indexed by node. `dijkstra` takes `(neighbour, weight)`
pairs and reports `math.inf` for unreachable nodes:

```python
from algolab.graphs import depth_first_search, dijkstra

records = depth_first_search([[1, 2], [3], [3], []])
records[3].discovered, records[3].finished

dijkstra([[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], [], []], 0)
# {0: 0, 1: 3, 2: 1, 3: 4, 4: inf}
```

Rod cutting, where `prices[k - 1]` is the price of a piece of length `k`:

```python
from algolab.optimization import cut_rod, fractional_knapsack

result = cut_rod([1, 5, 8, 9, 10, 17, 17, 20, 24, 30], 10)
result.revenue[10]
result.cuts(10)

fractional_knapsack(50, [(10, 60), (20, 100), (30, 120)]).total_value
```

Huffman codes, in the order the symbols were given:

```python
from algolab.huffman import huffman_codes, encoded_bits

freqs = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}
codes = huffman_codes(freqs)
encoded_bits(freqs, codes)
```

Scheduling accepts `Process` objects or `(arrival, burst)` pairs, which
are numbered from 1:

```python
from algolab.scheduling import Process, sjf

result = sjf([Process(1, 0, 8), Process(2, 1, 4), Process(3, 2, 9)])
for row in result:
    print(row.process.pid, row.start, row.completion, row.turnaround, row.waiting, row.response)
print(result.execution_order, result.average_waiting)
```

Memory allocation accepts a `Strategy` or its name:

```python
from algolab.memory import allocate

result = allocate([100, 500, 200, 300, 600], [212, 417, 112, 426], "Best Fit")
result.allocations             # partition index or None per process
result.internal_fragmentation
result.unallocated
```

Deadlock avoidance with the banker's algorithm:

```python
from algolab.banker import safe_sequence, UnsafeStateError

allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
try:
    print(safe_sequence(allocation, maximum, [3, 3, 2]))
except UnsafeStateError as error:
    print("not safe; could finish:", error.completed)
```

## What it does not do

algolab is a library only. It has no command-line program: nothing reads
input from the keyboard or prints tables. Call the functions and format
the results yourself.

The `insert_*` and `delete_*` functions in `algolab.arrayops` change the
list they are given. All other functions leave their inputs unchanged and
return new values.