# dsalgo

A library of classic algorithms and data structures in plain Python, with no
runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsalgo.dsu` | `DisjointSet` with `find` and `union` (union by size, path compression), `count_components` |
| `dsalgo.mst` | `kruskal_mst`, `prim_mst` |
| `dsalgo.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`), `dijkstra`, `floyd_warshall`, `dag_shortest_path`, `unit_weight_shortest_path` |
| `dsalgo.connectivity` | `articulation_points`, `bridges`, `count_strongly_connected_components` |
| `dsalgo.ordering` | `has_cycle`, `kahn_topological_sort`, `topological_sort` |
| `dsalgo.sorting` | `heap_sort`, `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsalgo.number_theory` | `power`, `is_prime`, `divisors`, `primes_up_to`, `prime_factors` |
| `dsalgo.greedy` | `job_sequencing`, `min_platforms` |
| `dsalgo.arrays` | `largest_rectangle_area`, `longest_subarray_at_most`, `matrix_chain_cost`, `max_sliding_window`, `sort_012`, `count_subarrays_with_k_distinct`, `max_subarray_sum`, `majority_element` |
| `dsalgo.trees` | `Trie` (`insert`, `search`, `starts_with`), `TreeNode`, `morris_inorder` |

## Examples

```python
from dsalgo.shortest_paths import bellman_ford, NegativeCycleError
from dsalgo.mst import kruskal_mst
from dsalgo.trees import Trie
from dsalgo.number_theory import prime_factors

edges = [(1, 3, 2), (4, 3, -1), (2, 4, 1), (1, 2, 1), (0, 1, 5)]
print(bellman_ford(5, edges, 0))     # [0, 5, 6, 6, 7]

try:
    bellman_ford(2, [(0, 1, -1), (1, 0, -1)], 0)
except NegativeCycleError:
    print("negative cycle")

mst_edges = [(5, 4, 9), (5, 1, 4), (4, 1, 1), (4, 3, 5), (1, 2, 2),
             (4, 2, 3), (3, 2, 3), (3, 6, 8), (2, 6, 7)]
print(kruskal_mst(6, mst_edges))     # 17

trie = Trie()
trie.insert("apple")
print(trie.search("apple"), trie.starts_with("app"))  # True True

print(prime_factors(60))             # [2, 3, 5]
```

## Conventions

- Graphs are adjacency lists indexed by node: a list of neighbour lists for
  unweighted graphs, or a list of `(neighbour, weight)` pairs for weighted
  ones. Edge lists are `(u, v)` or `(u, v, weight)` tuples.
- Most graph functions number nodes from `0` to `n - 1`. `DisjointSet(n)`
  holds nodes `0..n`, and `count_components` and `has_cycle` take nodes
  numbered `1..n`.
- Shortest path functions give `math.inf` for unreachable nodes.
  `floyd_warshall` takes a square matrix with `math.inf` for missing edges and
  returns a new matrix, leaving its input unchanged.
- `DisjointSet.union` returns `False` when the two nodes were already joined.
- The sorting functions and `sort_012` return a new list and leave their input
  unchanged. `morris_inorder` threads the tree while it walks but restores it
  before returning.
- Invalid input raises `ValueError`: a negative exponent to `power`, a window
  size outside `1..len(nums)` for `max_sliding_window`, fewer than two
  dimensions for `matrix_chain_cost`, values other than 0, 1 and 2 for
  `sort_012`, an empty input to `majority_element`, and sequences of unequal
  length to `job_sequencing` and `min_platforms`.

## What it does not do

The package is a library only: it has no command-line program, and it neither
reads input from files or the terminal nor prints results. Call the functions
from your own code.