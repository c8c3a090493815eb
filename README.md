# exgrade

`exgrade` grades a collection of programming exercises and keeps a score
for each one. It also includes worked solutions to the algorithm problems
that the exercises are built around.

## Grading exercises

The grader reads `exercise_config.json` from the current directory. The file
is a JSON object with three lists: `easy`, `normal` and `hard`. Each entry
needs a `name`, a `path`, a `type` and an integer `score`:

```json
{"name": "algorithm1", "path": "easy/algorithm1.rs", "type": "single_file", "score": 2}
```

Paths are resolved under `./exercises/`. The exercise's `type` is one of:

- `single_file`: the file is compiled with `rustc --test` and the resulting
  test binary is run. The exercise passes if the binary exits successfully.
  The binary is deleted afterwards.
- `cargo_project`: `cargo build`, `cargo test` and `cargo clippy` are run in
  the project directory, and all three must succeed. The project's `target`
  directory is removed afterwards.

Any other type counts as a failure. A passed exercise earns its `score`, and
a failed one earns 0.

Grade everything in one go:

```
exgrade all
```

Or go through the exercises one at a time. After each one, press Enter to
continue or type `q` to stop:

```
exgrade watch
```

Any mode other than `watch` grades every exercise without stopping. If no
mode is given, or the config file cannot be read or is malformed, the command
prints an error and exits with status 1.

When grading finishes, the grader prints a summary of total exercises,
successes, failures and score. It then writes `report.json`, which holds each
exercise's name, result and score, and the totals, including the elapsed time
in whole seconds.

## Grading from Python

```python
from exgrade.grader import (
    Report, load_exercise_config, evaluate_exercises_from_config, save_report_to_json,
)

config = load_exercise_config("exercise_config.json")
report = Report()
evaluate_exercises_from_config("all", config, report)
save_report_to_json("report.json", report)
```

`load_exercise_config` raises `OSError` when the file cannot be opened and
`ValueError` when its contents do not have the expected shape.
`evaluate_exercise`, `evaluate_single_file`, `evaluate_cargo_project`,
`run_cargo_command`, `clean_target_directory` and `ask_to_continue` are
available for finer control.

## What the grader does not do

The grader does not ship any exercises or a config file. It does not compile
or run anything itself: it calls `rustc` and `cargo`, which must be on
`PATH`. An exercise fails when those tools are missing. Output from the tools
is captured rather than shown.

## Solution modules

- `exgrade.linked_list`: `SinglyLinkedList`, `DoublyLinkedList` (with
  `reverse`), and `merge_sorted`, which merges two ascending lists
- `exgrade.sorting`: `sort`, which sorts a list in place
- `exgrade.bst`: `BinarySearchTree` and `TreeNode`. Duplicate values are ignored.
- `exgrade.traversal`: `Graph` over vertices `0..n-1`, with `bfs` and `dfs`
- `exgrade.brackets`: `Stack` and `bracket_match` for `()`, `[]` and `{}`
- `exgrade.queue_stack`: `Queue`, and `QueueStack`, a stack built from two
  queues. Both raise `EmptyError` when they are empty.
- `exgrade.heap`: `Heap`, ordered by a comparison function and drained by
  iteration, plus `min_heap` and `max_heap`
- `exgrade.weighted_graph`: `UndirectedGraph` with weighted edges, and
  `NodeNotInGraph`
- `exgrade.arrays`: `find_missing_number`, `find_duplicates`,
  `rotate_matrix_90_degrees`, `intersection`, `merge_intervals`
- `exgrade.text_checks`: `is_palindrome`, `are_anagrams`,
  `longest_substring_without_repeating_chars`
- `exgrade.numeric`: `fib`, computed with matrix powers, and `get_sum`, which
  does 32-bit wrapping addition with bit operations
- `exgrade.puzzles`: `count_distinct`, `convert_base`,
  `birthday_probability`, `min_coins` (notes 1, 2, 5, 10, 20, 30, 50, 100),
  `odd_fibonacci_sum`
- `exgrade.primes`: `is_prime`, `goldbach_conjecture`,
  `find_max_prime_factor`

```python
>>> from exgrade.puzzles import convert_base
>>> convert_base("12(10)", 16)
'c'
>>> from exgrade.primes import find_max_prime_factor
>>> find_max_prime_factor(600851475143)
6857
```

## Running the tests

```
pip install -e ".[test]"
pytest
```