# rustlings

Pieces for working with a collection of small Rust exercises: coloured
terminal messages and a spinner, a generator for the `rust-project.json`
file that rust-analyzer reads, and worked solutions to many of the
exercises written as plain Python.

Python 3.11 or later is needed. Nothing outside the standard library is
used.

## Terminal output: `rustlings.ui`

- `bold(text)`, `red(text)`, `green(text)`, `blue(text)` return the text
  wrapped in ANSI colour codes.
- `warn(message)` prints a red line with a warning mark; `success(message)`
  prints a green line with a check mark. When the environment variable
  `NO_EMOJI` is set, the marks are plain `!` and `✓`.
- `Spinner(message)` shows a spinner with a message on standard error while
  work runs, but only when standard error is a terminal. Change the text with
  `set_message`, stop it with `finish_and_clear`, or use it as a context
  manager:

```python
from rustlings.ui import Spinner, success

with Spinner("Compiling exercises/intro/intro1.rs...") as spinner:
    ...
    spinner.set_message("Running exercises/intro/intro1.rs...")
success("Successfully ran exercises/intro/intro1.rs")
```

## rust-analyzer project file: `rustlings.project`

`RustAnalyzerProject` holds the sysroot source path and one `Crate` per
exercise file (edition 2021, no dependencies, `cfg` set to `test` so that
test blocks are analysed).

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json()      # every .rs file under ./exercises
project.write_to_disk()          # ./rust-project.json
```

`get_sysroot_src` uses `RUST_SRC_PATH` when it is set; otherwise it runs
`rustc --print sysroot`, prints the toolchain it found and points at
`lib/rustlib/src/rust/library` inside it. `exercises_to_json` and
`write_to_disk` take an optional directory and file path. `to_json` returns
the compact JSON text.

## Worked solutions: `rustlings.solutions`

Each module solves a group of exercises with ordinary functions, classes and
exceptions:

- `quizzes` – `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, and the generic `ReportCard`.
- `conditionals` – `bigger`, `foo_if_fizz`, `animal_habitat`.
- `conversions` – `Person.from_string` (falls back to `Person.default()`),
  `Person.parse` (raises a `ParsePersonError` subclass) and
  `Color.from_values` (raises `ColorLengthError` or `ColorRangeError`).
- `errors` – `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger` and `parse_pos_nonzero`.
- `containers` – fruit baskets, `build_scores_table`, `maybe_icecream`,
  `array_and_vec`, `vec_loop`, `vec_map`.
- `iterators` – word capitalisation, `divide` with its `DivisionError`
  subclasses, `result_with_list`, `list_of_results`, `factorial` and
  progress counting.
- `structs` – `Order`, `Package` and a `MachineState` driven by messages.
- `traits` – `append_bar`, `Licensed` software, `some_func` and the generic
  `Wrapper`.
- `pointers` – a cons list and a copy-on-write `abs_all`.
- `concurrency` – `offset_sums` over a thread pool, and `send_tx` feeding a
  `JobQueue` into a channel from two threads.
- `checks` – `sale_price`, `is_even`, string helpers and `Rectangle`.

```python
from rustlings.solutions.iterators import divide, NotDivisibleError

divide(81, 9)          # 9
try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)
```

## What this package does not do

There is no `rustlings` command. The package does not read an `info.toml`
exercise list, compile, test or lint exercises with `rustc` or Clippy, track
which exercises are done, watch files for changes, show hints or reset
exercises. It provides the output helpers, the rust-analyzer project
generator and the worked solutions described above.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.