# drillbook

drillbook is a small library for a course of Rust exercises. It provides:

- `drillbook.project`: builds the `rust-project.json` file that lets
  rust-analyzer treat each exercise file as its own crate.
- `drillbook.ui`: coloured warning and success lines for the terminal.
- `drillbook.katas`: worked solutions to many of the exercises, written in
  Python, each with tests you can read alongside it.

## Installing

```
pip install drillbook
```

## rust-project.json

```python
from drillbook.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json()
if project.crates:
    project.write_to_disk()
```

- `get_sysroot_src()` takes the standard library source path from the
  `RUST_SRC_PATH` environment variable. When that is not set it runs
  `rustc --print sysroot`, prints the toolchain it found, and appends
  `lib/rustlib/src/rust/library` to it.
- `exercises_to_json()` walks `./exercises` recursively and calls `add_path`
  for every entry.
- `add_path(path)` adds a `Crate` when everything after the first `.` in the
  path is `rs`. Each crate uses edition `2021`, no dependencies and the `test`
  cfg, so rust-analyzer also works inside test blocks.
- `to_json()` returns the project as compact JSON; `write_to_disk()` writes it
  to `./rust-project.json`.

## Status lines

```python
from drillbook.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`success` prints a green line and `warn` a red one. When the `NO_EMOJI`
environment variable is set (`no_emoji()` returns True), they use the plain
symbols `✓` and `!` instead of emoji.

## Worked examples

The `drillbook.katas` subpackage has these modules:

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Uppercase`, `Trim`, `Append`, and `ReportCard` |
| `people` | `Person.from_text` (falls back to John, 30) and `Person.parse` (raises `EmptyInput`, `BadLength`, `NoName` or `InvalidAge`, all `ParsePersonError`) |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger.new`, `parse_pos_nonzero` |
| `messages` | `State.process` driven by `Move`, `Echo`, `ChangeColor` and `Quit` |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `iterators` | capitalisation helpers, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counts |
| `choices` | `bigger`, `foo_if_fizz`, `maybe_icecream` |
| `strings` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `structs` | `Order`, `create_order_template`, `Package` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `some_func` |
| `collections` | `array_and_vec`, `vec_loop`, `vec_map`, `Wrapper`, cons lists, `Cow` and `abs_all` |
| `arithmetic` | `sale_price`, `is_even`, `square`, `Rectangle` |

```python
from drillbook.katas.quizzes import calculate_price_of_apples
from drillbook.katas.people import Person

calculate_price_of_apples(41)   # 41
Person.parse("Mark,20")         # Person(name='Mark', age=20)
Person.from_text("Mark")        # Person(name='John', age=30)
```

## What drillbook does not do

drillbook has no command-line program. It does not read an `info.toml`
exercise list, compile or run exercises, check them for a `// I AM NOT DONE`
marker, verify them in order, watch files for changes, show hints or reset
exercises. Use it as a library from your own code.

## Running the tests

```
pip install drillbook[test]
pytest
```