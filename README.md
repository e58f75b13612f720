# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
operations, and records the operations it used.

The operations, named by the `pushswap.stacks.Op` enumeration:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upwards (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downwards (bottom goes to top) |

An operation with nothing to act on leaves the stacks unchanged.

## Installation

```
pip install .
```

## Sorting

```python
from pushswap.sorting import push_swap
from pushswap.stacks import Stacks

ops = push_swap([3, 1, 2])          # list of Op, in order
print("\n".join(str(op) for op in ops))

stacks = Stacks([3, 1, 2])
for op in ops:
    stacks.apply(op)
assert stacks.values_a() == [1, 2, 3]
```

`push_swap` returns an empty list for input that is already sorted. Two
values are sorted with `sa`, three with `sort_three`, and more with
`sort_stacks`, which pushes values onto `b` in order of cheapest cost,
sorts the last three on `a`, brings `b` back and rotates the minimum to
the top.

`Stacks` holds both stacks as deques of `Node` objects, top first. It has
one method per operation (`sa()`, `pb()`, `rrr()`, ...), an `apply(op)`
method that takes an `Op` or its name and raises `ValueError` for an
unknown name, and an `operations` list of everything applied so far.
`values_a()` and `values_b()` return the values top to bottom.

`pushswap.stacks` also provides `is_sorted`, `find_min`, `find_max` and
`update_positions`; `pushswap.sorting` exposes the steps of the strategy
(`set_target_a`, `set_target_b`, `cost_analysis_a`, `set_cheapest`,
`get_cheapest`, `sort_three`, `sort_stacks`).

## Helper modules

- `pushswap.chars`: ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`) for character codes or one-character strings.
- `pushswap.textutils`: string functions with C-string semantics, where a
  NUL character ends the text and positions are returned as indices or
  None (`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strdup`, `strjoin`, `substr`).
- `pushswap.transforms`: `split` (drops empty pieces), `strtrim`,
  `strmapi` and `striteri`.
- `pushswap.linked`: `LinkedList` of `ListNode` links, with `add_front`,
  `add_back`, `delete_first`, `clear`, `iterate`, iteration and `len`.
- `pushswap.lines`: `LineReader` and `read_lines`, which read a text or
  binary stream in chunks of `buffer_size` (10 by default) and yield lines
  with their trailing newline.

## What this package does not do

There is no command-line program: the package is used from Python only.
It does not parse or validate textual input either; `push_swap` and
`Stacks` take integers as given and do not reject duplicates or values
outside the 32-bit range.

## Tests

```
pip install ".[test]"
pytest
```