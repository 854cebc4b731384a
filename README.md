# cbasics

A collection of small, classic programming exercises as a Python library:
number checks, string helpers, base conversions, searching and sorting.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Numbers (`cbasics.numbers`)

```python
from cbasics.numbers import (
    is_armstrong, factorial, factors, fibonacci_series, is_prime,
    solve_quadratic, two_largest, multiplication_table,
)

is_armstrong(153)          # True
factorial(5)               # 120
factors(12)                # [1, 2, 3, 4, 6, 12]
fibonacci_series(7)        # [0, 1, 1, 2, 3, 5, 8]
is_prime(13)               # True
two_largest([3, 9, 4, 7])  # (9, 7)
solve_quadratic(1, -3, 2)  # (2.0, 1.0)
multiplication_table(3)[0] # "3 x 1 = 3"
```

Notes on behaviour:

- `factorial` raises `ValueError` for a negative argument.
- `two_largest` raises `ValueError` for an empty input.
- `solve_quadratic` returns two floats for distinct real roots, a one-element
  tuple for a repeated root, and a conjugate pair of complex numbers
  (positive imaginary part first) otherwise. It raises `ValueError` when `a`
  is zero.
- `power` returns a float and raises `ValueError` when the result is not real.

Also available: `fibonacci`, `largest_of_three`, `is_even`,
`is_palindrome_number`, `is_strong` and `swap`.

### Text (`cbasics.text`)

```python
from cbasics.text import count_occurrences, is_palindrome, string_length

count_occurrences("Hello, world!", "o")  # 2
is_palindrome("racecar")                 # True
string_length("Hello, world!")           # 13
```

`count_occurrences` raises `ValueError` unless `char` is a single character.

### Conversions (`cbasics.conversions`)

```python
from cbasics.conversions import to_binary, to_hex

to_binary(10)  # "1010"
to_hex(255)    # "FF"
```

`to_binary` returns `"0"` for zero and negative numbers; `to_hex` raises
`ValueError` for negative numbers.

### Searching (`cbasics.search`)

```python
from cbasics.search import binary_search, interpolation_search, linear_search

binary_search([1, 2, 3, 4, 5, 6], 4)                          # 3
interpolation_search([2, 4, 6, 8, 10, 12, 14, 16, 18, 20], 12)  # 5
linear_search([10, 25, 7, 18], 7)                             # 2
```

Each search returns the index of the target, or `None` when it is absent.
`binary_search` and `interpolation_search` expect values in ascending order.

### Sorting (`cbasics.sorting`)

Every sorting function takes any iterable and returns a new sorted list.

```python
import random
from cbasics.sorting import (
    bubble_sort, counting_sort, heap_sort, quick_sort,
    selection_sort, bogo_sort, is_sorted, shuffle,
)

quick_sort([8, 3, 1, 5, 9, 2])                      # [1, 2, 3, 5, 8, 9]
counting_sort([4, 2, 2, 8, 3, 3, 1], max_value=10)  # [1, 2, 2, 3, 3, 4, 8]
bogo_sort([4, 2, 5, 1, 3], random.Random(0))        # [1, 2, 3, 4, 5]
is_sorted([1, 2, 2, 3])                             # True
```

`counting_sort` accepts values from `0` to `max_value` (default 10) and
raises `ValueError` for anything outside that range. `shuffle` and
`bogo_sort` take an optional `random.Random` instance.

## Command line

The `cbasics` command prints greetings and small output demonstrations:

```
cbasics               # prints "Hello World"
cbasics hello         # prints "Hello World"
cbasics greet Ada     # prints a welcome message for Ada
cbasics greet         # asks for a name first
cbasics escapes       # shows newline, tab, backslash and bell escapes
cbasics formatting    # shows formatting of several kinds of value
cbasics --help
```

## What it does not do

The number, text, conversion, search and sorting routines are available
only as library functions; the `cbasics` command does not offer them and does
not prompt for numbers or lists.