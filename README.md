# searchsortdemo

Menu-driven console demos of classic searching and sorting algorithms,
for study and classroom use. The menus and messages are in Indonesian.

## Installation

```
pip install .
```

## Searching demo

```
searchsortdemo-search
```

The menu has four options:

1. **Sequential search**: generates 100 random numbers from 1 to 50, shows
   them as `value[index]`, and lists every index where your target appears.
2. **Binary search**: asks for a size (it must be at least 1), generates that
   many random numbers from 1 to 100, sorts them, and reports one index
   holding your target.
3. **Explanation**: compares the two techniques, including their time and
   space complexity.
4. **Exit**.

After each option other than exit, the demo waits for Enter and then clears
the terminal. An unknown option or a target that is not a whole number gets
an error message. The demo also ends when standard input runs out.

You can also call the functions directly:

```python
from searchsortdemo.searching import (
    binary_search,
    describe_sequential,
    format_numbers,
    generate_numbers,
    sequential_search,
)

sequential_search([3, 1, 3, 2], 3)    # [0, 2]
binary_search([1, 2, 4, 8, 16], 8)    # 3
binary_search([1, 2, 4], 5)           # None
format_numbers([7, 9])                # '7[0] 9[1]'
describe_sequential(3, [0, 2])        # two lines: the count and the indices
generate_numbers(5, 1, 10)            # five random integers from 1 to 10
```

`generate_numbers` takes an optional `random.Random` as its fourth argument
and raises `ValueError` for a negative count or when `low` exceeds `high`.
`describe_binary` and `explanation` give the other texts the menu shows,
and `clear_screen` clears the terminal.

## Sorting demo

```
searchsortdemo-sort
```

The menu offers insertion, merge and shell sort on a sample name string, and
bubble, quick and selection sort on a sample digit string; option 7 exits.
Each choice shows the string before sorting, how long the sort took (to ten
decimal places) and the string after sorting.

Each sort takes a string and returns a new string with its characters in
order:

```python
from searchsortdemo.sorting import merge_sort, quick_sort, time_sort

merge_sort("banana")                          # 'aaabnn'
result = time_sort(quick_sort, "2410", "Quick Sort")
result.before                                 # '2410'
result.after                                  # '0124'
str(result)                                   # 'Quick Sort took 0.0000... seconds'
```

`time_sort` returns a `SortResult` with the fields `name`, `before`,
`after` and `seconds`. The other sorts are `insertion_sort`, `shell_sort`,
`bubble_sort` and `selection_sort`.

## Running the tests

```
pip install .[test]
pytest
```