# algobox

A collection of classic algorithms and data structures written as plain,
readable Python. Each piece is small enough to read in one sitting and can be
imported and used on its own. There are no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                 | Contents                                                                 |
|------------------------|--------------------------------------------------------------------------|
| `algobox.sorting`      | `bubble_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `insertion_sort`, `selection_sort` |
| `algobox.searching`    | `binary_search`, `rabin_karp`, `sliding_window_max`, `contains_pattern`  |
| `algobox.numtheory`    | `atkin_primes`, `binomial`, `catalan`, `fibonacci`                       |
| `algobox.arrays`       | `reversed_list`, `matrix_multiply`                                       |
| `algobox.textops`      | `is_anagram`, `is_palindrome`, `collapse_duplicates`, `append_with_space`, `compare_strings` (returns a `Comparison`), `insert_at`, `move_hyphens_to_front`, `to_lower`, `to_upper`, `substring` |
| `algobox.printing`     | `greeting`, `diamond`, `multiplication_table`                            |
| `algobox.calculator`   | `calculate`, `evaluate`                                                  |
| `algobox.linkedqueue`  | `LinkedQueue`, `Show`                                                    |
| `algobox.linkedstack`  | `LinkedStack`                                                            |
| `algobox.arraystack`   | `BoundedStack`, `StackOverflowError`, `StackUnderflowError`              |
| `algobox.system`       | `shutdown_command`, `shutdown`                                           |

Every sort takes any iterable and returns a new sorted list; the input is left
untouched.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.searching import binary_search, rabin_karp, sliding_window_max
from algobox.numtheory import atkin_primes, catalan, fibonacci

merge_sort([3, 5, 1, 7, 10, 4])                   # [1, 3, 4, 5, 7, 10]
binary_search([1, 4, 7, 9, 16, 56, 70], 16)       # 4 (None when absent)
rabin_karp("GEEKS FOR GEEKS", "GEEK")             # [0, 10]
sliding_window_max([12, 156, 73, 93, 59], 3)      # [156, 156, 93]
[catalan(n) for n in range(10)]   # [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]
fibonacci(9)                      # 34
atkin_primes(20)                  # [2, 3, 5, 7, 11, 13, 17, 19]
```

```python
from algobox.textops import compare_strings, Comparison, move_hyphens_to_front

compare_strings("abc", "abd") is Comparison.SECOND_GREATER   # True
move_hyphens_to_front("a-b-c")                               # "--abc"
```

Data structures behave like Python containers: they support `len()` and
iteration, and they raise exceptions when an operation cannot be carried out.

```python
from algobox.arraystack import BoundedStack, StackUnderflowError
from algobox.linkedqueue import LinkedQueue, Show

stack = BoundedStack(3)
stack.push(1)
stack.push(2)
stack.peek()        # 2
stack.pop()         # 2
list(stack)         # [1], top to bottom

queue = LinkedQueue([1, 2, 3])
queue.dequeue()     # 1
print(queue.render(Show.BOTH), end="")
# 2 --> 3 --> NULL
# Length : 2
```

`BoundedStack` raises `StackOverflowError` when full and `StackUnderflowError`
when empty; both are subclasses of `IndexError`. `LinkedQueue` and
`LinkedStack` raise `IndexError` when empty.

## Commands

Installing the package adds four commands:

```
algobox-sort [-a ALGORITHM] [VALUES ...]
```
Sorts integers and prints them before and after sorting. `ALGORITHM` is one of
`bubble`, `heap`, `insertion`, `merge` (the default), `quick` or `selection`.
Without values on the command line it reads a count followed by that many
integers from standard input.

```
algobox-patterns hello
algobox-patterns diamond ROWS
algobox-patterns table NUMBER COUNT
```
Prints the greeting, a star diamond, or the lines `NUMBER * i = product` for
`i` from 1 to `COUNT`.

```
algobox-calc 3.5 * 2
```
Evaluates one `number operator number` calculation with `+`, `-`, `*` or `/`
and prints the result to two decimal places. Without arguments it prompts for
the calculation. An unknown operator, a malformed expression or division by
zero prints a message and exits with status 1.

```
algobox-stack [-c CAPACITY]
```
Drives a `BoundedStack` of capacity 1 to 100 from a numbered menu (push, pop,
peek, display, end). Without `-c` it asks for the capacity first.

`algobox.system.shutdown` runs the Windows `shutdown /s` program to power the
machine off and returns its exit status; `shutdown_command` returns that
command line without running it. It is not exposed as a command; call it only
when you mean it.

## What the package does not do

There is no binary search tree type; the ordered containers offered are the
stacks and the queue listed above.