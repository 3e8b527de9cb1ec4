# courselib

Small, dependable building blocks for teaching programs: collections with
predictable text forms, string and number helpers, console input that
re-prompts on bad input, real-valued geometry types and a random number
generator that gives the same sequence on every platform.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `courselib.strlib` | `LibraryError`; string helpers `trim`, `starts_with`, `ends_with`, `equals_ignore_case`, `to_upper_case`, `to_lower_case`; number conversion `integer_to_string`, `string_to_integer`, `real_to_string`, `string_to_real`; quoting with `write_quoted_string`, `read_quoted_string`, `string_needs_quoting`, `write_generic_value`, `read_generic_value` over a `CharStream` |
| `courselib.simpio` | `get_integer`, `get_real`, `get_line` |
| `courselib.gtypes` | `GPoint`, `GDimension`, `GRectangle` (frozen dataclasses) |
| `courselib.random` | `RandomGenerator` and the module functions `random_integer`, `random_real`, `random_chance`, `set_random_seed` |
| `courselib.queues` | `Queue`, first in, first out |
| `courselib.pqueue` | `PriorityQueue`, lower numbers first, ties in arrival order |
| `courselib.lexicon` | `Lexicon`, a case-insensitive word list that reads plain word files or binary `DAWG` files |

Errors the library reports, such as reading from an empty queue or parsing a
malformed string, are raised as `courselib.strlib.LibraryError`.

## Examples

### Queues

```python
from courselib.queues import Queue
from courselib.pqueue import PriorityQueue

q = Queue(["a", "b"])
q.enqueue("c")
print(q)                         # {"a", "b", "c"}
print(q.dequeue(), q.peek())     # a b
same = Queue.from_string('{1, 2, 3}', int)

pq = PriorityQueue()
pq.enqueue("low", 5)
pq.enqueue("high", 1)
print(pq)                        # {1:"high", 5:"low"}
print(pq.peek_priority())        # 1.0
print(pq.dequeue())              # high
```

`Queue.from_string` and `PriorityQueue.from_string` read back the text that
`str()` produces; the `value_type` argument (`str`, `int`, `float`, `bool` or
any callable taking a string) says how each value is parsed.

### Lexicon

```python
from courselib.lexicon import Lexicon

words = Lexicon()
words.add("Zoo")
words.add("apple")
print("ZOO" in words, words.contains_prefix("zo"))   # True True
print(list(words))                                   # ['apple', 'zoo']
```

`Lexicon(filename)` or `add_words_from_file(filename)` loads a file. A file
starting with `DAWG` is read as a packed word graph (only into an empty
lexicon); any other file is read as one word per line. Words are stored in
lowercase and iteration is alphabetical.

### Strings and numbers

```python
from courselib.strlib import LibraryError, string_to_integer, real_to_string, write_quoted_string

print(string_to_integer(" 42"))           # 42
print(real_to_string(2.5))                # 2.5
print(write_quoted_string("a,b", False))  # "a,b"  (quoted because of the comma)
try:
    string_to_integer("12x")
except LibraryError as exc:
    print(exc)
```

### Console input

```python
import io
from courselib.simpio import get_integer

out = io.StringIO()
n = get_integer("Age: ", stdin=io.StringIO("abc\n42\n"), stdout=out)
print(n)   # 42; out holds the prompt and "Illegal integer format. Try again."
```

Without `stdin` and `stdout` the functions use the console. `get_integer` and
`get_real` raise `EOFError` if input ends before a valid value arrives.

### Geometry

```python
from courselib.gtypes import GPoint, GRectangle

r = GRectangle(0, 0, 10, 5)
print(r.contains(3, 4), r.contains(GPoint(10, 0)))   # True False
print(r, r.is_empty())                               # (0, 0, 10, 5) False
```

### Random numbers

```python
from courselib.random import RandomGenerator, set_random_seed, random_integer

gen = RandomGenerator(42)
print(gen.random_integer(1, 6))

set_random_seed(7)        # makes the module functions repeatable
print(random_integer(1, 100))
```

The shared generator is seeded from the `RANDOM_SEED` environment variable if
set, otherwise from the current time. Seeds of zero or below act as 1.

## What it does not provide

There is no hash map, hash set or integer grid point type in this package;
use Python's `dict`, `set` and tuples for those. There is no command-line
program either: everything here is a library to import.