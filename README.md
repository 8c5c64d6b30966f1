# cub

Small building blocks for Python programs, using only the standard library.

## Modules

- `cub.algo`: `lower_bound` and `upper_bound` do binary searches on a sorted sequence and return an index. A key below the first element gives 0 and a key above the last element gives the last index. An empty sequence raises `ValueError`. The module also has helpers over iterables: `all_of`, `any_of`, `find`, `find_if` (each returns the element or `None`), `each`, `transform`, `reduce` and `select`.
- `cub.hashmap`: `HashMap` is a map with chained buckets. It holds at most `capacity` entries, spread over `hash_size` buckets. You can pass your own `hash_fn` and `eq_fn`, and a `default` factory that `map[key]` uses to fill a missing key. Adding a new key to a full map raises `MapFullError`. Other methods are `put`, `get`, `erase`, `clear`, `items`, `visit`, `transform`, `empty`, `full` and `max_size`. The default hashing is given by `hash_string` and `default_hash`.
- `cub.linkedlist`: `LinkedList` is a doubly linked list whose elements are looked up by identity. It supports push, insert before or after an element, move, remove, `pop_front`, forward and reverse search, and `concat`. You may remove the element that iteration has just yielded while the iteration continues.
- `cub.maybe`: `Maybe` holds a value that may be absent. `Placement` holds at most one object and builds it on demand with `emplace`. `default_value(kind)` returns `kind()`, or `None` when `kind` is `None`.
- `cub.fixed`: fixed-size containers. `FixSizeArray` has a capacity capped at its maximum size. `FixSizeBuff` is a byte buffer of fixed length. `Array` has a fixed number of elements, all built by one factory.
- `cub.threaddata`: `ThreadData` keeps one slot per thread id. The thread-info object you supply provides `max_thread_num` and `current_id()`. An index out of range raises `IndexError`.
- `cub.unknown`: `Interface` subclasses declare a numeric id with `iid=`. `Unknown.cast_to` and `unknown_cast` return the object if it implements the interface, and `None` otherwise.
- `cub.scope`: `ScopeExit` (or `make_scope_exit`) calls a function when a `with` block ends, whether or not it raised.
- `cub.byteorder`: `hton(value, size, signed=False)` converts a 1, 2, 4 or 8 byte integer from host to network byte order.
- `cub.log`: levelled console logging to standard output. Messages are coloured with ANSI codes when the listener is created with `colorful=True`. The module has `Level`, `StdoutListener`, `infra_printf` and `log_fatal` / `log_error` / `log_warn` / `log_info` / `log_debug`. The `log_*` functions take a file path, a line number and a printf-style format, and prefix the message with the file's base name and the line.

## Install

```
pip install .
```

## Example

```python
from cub.hashmap import HashMap
from cub.scope import ScopeExit
from cub.log import log_info

m = HashMap(capacity=4)
m.put(1, 2)
m[3] = 6
assert m[1] == 2 and len(m) == 2

with ScopeExit(lambda: log_info("example.py", 10, "done with %d entries", len(m))):
    pass
```

## What it does not do

This is a library only, with no command-line tool. It has no thread pool and no reference-counted pointers. Logging only writes lines to standard output; it does not write to files or other destinations.

## Tests

```
pip install .[test]
pytest
```