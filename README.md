# qolkit

Small, dependency-free helpers that take the boilerplate out of everyday
collection handling: update-or-create operations on dicts, a few list and
optional-value utilities, a two-level dict keyed by pairs, and trees of
nested maps.

## Installation

```
pip install qolkit
```

## What is inside

### `qolkit.mapping_ops`

Update a dict in place, creating the entry when the key is missing:

```python
from qolkit.mapping_ops import add_or_insert, push_or_insert, append_or_insert, insert_or_insert

counts = {"a": 1}
add_or_insert(counts, "a", 3)      # counts == {"a": 4}

groups = {}
push_or_insert(groups, "a", 3)     # groups == {"a": [3]}
extra = [4, 5]
append_or_insert(groups, "a", extra)
# groups == {"a": [3, 4, 5]}, and extra is now empty

tags = {}
insert_or_insert(tags, "a", 3)     # tags == {"a": {3}}; returns True
insert_or_insert(tags, "a", 3)     # returns False, value already present
```

`add_or_insert` computes `value + existing`, then removes and re-inserts the
key, so in a plain dict the entry moves to the end.

### `qolkit.sequences`

- `find_first(items, item)` – index of the first element equal to `item`,
  or `None`.
- `swap_remove_first_item(items, item)` – remove the first match from a list
  by moving the last element into its place (order is not kept); returns
  whether anything was removed.
- `get_many(container, keys)` – a list of the values for several distinct
  keys of a mapping, or several distinct indices of a sequence; `None` if any
  key is missing, out of range or repeated.
- `unwrap_all(options)` – all values as a list if none is `None`, otherwise
  `None`.
- `inner_iter(iterable)` – iterate an optional iterable; `None` yields nothing.
- `ok_or(error)` – a context manager or decorator that replaces any
  `Exception` raised inside it with `error` (chained to the original).
- `unwrap_or(value, default)` – `value`, or `default` when `value` is `None`.
- `power(base, exponent)` – floating-point exponentiation with an integer or
  float exponent; overflow and division by zero give an infinity and
  out-of-domain results give `nan` instead of raising.

```python
from qolkit.sequences import ok_or, power

with ok_or(KeyError("missing")):
    {}["x"]                        # raises KeyError("missing")

power(4.0, 2)                      # 16.0
```

### `qolkit.bi_hashmap`

`BiHashMap` is a two-level dict addressed by `(outer, inner)` key pairs:

```python
from qolkit.bi_hashmap import BiHashMap

m = BiHashMap()
m.insert((1, 2), 3)      # returns the replaced value, here None
m.get((1, 2))            # 3
list(m)                  # [((1, 2), 3)]
len(m)                   # 1
m.inner                  # {1: {2: 3}}
```

It can be built from an existing nested dict (`BiHashMap({1: {2: 3}})`) or
from `((outer, inner), value)` pairs with `BiHashMap.from_items(...)`, and
also offers `add_or_insert`, `push_or_insert` and `append_or_insert`, which
behave like the functions of the same name in `qolkit.mapping_ops`.

### `qolkit.recurrent_map`

`RecurrentHashMap` and `RecurrentBTreeMap` are trees whose values are maps of
the same kind. `get` and `insert` work on direct children; `merge(key, value)`
combines a subtree into the existing one recursively and returns whether the
key was already present; `push(key)` adds an empty child and returns whether
it already existed. Iteration yields `(key, submap)` pairs.
`RecurrentBTreeMap` iterates in key order and its instances can be compared
with `<`, `<=`, `>` and `>=`.

```python
from qolkit.recurrent_map import RecurrentHashMap

tree = RecurrentHashMap()
tree.push("a")           # False
tree.push("a")           # True
```

## Running the tests

```
pip install -e ".[test]"
pytest
```