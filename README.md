# gglib

Small helpers with no third-party dependencies for working with lists, plain
values, JSON text and pseudo-random numbers.

## Modules

| Module | What it offers |
| --- | --- |
| `gglib.transform` | `map_`, `try_map`, `filter_`, `filter_map`, `try_filter_map`, `reject`, `partition`, `reduce_`, `fold`, `flat_map`, `flatten`, `concat`, `merge`, `for_each`, `for_each_indexed`, `type_assert`, `indirect`, `indirect_or`, `clone`, `clone_by`, `repeat`, `repeat_by`, `of`, `compact`, `to_map`, `to_map_values`, `group_by` |
| `gglib.search` | `contains`, `contains_any`, `contains_all`, `any_`, `all_`, `find`, `find_rev`, `index`, `index_rev`, `index_by`, `index_rev_by`, `first`, `last`, `get`, `count`, `count_by`, `count_values`, `count_values_by`, `equal`, `equal_by` |
| `gglib.aggregate` | `max_`, `max_by`, `min_`, `min_by`, `min_max`, `min_max_by`, `sum_`, `sum_by`, `avg`, `avg_by` |
| `gglib.setops` | `union`, `intersect`, `diff`, `uniq`, `uniq_by`, `dup`, `dup_by` |
| `gglib.ordering` | `sort`, `sort_clone`, `sort_by`, `sort_clone_by`, `stable_sort_by`, `reverse`, `reverse_clone`, `shuffle`, `shuffle_clone` |
| `gglib.slicing` | `chunk`, `divide`, `take`, `drop`, `slice_`, `insert`, `remove`, `remove_index` |
| `gglib.gvalue` | `zero`, `max_`, `min_`, `min_max`, `clamp`, `is_nil`, `is_not_nil`, `is_zero`, `is_not_zero`, `equal`, `add`, `type_assert`, `try_assert`, `less`, `less_equal`, `greater`, `greater_equal`, `between`, `once` |
| `gglib.gson` | `valid`, `marshal`, `marshal_indent`, `marshal_string`, `to_string`, `to_string_indent`, `unmarshal` |
| `gglib.fastrand` | `uint32`, `uint64`, `int31`, `int63`, `int31n`, `int63n`, `intn`, `float64`, `float32`, `uint32n`, `uint64n`, `read`, `shuffle`, `shuffle_in_place`, `perm` |
| `gglib.heapsort` | `sort`: in-place heap sort of a list |

## Sequences

```python
from gglib import transform, search, setops, slicing, aggregate, ordering

transform.map_([1, 2, 3], str)                          # ['1', '2', '3']
transform.filter_([1, 2, 3, 4], lambda x: x % 2 == 0)   # [2, 4]
transform.reduce_([1, 2, 3, 4, 5], lambda a, b: a + b)  # 15

search.get([1, 2, 3, 4, 5], -1)                # 5
search.index(["a", "b", "b"], "b")             # 1
search.index_rev(["a", "b", "b"], "b")         # 2

setops.union([1, 2, 3], [3, 4, 5])             # [1, 2, 3, 4, 5]
setops.dup([3, 2, 2, 3, 3])                    # [2, 3]

slicing.chunk([1, 2, 3, 4, 5], 2)              # [[1, 2], [3, 4], [5]]
slicing.divide([1, 2, 3, 4, 5], 2)             # [[1, 2, 3], [4, 5]]
slicing.slice_([1, 2, 3, 4, 5], -3, -1)        # [3, 4]
slicing.insert([1, 2, 3, 4], -1, 999)          # [1, 2, 3, 999, 4]

aggregate.min_max([0, 1, 4, 3])                # (0, 4)

s = [5, 1, 2, 3, 4]
ordering.sort_by(s, lambda a, b: a > b)        # s is now [5, 4, 3, 2, 1]
```

Negative indexes count from the end, as in Python's own indexing; `slice_`
never raises on out-of-range bounds, and a negative start with an end of `0`
means "up to the end".

Lookups that can find nothing return `None` (`index`, `index_by`, `min_max`,
…); `find`, `find_rev`, `first`, `last`, `get`, `reduce_`, `max_`, `min_` and
their `_by` forms also take an optional `default` to return instead.

Invalid arguments, such as a negative count for `take`, `drop` or `repeat`,
raise `ValueError`; `type_assert` raises `TypeError` for an element of the
wrong type.

## Values

```python
from gglib import gvalue

gvalue.clamp(5, 1, 10)          # 5
gvalue.min_max(1, 2, 3)         # (1, 3)
gvalue.is_zero("")              # True
gvalue.try_assert(1, float)     # (0.0, False)

config = gvalue.once(lambda: load_settings())
config()                        # calls load_settings the first time only
```

## JSON

`gglib.gson` writes compact, deterministic JSON: dictionary keys are sorted,
dataclass fields keep their declaration order (a field's name can be changed
through `metadata={"json": "name"}`, and `"-"` leaves it out), bytes are
written as base64, and `<`, `>` and `&` are escaped inside strings.
`unmarshal` converts the parsed document into a target type such as a
dataclass, `list[int]` or `dict[str, float]`.

```python
from dataclasses import dataclass
from gglib import gson

@dataclass
class Person:
    name: str
    age: int

gson.to_string(Person("test", 10))              # '{"name":"test","age":10}'
gson.to_string_indent(Person("test", 10), "", "  ")
gson.valid('{"name":"test", "age": 10')         # False
gson.unmarshal('{"name":"test","age":10}', Person)   # Person(name='test', age=10)
gson.unmarshal("[1,2, 3]", list[int])           # [1, 2, 3]
```

`marshal` and `marshal_string` raise on values they cannot encode;
`to_string` and `to_string_indent` return `""` instead. `unmarshal` raises
`ValueError` for invalid JSON or a document that does not fit the type.

## Random numbers

```python
from gglib import fastrand

fastrand.intn(10)        # an int in [0, 10)
fastrand.float64()       # a float in [0.0, 1.0)
fastrand.read(16)        # 16 pseudo-random bytes
fastrand.perm(5)         # a permutation of range(5)
```

These numbers are not suitable for cryptographic use.

## What this package does not do

It is a library only: it has no command-line tool, and it provides no set,
map or other collection types of its own beyond plain Python lists, dicts
and tuples.

## Tests

The test suite uses pytest, which the `test` extra installs.