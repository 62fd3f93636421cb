import copy
from dataclasses import dataclass

import pytest

from gglib import gson, gvalue
from gglib.transform import (
    clone,
    clone_by,
    compact,
    concat,
    filter_,
    filter_map,
    flat_map,
    flatten,
    fold,
    for_each,
    for_each_indexed,
    group_by,
    indirect,
    indirect_or,
    map_,
    merge,
    of,
    partition,
    reduce_,
    reject,
    repeat,
    repeat_by,
    to_map,
    to_map_values,
    try_filter_map,
    try_map,
    type_assert,
)


@dataclass
class Box:
    value: int


def _is_even(i):
    return i % 2 == 0


def test_map():
    assert map_([1, 2, 3], str) == ["1", "2", "3"]
    assert map_([], str) == []


def test_try_map():
    assert try_map(of("1", "2", "3"), int) == [1, 2, 3]
    assert try_map([], int) == []
    with pytest.raises(ValueError):
        try_map(of("1", "2", "a"), int)


def test_filter():
    assert filter_([], gvalue.is_zero) == []
    assert filter_([0, 1, 2, 3], gvalue.is_not_zero) == [1, 2, 3]
    assert filter_([0, 1, 2, 3], gvalue.is_zero) == [0]


def test_filter_map():
    f = lambda i: (str(i), i != 0)
    assert filter_map([1, 2, 3, 0, 0], f) == ["1", "2", "3"]
    assert filter_map([0, 0], f) == []
    assert filter_map([], f) == []


def test_try_filter_map():
    assert try_filter_map(of("1", "2", "3"), int) == [1, 2, 3]
    assert try_filter_map(of("1", "2", "a"), int) == [1, 2]
    assert try_filter_map(of("1", "a", "3"), int) == [1, 3]
    assert try_filter_map(of("a", "2", "3"), int) == [2, 3]
    assert try_filter_map(of("a", "a", "a"), int) == []
    assert try_filter_map([], int) == []


def test_reject():
    assert reject([], gvalue.is_zero) == []
    assert reject([0, 1, 2, 3], gvalue.is_zero) == [1, 2, 3]
    assert reject([0, 1, 2, 3], gvalue.is_not_zero) == [0]


def test_partition():
    assert partition([], gvalue.is_zero) == ([], [])
    assert partition([0, 1, 2, 3], gvalue.is_not_zero) == ([1, 2, 3], [0])
    assert partition([0, 1, 2, 3], gvalue.is_zero) == ([0], [1, 2, 3])
    assert partition([1, 2, 3, 4, 5], _is_even) == ([2, 4], [1, 3, 5])


def test_reduce():
    assert reduce_([0, 1, 2, 3], gvalue.add) == 6
    assert reduce_([1, 2, 3, 4, 5], gvalue.add) == 15
    assert reduce_([], gvalue.add) is None
    assert reduce_([], gvalue.add, -1) == -1


def test_fold():
    assert fold([0, 1, 2, 3], gvalue.add, 4) == 10
    assert fold([0, 1, 2, 3], gvalue.add, 2) == 8
    assert fold([], gvalue.add, 1) == 1


def test_flat_map():
    assert flat_map([[0], [1, 2], [3, 4]], lambda v: v) == [0, 1, 2, 3, 4]


def test_flat_map_quarters():
    quarters = {"Q1": [1, 2, 3], "Q2": [4, 5, 6], "Q3": [7, 8, 9], "Q4": [10, 11, 12]}
    assert flat_map(["Q1", "Q3"], quarters.__getitem__) == [1, 2, 3, 7, 8, 9]


def test_flat_map_knight():
    knight_reach = {
        "a1": ["b3", "c2"],
        "a2": ["b4", "c1", "c3"],
        "a3": ["b1", "b5", "c2", "c4"],
    }
    assert flat_map(["a1", "a2"], knight_reach.get) == ["b3", "c2", "b4", "c1", "c3"]


def test_flat_map_moves():
    move = lambda x: [x - 1, x + 1]
    assert flat_map([0], move) == [-1, 1]
    assert flat_map(flat_map([0], move), move) == [-2, 0, 0, 2]
    assert flat_map([-1, 1], move) == [-2, 0, 0, 2]


def test_flat_map_parents():
    parents = lambda i: [i + " 's mom", i + " 's dad"]
    assert flat_map(["L 's mom", "L 's dad"], parents) == [
        "L 's mom 's mom",
        "L 's mom 's dad",
        "L 's dad 's mom",
        "L 's dad 's dad",
    ]


def test_flatten():
    assert flatten([[0], [1, 2], [3, 4]]) == [0, 1, 2, 3, 4]
    assert flatten([[1, 2], [3, 4, 5]]) == [1, 2, 3, 4, 5]


def test_concat_and_merge():
    assert concat([0], [1, 2], [3, 4]) == [0, 1, 2, 3, 4]
    assert merge([1, 2], [3, 4, 5]) == [1, 2, 3, 4, 5]
    assert concat() == []


def test_for_each():
    s = [0, 1, 2, 3, 4]
    collected = []
    for_each(s, collected.append)
    assert collected == s


def test_for_each_indexed():
    indexes = []
    for_each_indexed(["0", "1", "2", "3", "4"], lambda i, v: indexes.append(i))
    assert indexes == [0, 1, 2, 3, 4]


def test_type_assert():
    assert type_assert([1, 2, 3, 4], int) == [1, 2, 3, 4]
    assert type_assert([1, 2, 3, 4], object) == [1, 2, 3, 4]
    with pytest.raises(TypeError):
        type_assert([1, 2, 3, 4], float)


def test_indirect():
    s1 = [None, None, None, 102, 103, 104]
    s2 = clone(s1)
    assert indirect(s1) == [102, 103, 104]
    assert s1 == s2


def test_indirect_or():
    assert indirect_or([1, 2, None, 3, None], -1) == [1, 2, -1, 3, -1]


def test_clone():
    src = [0, 1, 4, 3, 1, 4]
    dst = clone(src)
    assert dst == src
    assert dst is not src
    assert clone(None) is None


def test_clone_keeps_list_subclass():
    class Ints(list):
        pass

    result = clone(Ints([0, 1, 4, 3, 1, 4]))
    assert result == [0, 1, 4, 3, 1, 4]
    assert type(result) is Ints


def test_clone_is_shallow():
    src = [Box(1), Box(2)]
    dst = clone(src)
    assert dst == src
    assert dst[0] is src[0]
    assert dst[1] is src[1]


def test_clone_by():
    ident = lambda v: v
    assert clone_by([0, 1, 4, 3, 1, 4], ident) == [0, 1, 4, 3, 1, 4]
    assert clone_by(None, None) is None

    class Ints(list):
        pass

    result = clone_by(Ints([0, 1, 4, 3, 1, 4]), ident)
    assert result == [0, 1, 4, 3, 1, 4]
    assert type(result) is Ints


def test_clone_by_deep():
    src = [Box(1), Box(2)]
    dst = clone_by(src, copy.copy)
    assert dst == src
    assert dst[0] is not src[0]
    assert dst[1] is not src[1]


def test_repeat():
    with pytest.raises(ValueError):
        repeat(123, -1)
    assert repeat(123, 0) == []
    assert repeat(123, 3) == [123, 123, 123]


def test_repeat_is_shallow():
    result = repeat(Box(123), 3)
    assert result == [Box(123), Box(123), Box(123)]
    result[1].value = 456
    assert result == [Box(456), Box(456), Box(456)]


def test_repeat_by():
    fn = lambda: 123
    with pytest.raises(ValueError):
        repeat_by(fn, -1)
    assert repeat_by(fn, 0) == []
    assert repeat_by(fn, 3) == [123, 123, 123]


def test_repeat_by_distinct_objects():
    make = lambda: Box(123)
    lhs, rhs = repeat_by(make, 3), repeat_by(make, 3)
    assert lhs == rhs
    assert all(a is not b for a, b in zip(lhs, rhs))
    assert lhs[0] is not lhs[1]


def test_of():
    assert of() == []
    assert of(1) == [1]
    assert of(1, 2, 3) == [1, 2, 3]


def test_compact():
    assert compact([]) == []
    assert compact([0, 1, 2, 3, 4]) == [1, 2, 3, 4]
    assert compact([0, 1, 0, 0, 2, 3, 0, -1, 4]) == [1, 2, 3, -1, 4]
    assert compact([0, 0, 0]) == []
    assert compact(["", "foo", "", "bar"]) == ["foo", "bar"]


def test_to_map():
    @dataclass
    class Foo:
        id: int
        name: str

    mapper = lambda f: (f.id, f.name)
    assert to_map([], mapper) == {}
    assert to_map([Foo(1, "one"), Foo(2, "two"), Foo(3, "three")], mapper) == {
        1: "one",
        2: "two",
        3: "three",
    }


def test_to_map_values():
    @dataclass
    class Foo:
        id: int

    mapper = lambda f: f.id
    assert to_map_values([], mapper) == {}
    assert to_map_values([Foo(1), Foo(2), Foo(1), Foo(3)], mapper) == {
        1: Foo(1),
        2: Foo(2),
        3: Foo(3),
    }


def test_group_by():
    key = lambda v: "even" if v % 2 == 0 else "odd"
    assert group_by([1, 2, 3, 4], key) == {"odd": [1, 3], "even": [2, 4]}
    assert group_by([], str) == {}


def test_example_json_output():
    as_pair = lambda i: (str(i), i)
    assert gson.to_string(to_map([1, 2, 3, 4, 5], as_pair)) == '{"1":1,"2":2,"3":3,"4":4,"5":5}'
    assert gson.to_string(to_map_values([1, 2, 3, 4, 5], str)) == '{"1":1,"2":2,"3":3,"4":4,"5":5}'
    grouped = group_by([1, 2, 3, 4, 5], lambda i: "even" if i % 2 == 0 else "odd")
    assert gson.to_string(grouped) == '{"even":[2,4],"odd":[1,3,5]}'


def test_example_high_order():
    assert map_([1, 2, 3, 4, 5], str) == ["1", "2", "3", "4", "5"]
    assert filter_([1, 2, 3, 4, 5], _is_even) == [2, 4]
    assert reduce_([1, 2, 3, 4, 5], gvalue.add) == 15