import pytest

from cratekit.vecset import VecSet


def test_from_vec():
    s = VecSet([1, 4, 3, 2, 5, 7, 9, 2, 4, 6, 7, 8, 0])
    assert s.as_list() == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_union_inplace():
    s1 = VecSet([1, 2, 3, 5])
    s2 = VecSet([2, 4, 5, 6])
    s1.union_inplace(s2)
    assert s1.as_list() == [1, 2, 3, 4, 5, 6]


def test_union():
    s1 = VecSet([1, 2, 3, 5])
    s2 = VecSet([2, 4, 5, 6])
    s3 = s1.union(s2)
    assert s3.as_list() == [1, 2, 3, 4, 5, 6]
    assert s1.as_list() == [1, 2, 3, 5]


def test_intersection():
    s1 = VecSet([1, 2, 3, 5])
    s2 = VecSet([2, 4, 5, 6])
    assert s1.intersection(s2).as_list() == [2, 5]


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ([1, 2, 3, 5], [2, 4, 5, 6], [1, 3]),
        ([1, 2, 3, 5], [], [1, 2, 3, 5]),
        ([3], [1, 2, 4, 5], [3]),
    ],
)
def test_difference_inplace(lhs, rhs, expected):
    s1 = VecSet(lhs)
    s1.difference_inplace(VecSet(rhs))
    assert s1.as_list() == expected


def test_empty_set():
    s = VecSet()
    assert len(s) == 0
    assert list(s) == []
    assert not s.contains(1)


def test_from_single():
    s = VecSet.from_single(3)
    assert s.as_list() == [3]
    assert 3 in s


def test_insert_keeps_order_and_reports_previous():
    s = VecSet([5, 1])
    assert s.insert(3) is None
    assert s.as_list() == [1, 3, 5]
    assert s.insert(3) == 3
    assert len(s) == 3


def test_remove():
    s = VecSet([1, 2, 3])
    assert s.remove(2) == 2
    assert s.remove(2) is None
    assert s.as_list() == [1, 3]


def test_contains_and_membership():
    s = VecSet(["b", "a", "c"])
    assert s.contains("a")
    assert "c" in s
    assert "z" not in s
    assert 1 not in s


def test_iteration_is_sorted():
    s = VecSet([9, 2, 7, 2])
    assert list(s) == sorted(set([9, 2, 7]))


def test_set_operations_match_builtin_sets():
    a = [3, 8, 1, 9, 4, 4]
    b = [4, 2, 9, 10]
    assert VecSet(a).union(VecSet(b)).as_list() == sorted(set(a) | set(b))
    assert VecSet(a).intersection(VecSet(b)).as_list() == sorted(set(a) & set(b))
    d = VecSet(a)
    d.difference_inplace(VecSet(b))
    assert d.as_list() == sorted(set(a) - set(b))


def test_equality():
    assert VecSet([2, 1]) == VecSet([1, 2, 2])
    assert VecSet([1]) != VecSet([1, 2])