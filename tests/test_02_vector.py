"""Vector tests: construction, bounds checking, elementwise and row-style operations."""
import numpy as np
import pytest
from rowspace import Vector, DimensionMismatchError, EmptyVectorError, IndexOutOfRangeError, ValidationError


def test_construct_with_dimension():
    """A new vector of a given dimension is all zeros."""
    v = Vector(4)
    assert v.get_dimension() == 4
    assert len(v) == 4
    assert [v.get_value(i) for i in range(4)] == [0.0] * 4


def test_construct_from_values_and_copy():
    """Vectors copy their source; the deep copy is independent."""
    values = [1.0, 2.0, 3.0]
    v = Vector(values)
    values[0] = 99.0
    assert v.get_value(0) == 1.0
    w = Vector(v)
    w.set_value(-1.0, 0)
    assert v.get_value(0) == 1.0
    assert w.get_value(0) == -1.0
    assert v.clone() == v


def test_invalid_construction():
    with pytest.raises(ValidationError):
        Vector(-1)
    with pytest.raises(ValidationError):
        Vector([[1.0, 2.0], [3.0, 4.0]])


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range(index):
    """get and set outside [0, dimension) raise IndexOutOfRangeError."""
    v = Vector(3)
    with pytest.raises(IndexOutOfRangeError):
        v.get_value(index)
    with pytest.raises(IndexError):
        v.set_value(1.0, index)


def test_scale_and_swap():
    v = Vector([1.0, 2.0, 3.0])
    v.scale_value(10.0, 1)
    assert v.to_numpy().tolist() == [1.0, 20.0, 3.0]
    v.scale(0.5)
    assert v.to_numpy().tolist() == [0.5, 10.0, 1.5]
    v.swap_values(0, 2)
    assert v.to_numpy().tolist() == [1.5, 10.0, 0.5]


def test_add():
    """add sums componentwise in place and rejects other dimensions."""
    v = Vector([1.0, 2.0, 3.0])
    v.add(Vector([1.0, 1.0, 1.0]))
    assert v.to_numpy().tolist() == [2.0, 3.0, 4.0]
    with pytest.raises(DimensionMismatchError) as error:
        v.add(Vector(2))
    assert error.value.expected == 3
    assert error.value.actual == 2


def test_dot():
    assert Vector([1.0, 2.0, 3.0]).dot(Vector([4.0, 5.0, 6.0])) == 32.0
    with pytest.raises(DimensionMismatchError):
        Vector(3).dot(Vector(4))


def test_add_scaled():
    """add_scaled adds a scaled source component to the destination component."""
    v = Vector([1.0, 2.0, 3.0])
    v.add_scaled(0, 2, 4.0)
    assert v.to_numpy().tolist() == [1.0, 2.0, 7.0]
    v.add_scaled(0, 2, -4.0)
    assert v.to_numpy().tolist() == [1.0, 2.0, 3.0]


def test_argmax():
    """argmax returns the lowest index among tied maxima."""
    assert Vector([1.0, 3.0, 3.0, 2.0]).argmax() == 1
    assert Vector([-5.0]).argmax() == 0
    assert Vector([-1.0, -0.5, -2.0]).argmax() == 1
    with pytest.raises(EmptyVectorError):
        Vector(0).argmax()


def test_traversal_is_restartable():
    """entries and for_each visit every component in ascending order, repeatably."""
    v = Vector([3.0, 1.0, 2.0])
    assert list(v.entries()) == [(0, 3.0), (1, 1.0), (2, 2.0)]
    assert list(v.entries()) == list(v.entries())
    visited = []
    v.for_each(lambda i, value: visited.append((i, value)))
    assert visited == list(v.entries())
    v.set_value(5.0, 1)
    assert list(v.entries())[1] == (1, 5.0)


def test_randomize(rng):
    """randomize draws every component from [-0.5, 0.5)."""
    v = Vector(200)
    v.randomize(rng)
    values = v.to_numpy()
    assert np.all(values >= -0.5)
    assert np.all(values < 0.5)
    assert len(set(values.tolist())) > 1


def test_str_and_equality():
    assert str(Vector([1, 2])) == "[1.0, 2.0]"
    assert Vector([1.0, 2.0]) == Vector([1, 2])
    assert Vector([1.0, 2.0]) != Vector([2.0, 1.0])
