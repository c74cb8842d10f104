import math

import pytest

from lcurve.array1d import Array1D, Array1DError


def test_sequence_protocol():
    arr = Array1D([3.0, 1.0, 2.0])
    assert len(arr) == 3
    assert list(arr) == [3.0, 1.0, 2.0]
    arr[1] = 5.0
    assert arr[1] == 5.0
    assert arr[0:2] == Array1D([3.0, 5.0])


def test_add_sub_round_trip():
    a = Array1D([1.5, -2.0, 4.25])
    b = Array1D([0.5, 3.0, -1.25])
    assert (a + b) - b == a


def test_scalar_operations():
    a = Array1D([1.0, 2.0, 4.0])
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 4) / 4 == a
    assert (a + 3) - 3 == a


def test_elementwise_mul_div_round_trip():
    a = Array1D([1.0, 2.0, 4.0])
    b = Array1D([2.0, 4.0, 8.0])
    assert (a * b) / b == a


@pytest.mark.parametrize(
    "op",
    [
        lambda x, y: x + y,
        lambda x, y: x - y,
        lambda x, y: x * y,
        lambda x, y: x / y,
    ],
)
def test_size_mismatch_raises(op):
    with pytest.raises(Array1DError):
        op(Array1D([1.0, 2.0]), Array1D([1.0, 2.0, 3.0]))


def test_max_min_and_empty_errors():
    arr = Array1D([3.0, -1.0, 2.0])
    assert arr.max() == 3.0
    assert arr.min() == -1.0
    with pytest.raises(Array1DError):
        Array1D().max()
    with pytest.raises(Array1DError):
        Array1D().min()


def test_sum_and_mean_of_empty_are_zero():
    assert Array1D().sum() == 0
    assert Array1D().mean() == 0


def test_mean_times_length_is_sum():
    arr = Array1D([1.0, 2.0, 3.0, 10.0])
    assert arr.mean() * len(arr) == pytest.approx(arr.sum())


def test_length_is_euclidean():
    arr = Array1D([3.0, 4.0])
    assert arr.length() == pytest.approx(math.hypot(3.0, 4.0))


def test_cos_sin_identity():
    arr = Array1D([0.1, 1.3, -2.0])
    c = arr.cos()
    s = arr.sin()
    for ci, si in zip(c, s):
        assert ci * ci + si * si == pytest.approx(1.0)
    assert list(arr) == [0.1, 1.3, -2.0]


def test_monotonic():
    assert Array1D([1.0, 2.0]).monotonic()
    assert Array1D([1.0, 2.0, 3.0, 4.0]).monotonic()
    assert Array1D([4.0, 3.0, 2.0, 1.0]).monotonic()
    assert not Array1D([1.0, 3.0, 2.0, 4.0]).monotonic()


def test_sort_returns_key_to_original_order():
    original = [5.0, 1.0, 4.0, 2.0, 3.0]
    arr = Array1D(original)
    key = arr.sort()
    assert list(arr) == sorted(original)
    assert [original[k] for k in key] == list(arr)
    assert sorted(key) == list(range(len(original)))


def test_select_and_median():
    arr = Array1D([3.0, 1.0, 2.0])
    assert arr.select(0) == 1.0
    assert arr.select(2) == 3.0
    assert arr.median() == 2.0
    with pytest.raises(Array1DError):
        arr.select(3)


def test_even_median_averages_middle_pair():
    arr = Array1D([4.0, 1.0, 3.0, 2.0])
    assert arr.median() == (arr.select(1) + arr.select(2)) / 2


def test_centile_limits():
    arr = Array1D([7.0, 2.0, 9.0, 4.0, 5.0])
    assert arr.centile(0) == arr.min()
    assert arr.centile(100) == arr.max()
    assert arr.centile(-20) == arr.min()
    assert arr.centile(50) == arr.median()


@pytest.mark.parametrize("x", [-1.0, 0.0, 0.5, 2.0, 2.5, 4.0, 9.0])
def test_locate_brackets_value_ascending(x):
    arr = Array1D([0.0, 1.0, 2.0, 3.0, 4.0])
    j = arr.locate(x)
    assert 0 <= j <= len(arr)
    if j > 0:
        assert arr[j - 1] <= x
    if j < len(arr):
        assert x < arr[j]


@pytest.mark.parametrize("x", [-1.0, 0.5, 2.5, 9.0])
def test_locate_brackets_value_descending(x):
    arr = Array1D([4.0, 3.0, 2.0, 1.0, 0.0])
    j = arr.locate(x)
    if j > 0:
        assert arr[j - 1] >= x
    if j < len(arr):
        assert x > arr[j]


@pytest.mark.parametrize("guess", [0, 1, 3, 5, 8, -2, 20])
@pytest.mark.parametrize("x", [-3.0, 0.5, 2.0, 4.7, 7.5, 100.0])
def test_hunt_agrees_with_locate(guess, x):
    arr = Array1D([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    assert arr.hunt(x, guess) == arr.locate(x)


@pytest.mark.parametrize("guess", [0, 2, 4])
def test_hunt_agrees_with_locate_descending(guess):
    arr = Array1D([9.0, 7.0, 5.0, 3.0])
    for x in (10.0, 8.0, 4.0, 1.0):
        assert arr.hunt(x, guess) == arr.locate(x)