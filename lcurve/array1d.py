"""A one-dimensional numerical array with element-wise arithmetic."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Iterator
from numbers import Number


class Array1DError(ValueError):
    """Raised for invalid operations on an Array1D."""


class Array1D:
    """A sequence of numbers supporting element-wise arithmetic and statistics."""

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._data = list(values)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Array1D(self._data[index])
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Array1D({self._data!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Array1D):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _combine(self, other, op: Callable, symbol: str) -> Array1D:
        if isinstance(other, Array1D):
            if len(self) != len(other):
                raise Array1DError(
                    f"operator {symbol}: incompatible numbers of elements, "
                    f"{len(self)} versus {len(other)}"
                )
            return Array1D(op(a, b) for a, b in zip(self._data, other._data))
        if isinstance(other, Number):
            return Array1D(op(a, other) for a in self._data)
        return NotImplemented

    def __add__(self, other) -> Array1D:
        return self._combine(other, operator.add, "+")

    def __sub__(self, other) -> Array1D:
        return self._combine(other, operator.sub, "-")

    def __mul__(self, other) -> Array1D:
        return self._combine(other, operator.mul, "*")

    def __rmul__(self, other) -> Array1D:
        if isinstance(other, Number):
            return Array1D(other * a for a in self._data)
        return NotImplemented

    def __truediv__(self, other) -> Array1D:
        return self._combine(other, operator.truediv, "/")

    def max(self) -> float:
        """Return the largest value."""
        if not self._data:
            raise Array1DError("null array, cannot take maximum")
        return max(self._data)

    def min(self) -> float:
        """Return the smallest value."""
        if not self._data:
            raise Array1DError("null array, cannot take minimum")
        return min(self._data)

    def cos(self) -> Array1D:
        """Return the element-wise cosine."""
        return Array1D(math.cos(a) for a in self._data)

    def sin(self) -> Array1D:
        """Return the element-wise sine."""
        return Array1D(math.sin(a) for a in self._data)

    def monotonic(self) -> bool:
        """Return True if the values strictly rise, or never rise, throughout."""
        if len(self._data) < 3:
            return True
        up = self._data[0] < self._data[-1]
        return all(
            (prev < cur) == up for prev, cur in zip(self._data, self._data[1:])
        )

    def _before(self) -> Callable[[int], bool]:
        """Predicate: element i lies at or before x in the array's ordering."""
        data = self._data
        ascending = data[-1] >= data[0]
        if ascending:
            return lambda i, x: data[i] <= x
        return lambda i, x: data[i] >= x

    def _bisect(self, x: float, lo: int, hi: int) -> int:
        before = self._before()
        while lo < hi:
            mid = (lo + hi) // 2
            if before(mid, x):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def locate(self, x: float) -> int:
        """Return j such that x lies between elements j-1 and j of an ordered array.

        Returns 0 if x precedes all elements and len(self) if it follows them.
        """
        if not self._data:
            return 0
        return self._bisect(x, 0, len(self._data))

    def hunt(self, x: float, jhi: int) -> int:
        """As locate, but searching outwards from the guess ``jhi``."""
        n = len(self._data)
        if n == 0:
            return 0
        jhi = max(0, min(jhi, n))
        before = self._before()
        step = 1
        if jhi < n and before(jhi, x):
            lo = jhi + 1
            hi = lo
            while hi < n and before(hi, x):
                lo = hi + 1
                hi += step
                step *= 2
            hi = min(hi, n)
        else:
            hi = jhi
            lo = jhi - 1
            while lo >= 0 and not before(lo, x):
                hi = lo
                lo -= step
                step *= 2
            lo = lo + 1 if lo >= 0 else 0
        return self._bisect(x, lo, hi)

    def sort(self) -> list[int]:
        """Sort into ascending order in place; return the original index of each element."""
        key = sorted(range(len(self._data)), key=self._data.__getitem__)
        self._data = [self._data[i] for i in key]
        return key

    def select(self, k: int) -> float:
        """Return the k-th smallest value, counting from 0."""
        if not 0 <= k < len(self._data):
            raise Array1DError(
                f"select: k = {k} out of range for {len(self._data)} elements"
            )
        return sorted(self._data)[k]

    def centile(self, pcent: float) -> float:
        """Return the value at percentile ``pcent`` (0 to 100)."""
        n = len(self._data)
        if n == 0:
            raise Array1DError("null array, cannot take centile")
        k = int(pcent / 100 * n)
        k = min(max(k, 0), n - 1)
        return self.select(k)

    def median(self) -> float:
        """Return the median, averaging the two middle values for even lengths."""
        n = len(self._data)
        if n == 0:
            raise Array1DError("null array, cannot take median")
        ordered = sorted(self._data)
        if n % 2 == 0:
            return (ordered[n // 2 - 1] + ordered[n // 2]) / 2
        return ordered[n // 2]

    def sum(self) -> float:
        """Return the sum, zero for an empty array."""
        return sum(self._data, 0)

    def mean(self) -> float:
        """Return the mean, zero for an empty array."""
        if not self._data:
            return 0
        return self.sum() / len(self._data)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(sum(a * a for a in self._data))