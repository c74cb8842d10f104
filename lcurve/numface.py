"""Count the surface elements of a star grid."""

from __future__ import annotations

import math
from collections.abc import Iterator


def _midpoints(lo: float, hi: float, count: int) -> Iterator[float]:
    """Yield the centres of ``count`` equal strips between lo and hi."""
    for i in range(count):
        yield lo + (hi - lo) * (i + 0.5) / count


def _strip_faces(lo: float, hi: float, count: int, span: float,
                 dtheta: float, fill: int, minimum: int) -> int:
    total = 0
    for theta in _midpoints(lo, hi, count):
        dphi = dtheta / math.sin(theta) / (1 + fill)
        total += max(minimum, int(span / dphi))
    return total


def numface(nlat: int, infill: bool, thelo: float, thehi: float,
            nlatfill: int, nlngfill: int) -> int:
    """Return the number of elements in a star grid.

    ``nlat`` is the basic number of latitude strips; if ``infill`` is set a
    finer grid (``nlatfill`` and ``nlngfill`` extra points between strips)
    covers one hemisphere between the colatitudes ``thelo`` and ``thehi``.
    """
    pi = math.pi
    dtheta = pi / nlat

    if not infill:
        nstrip = math.ceil(pi / dtheta)
        return _strip_faces(0.0, pi, nstrip, 2 * pi, dtheta, 0, 16)

    nl1 = math.ceil(thelo / dtheta)
    nl2 = math.ceil((1 + nlatfill) * (thehi - thelo) / dtheta)
    nl3 = math.ceil((thehi - thelo) / dtheta)
    nl4 = math.ceil((pi - thehi) / dtheta)
    return (
        _strip_faces(0.0, thelo, nl1, 2 * pi, dtheta, 0, 16)
        + _strip_faces(thelo, thehi, nl2, pi, dtheta, nlngfill, 8)
        + _strip_faces(thelo, thehi, nl3, pi, dtheta, 0, 8)
        + _strip_faces(thehi, pi, nl4, 2 * pi, dtheta, 0, 16)
    )