"""Optimal scaling of a model light curve to data."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .array1d import Array1D


@dataclass(frozen=True)
class Datum:
    """A single data point: flux, its uncertainty and a weight.

    Points with a weight of zero or less are ignored when fitting.
    """

    flux: float
    ferr: float
    weight: float = 1.0


@dataclass(frozen=True)
class RescaleResult:
    """Outcome of re_scale: optimum factor, scaled fit, weighted chi**2 and weighted count."""

    scale: float
    fit: Array1D
    chisq: float
    wnok: float


def re_scale(data: Sequence[Datum], fit) -> RescaleResult:
    """Scale ``fit`` to minimise chi**2 against ``data``.

    This amounts to treating the distance or absolute scale of the system as
    completely unknown. If no point has positive weight the scale is 1, the
    fit is returned unchanged and chi**2 is zero.
    """
    fit = Array1D(fit)
    if len(data) != len(fit):
        raise ValueError(
            f"re_scale: {len(data)} data points versus {len(fit)} fit points"
        )

    used = [(d, f) for d, f in zip(data, fit) if d.weight > 0.0]
    wnok = sum(d.weight for d, _ in used)

    if wnok <= 0.0:
        return RescaleResult(scale=1.0, fit=fit, chisq=0.0, wnok=wnok)

    sdy = sum(d.weight / d.ferr**2 * d.flux * f for d, f in used)
    syy = sum(d.weight / d.ferr**2 * f * f for d, f in used)
    scale = sdy / syy
    scaled = fit * scale

    chisq = sum(
        d.weight * ((d.flux - f) / d.ferr) ** 2
        for d, f in zip(data, scaled)
        if d.weight > 0.0
    )
    return RescaleResult(scale=scale, fit=scaled, chisq=chisq, wnok=wnok)