"""Limb-darkening laws for stellar surface elements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class LimbType(Enum):
    """Form of the limb-darkening law."""

    POLY = "Poly"
    CLARET = "Claret"


@dataclass(frozen=True)
class LDC:
    """Four-coefficient limb-darkening law with a critical cutoff in mu."""

    ldc1: float = 0.0
    ldc2: float = 0.0
    ldc3: float = 0.0
    ldc4: float = 0.0
    mucrit: float = 0.0
    ltype: LimbType = LimbType.POLY

    def imu(self, mu: float) -> float:
        """Return the specific intensity at direction cosine ``mu``, relative to mu = 1."""
        if mu <= 0:
            return 0.0
        mu = min(mu, 1.0)
        ommu = 1.0 - mu
        im = 1.0
        if self.ltype is LimbType.POLY:
            im -= ommu * (
                self.ldc1 + ommu * (self.ldc2 + ommu * (self.ldc3 + ommu * self.ldc4))
            )
        elif self.ltype is LimbType.CLARET:
            im -= self.ldc1 + self.ldc2 + self.ldc3 + self.ldc4
            msq = math.sqrt(mu)
            im += msq * (
                self.ldc1 + msq * (self.ldc2 + msq * (self.ldc3 + msq * self.ldc4))
            )
        return im

    def see(self, mu: float) -> bool:
        """Return True if an element at direction cosine ``mu`` is beyond the cutoff."""
        return mu > self.mucrit