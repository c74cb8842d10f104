"""The parameter catalogue: names, fitting order and bounds of the model parameters."""

from __future__ import annotations

import math

_INF = math.inf

# Physical parameters, each given as "value range dstep vary".
PHYSICAL: tuple[str, ...] = (
    "q", "iangle", "r1", "r2", "cphi3", "cphi4", "spin1", "spin2",
    "t1", "t2",
    "ldc1_1", "ldc1_2", "ldc1_3", "ldc1_4",
    "ldc2_1", "ldc2_2", "ldc2_3", "ldc2_4",
    "velocity_scale", "beam_factor1", "beam_factor2",
    "t0", "period", "pdot", "deltat",
    "gravity_dark1", "gravity_dark2", "absorb",
    "slope", "quad", "cube", "third",
    "rdisc1", "rdisc2", "height_disc", "beta_disc", "temp_disc",
    "texp_disc", "lin_limb_disc", "quad_limb_disc", "temp_edge",
    "absorb_edge",
    "radius_spot", "length_spot", "height_spot", "expon_spot",
    "epow_spot", "angle_spot", "yaw_spot", "temp_spot", "tilt_spot",
    "cfrac_spot",
)

# Computational settings, each a single value.
COMPUTATIONAL: tuple[str, ...] = (
    "delta_phase", "nlat1f", "nlat2f", "nlat1c", "nlat2c", "npole",
    "nlatfill", "nlngfill", "lfudge", "llo", "lhi", "phase1", "phase2",
    "wavelength", "roche1", "roche2", "eclipse1", "eclipse2", "glens1",
    "use_radii", "tperiod", "gdark_bolom1", "gdark_bolom2", "mucrit1",
    "mucrit2", "limb1", "limb2", "mirror", "add_disc", "nrad", "opaque",
    "add_spot", "nspot", "iscale",
)

# Parameters added later on; when absent they are set to zero and held fixed.
DEFAULTS: dict[str, str] = {
    "pdot": "0 1.e-10 1.e-10 0 0",
    "third": "0 1.e-10 1.e-10 0 0",
    "temp_edge": "0 1.e-10 1.e-10 0 0",
    "absorb_edge": "0 1.e-10 1.e-10 0 0",
}

_SPOT_GROUPS: dict[str, tuple[str, ...]] = {
    **{
        f"stsp{tag}": tuple(
            f"stsp{tag}_{field}" for field in ("long", "lat", "fwhm", "tcen")
        )
        for tag in ("11", "12", "13", "21", "22")
    },
    "uesp": ("uesp_long1", "uesp_long2", "uesp_lathw", "uesp_taper", "uesp_temp"),
}

_LEADING = ("q", "iangle")
_RADII = ("r1", "r2")
_POTENTIALS = ("cphi3", "cphi4")
_CORE = (
    "spin1", "spin2", "t1", "t2",
    "ldc1_1", "ldc1_2", "ldc1_3", "ldc1_4",
    "ldc2_1", "ldc2_2", "ldc2_3", "ldc2_4",
    "velocity_scale", "beam_factor1", "beam_factor2",
    "t0", "period", "pdot", "deltat",
    "gravity_dark1", "gravity_dark2", "absorb",
    "slope", "quad", "cube", "third",
)
_DISC = (
    "rdisc1", "rdisc2", "height_disc", "beta_disc", "temp_disc",
    "texp_disc", "lin_limb_disc", "quad_limb_disc", "temp_edge",
    "absorb_edge",
)
_SPOT = (
    "radius_spot", "length_spot", "height_spot", "expon_spot",
    "epow_spot", "angle_spot", "yaw_spot", "temp_spot", "tilt_spot",
    "cfrac_spot",
)

_LIMITS: dict[str, tuple[float, float]] = {
    "q": (0.01, 2.0),
    "iangle": (0.0, 90.0),
    "t0": (-_INF, _INF),
    "pdot": (-_INF, _INF),
    "absorb": (0.0, 1.0),
}

_ALL_FITTABLE = frozenset(PHYSICAL).union(*_SPOT_GROUPS.values())


def fit_order(use_radii: bool, add_disc: bool, add_spot: bool) -> list[str]:
    """Return the names of the physical parameters in the order they are fitted.

    Radii or potentials are chosen by ``use_radii``; disc and bright-spot
    parameters appear only when those components are present. Star-spot
    parameters always close the list; whether they take part depends on
    whether they were defined.
    """
    names = list(_LEADING)
    names.extend(_RADII if use_radii else _POTENTIALS)
    names.extend(_CORE)
    if add_disc:
        names.extend(_DISC)
    if add_spot:
        names.extend(_SPOT)
    for group in _SPOT_GROUPS.values():
        names.extend(group)
    return names


def limit(name: str) -> tuple[float, float]:
    """Return the (lower, upper) bounds given to a fitted parameter."""
    if name not in _ALL_FITTABLE:
        raise KeyError(f"unknown parameter {name!r}")
    return _LIMITS.get(name, (0.0, _INF))


def spot_groups() -> dict[str, tuple[str, ...]]:
    """Return the optional star-spot groups; each must be given whole or not at all."""
    return dict(_SPOT_GROUPS)


def required_names() -> tuple[str, ...]:
    """Return every parameter that a configuration must supply.

    Those listed in DEFAULTS may be omitted and are then filled in with zero.
    """
    return PHYSICAL + COMPUTATIONAL