"""The binary-star light-curve model: its parameters and fitting interface."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping, Sequence

from .array1d import Array1D
from .catalogue import PHYSICAL, COMPUTATIONAL, fit_order, limit, spot_groups
from .config import read_parameters
from .ldc import LimbType
from .pparam import Pparam, parse_bool


class ModelError(ValueError):
    """Raised when a model cannot be built or updated."""


_FLOAT_SETTINGS = (
    "delta_phase", "lfudge", "llo", "lhi", "phase1", "phase2",
    "wavelength", "tperiod", "mucrit1", "mucrit2",
)
_INT_SETTINGS = (
    "nlat1f", "nlat2f", "nlat1c", "nlat2c", "nlatfill", "nlngfill",
    "nrad", "nspot",
)
_BOOL_SETTINGS = (
    "npole", "roche1", "roche2", "eclipse1", "eclipse2", "glens1",
    "use_radii", "gdark_bolom1", "gdark_bolom2", "mirror", "add_disc",
    "opaque", "add_spot", "iscale",
)

# A blank line follows each of these in the printed listing.
_BREAKS = frozenset(
    {"beam_factor2", "slope", "quad", "cube", "third", "absorb_edge", "cfrac_spot"}
    | {group[-1] for group in spot_groups().values()}
)


def _parse_float(name: str, text: str) -> float:
    try:
        return float(text)
    except ValueError as err:
        raise ModelError(f"invalid number {text!r} for {name}") from err


def _parse_int(name: str, text: str) -> int:
    try:
        return int(text.strip())
    except ValueError as err:
        raise ModelError(f"invalid integer {text!r} for {name}") from err


def _parse_flag(name: str, text: str) -> bool:
    try:
        return parse_bool(text)
    except ValueError as err:
        raise ModelError(f"invalid boolean {text!r} for {name}") from err


def _parse_limb(name: str, text: str) -> LimbType:
    try:
        return LimbType(text)
    except ValueError as err:
        raise ModelError(
            f"Could not recognize the value of {name} = {text}; "
            "should be 'Poly' or 'Claret'"
        ) from err


def _format_setting(value) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, LimbType):
        return value.value
    if isinstance(value, int):
        return str(value)
    return f"{value:.4f}"


class Model:
    """Physical parameters and computational settings of a light-curve model.

    Physical parameters are held as Pparam objects in ``params`` and may be
    read as attributes (``model.q``); computational settings are plain
    attributes.
    """

    def __init__(self, config: Mapping) -> None:
        values = read_parameters(config)

        params: dict[str, Pparam] = {}
        for name in PHYSICAL:
            params[name] = self._pparam(name, values[name])
        for group in spot_groups().values():
            for name in group:
                params[name] = (
                    self._pparam(name, values[name]) if name in values else Pparam()
                )
        self.params = params

        for name in _FLOAT_SETTINGS:
            setattr(self, name, _parse_float(name, values[name]))
        for name in _INT_SETTINGS:
            setattr(self, name, _parse_int(name, values[name]))
        for name in _BOOL_SETTINGS:
            setattr(self, name, _parse_flag(name, values[name]))
        self.limb1 = _parse_limb("limb1", values["limb1"])
        self.limb2 = _parse_limb("limb2", values["limb2"])

        if self.glens1 and self.roche1:
            raise ModelError(
                "For reasons of simplicity, glens1 = 1 and roche1 = 1 "
                "are not simultaneously allowed"
            )

    @staticmethod
    def _pparam(name: str, text: str) -> Pparam:
        try:
            return Pparam.from_string(text)
        except ValueError as err:
            raise ModelError(f"parameter {name}: {err}") from err

    def __getattr__(self, name: str) -> Pparam:
        params = self.__dict__.get("params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(name)

    def _varying(self) -> Iterator[tuple[str, Pparam]]:
        for name in fit_order(self.use_radii, self.add_disc, self.add_spot):
            param = self.params[name]
            if param.defined and param.vary:
                yield name, param

    def nvary(self) -> int:
        """Return the number of parameters being fitted."""
        return sum(1 for _ in self._varying())

    def set_param(self, vpar: Sequence[float]) -> None:
        """Set the fitted parameters, in fitting order, from ``vpar``."""
        varying = list(self._varying())
        if len(vpar) < len(varying):
            raise ModelError(
                f"set_param: {len(vpar)} values given for {len(varying)} "
                "varying parameters"
            )
        for (_, param), value in zip(varying, vpar):
            param.value = value

    def get_name(self, i: int) -> str:
        """Return the name of the i-th fitted parameter, or "UNKNOWN"."""
        names = [name for name, _ in self._varying()]
        if 0 <= i < len(names):
            return names[i]
        return "UNKNOWN"

    def get_param(self) -> Array1D:
        """Return the values of the fitted parameters."""
        return Array1D(param.value for _, param in self._varying())

    def get_limit(self) -> list[tuple[float, float]]:
        """Return the (lower, upper) bounds of the fitted parameters."""
        return [limit(name) for name, _ in self._varying()]

    def get_range(self) -> Array1D:
        """Return the search ranges of the fitted parameters."""
        return Array1D(param.range for _, param in self._varying())

    def get_dstep(self) -> Array1D:
        """Return the derivative steps of the fitted parameters."""
        return Array1D(param.dstep for _, param in self._varying())

    def __str__(self) -> str:
        lines = []
        physical = list(PHYSICAL)
        for group in spot_groups().values():
            physical.extend(group)
        for name in physical:
            lines.append(f"{name:<15}= {self.params[name]}")
            if name in _BREAKS:
                lines.append("")
        for name in COMPUTATIONAL:
            lines.append(f"{name:<15}= {_format_setting(getattr(self, name))}")
        return "\n".join(lines) + "\n"

    def wrasc(self, file: str | os.PathLike) -> None:
        """Write the model listing to a text file."""
        with open(file, "w", encoding="utf-8") as fout:
            fout.write(str(self))