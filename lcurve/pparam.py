"""Physical model parameters with fitting metadata."""

from __future__ import annotations

from dataclasses import dataclass

_TRUE = frozenset({"TRUE", "T", "YES", "Y", "1"})
_FALSE = frozenset({"FALSE", "F", "NO", "N", "0"})


def parse_bool(text: str) -> bool:
    """Interpret a yes/no style string, case-insensitively."""
    word = text.strip().upper()
    if word in _TRUE:
        return True
    if word in _FALSE:
        return False
    raise ValueError(f"could not translate {text!r} to a boolean")


@dataclass
class Pparam:
    """A model parameter: its value, a search range, a derivative step and a vary flag.

    ``defined`` is False for optional parameters that were never supplied.
    """

    value: float = 0.0
    range: float = 0.0
    dstep: float = 0.0
    vary: bool = False
    defined: bool = False

    @classmethod
    def from_string(cls, text: str) -> Pparam:
        """Build a defined parameter from "value range dstep vary"; extra fields are ignored."""
        fields = text.split()
        if len(fields) < 4:
            raise ValueError(
                f"parameter string {text!r} needs value, range, dstep and vary"
            )
        try:
            value, rng, dstep = (float(f) for f in fields[:3])
        except ValueError as err:
            raise ValueError(f"invalid number in parameter string {text!r}") from err
        return cls(value=value, range=rng, dstep=dstep,
                   vary=parse_bool(fields[3]), defined=True)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return (
            f"{self.value:17.10f} {self.range:8.4f} {self.dstep:8.4f} "
            f"{int(self.vary)} {int(self.defined)}"
        )