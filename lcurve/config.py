"""Reading and checking the parameter section of a model configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .catalogue import DEFAULTS, required_names, spot_groups

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a model configuration is missing or malformed."""


def _group_label(key: str) -> str:
    if key == "uesp":
        return "uniform equatorial spot"
    return f"star spot {key[4:]}"


def read_parameters(config: Mapping) -> dict[str, str]:
    """Return the model parameters of ``config`` as a name to string mapping.

    ``config`` must hold a mapping under "model_parameters" whose values are
    all strings. Every required parameter must be present, except those with
    defaults, which are filled in (with a warning). Star-spot groups are
    optional, but a group that is started must be given in full. Parameters
    not in the catalogue are passed through untouched.
    """
    if not isinstance(config, Mapping):
        raise ConfigError("Missing or invalid 'model_parameters'")
    params = config.get("model_parameters")
    if not isinstance(params, Mapping):
        raise ConfigError("Missing or invalid 'model_parameters'")

    values: dict[str, str] = {}
    for name, value in params.items():
        if not isinstance(value, str):
            raise ConfigError(
                f"Malformed model parameter value for parameter '{name}'"
            )
        values[name] = value

    missing = []
    for name in sorted(required_names()):
        if name in values:
            continue
        if name in DEFAULTS:
            logger.warning("%s was not defined; will be set = 0", name)
            values[name] = DEFAULTS[name]
        else:
            missing.append(name)
    if missing:
        raise ConfigError(
            "One or more parameters were not initialised: " + ", ".join(missing)
        )

    for key, group in spot_groups().items():
        present = [name in values for name in group]
        if any(present) and not all(present):
            raise ConfigError(
                f"One or more of the {_group_label(key)} parameters "
                "were not initialised"
            )

    return values