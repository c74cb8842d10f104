"""Binary-star light-curve model parameters, limb darkening, grid sizing and flux scaling."""

__version__ = "0.1.0"