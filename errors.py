# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a rotor, reflector, plugboard or machine is mis-configured."""
