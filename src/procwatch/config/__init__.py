"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .notifier_config import NotifierConfig
from .runtime import (
    env_float,
    env_positive_float,
    env_str,
    reset_default_values,
)

__all__ = [
    "ConfigurationError",
    "NotifierConfig",
    "env_float",
    "env_positive_float",
    "env_str",
    "reset_default_values",
]
