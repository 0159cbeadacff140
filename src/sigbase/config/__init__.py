"""Configuration objects and helpers for sigbase.

Settings are plain frozen dataclasses that can be loaded from YAML. Nothing
here is global or mutable: operations that honour a setting accept an
explicit ``config=`` keyword and fall back to :data:`DEFAULT_CONFIG`.
"""

from .runtime import (
    DEFAULT_CONFIG,
    SignalConfig,
    config_from_mapping,
    load_config,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "SignalConfig",
    "config_from_mapping",
    "load_config",
    "resolve_config",
]
