"""Runtime configuration for signal comparison, padding limits and display."""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass(frozen=True, slots=True)
class SignalConfig:
    """
    Tuning knobs consulted by signal operations that take a ``config=`` keyword.

    The defaults mirror numpy's behaviour closely enough that most callers
    never need to pass a config at all.
    """

    # Largest length a padding operation may produce.
    max_length: int = sys.maxsize

    # Tolerances for Signal.allclose
    rtol: float = 1e-9
    atol: float = 0.0

    # str() summarises signals longer than display_threshold
    display_threshold: int = 1000
    display_edge_items: int = 3

    def sanitized(self) -> SignalConfig:
        """Return a copy with derived limits applied."""
        return SignalConfig(
            max_length=max(0, min(sys.maxsize, int(self.max_length))),
            rtol=max(0.0, float(self.rtol)),
            atol=max(0.0, float(self.atol)),
            display_threshold=max(1, int(self.display_threshold)),
            display_edge_items=max(1, int(self.display_edge_items)),
        )


DEFAULT_CONFIG = SignalConfig()


def resolve_config(config: SignalConfig | None) -> SignalConfig:
    """Return ``config`` or the shared defaults when ``None``."""
    return DEFAULT_CONFIG if config is None else config


_FIELD_NAMES = frozenset(f.name for f in fields(SignalConfig))


def config_from_mapping(data: Mapping[str, Any] | None) -> SignalConfig:
    """
    Build :class:`SignalConfig` from ``data``.

    Settings may sit at the top level or under a ``sigbase:`` block; keys in
    the block win over top-level ones. Unrecognised keys are ignored.
    """
    if not data:
        return DEFAULT_CONFIG
    block = data.get("sigbase")
    sources = [data, block] if isinstance(block, Mapping) else [data]
    settings = {
        key: value
        for source in sources
        for key, value in source.items()
        if key in _FIELD_NAMES
    }
    if not settings:
        return DEFAULT_CONFIG
    return SignalConfig(**settings).sanitized()


def load_config(path: str | Path | None) -> SignalConfig:
    """
    Read a YAML settings file.

    ``None`` or a path that is not a file yields :data:`DEFAULT_CONFIG`; a
    document that is not a mapping raises ``ValueError``.
    """
    if path is None or not Path(path).is_file():
        return DEFAULT_CONFIG
    text = Path(path).read_text(encoding="utf-8")
    document = yaml.safe_load(text)
    if document is None:
        return DEFAULT_CONFIG
    if not isinstance(document, Mapping):
        raise ValueError(
            f"sigbase settings in {path} must be a mapping, not {type(document).__name__}"
        )
    return config_from_mapping(document)


__all__ = [
    "DEFAULT_CONFIG",
    "SignalConfig",
    "config_from_mapping",
    "load_config",
    "resolve_config",
]
