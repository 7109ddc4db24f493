"""Configuration for chronal.

The active :class:`ChronalConfig` is read at call time by the operations
that depend on it (``str(Moment)``, free-form parsing, two digit years).

Examples:
    >>> from chronal import config
    >>> config.configure(default_format="d/m/Y").default_format
    'd/m/Y'
    >>> config.reset_config().default_format
    'Y-m-d H:i:s'
"""

from __future__ import annotations

from logging import getLogger
from typing import Any

from chronal.config.logging import configure_logging
from chronal.config.models import ChronalConfig

logger = getLogger(__name__)

_active = ChronalConfig()


def get_config() -> ChronalConfig:
    """Return the active configuration."""
    return _active


def configure(**overrides: Any) -> ChronalConfig:
    """Replace the active configuration with ``overrides`` applied.

    Fields not named keep their current values. The merged values are
    validated before anything changes.

    Raises:
        pydantic.ValidationError: If an override is unknown or invalid.
    """
    global _active
    _active = ChronalConfig(**{**_active.model_dump(), **overrides})
    logger.debug("Configuration updated: %s", sorted(overrides))
    return _active


def reset_config() -> ChronalConfig:
    """Restore the code-baked defaults."""
    global _active
    _active = ChronalConfig()
    return _active


__all__: list[str] = [
    "ChronalConfig",
    "configure",
    "configure_logging",
    "get_config",
    "reset_config",
]
