"""Configuration: PreludeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fp_prelude._logging import configure_logging

__all__ = [
    'PreludeConfig',
    'init',
]

LOG_LEVEL_ENV = 'FP_PRELUDE_LOG_LEVEL'
LOG_FORMAT_ENV = 'FP_PRELUDE_LOG_FORMAT'


@dataclass(frozen=True)
class PreludeConfig:
    """Configuration for fp-prelude.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or as colored console output (False).
    """

    log_level: str | None = None
    json_logs: bool = True

    @classmethod
    def from_env(cls) -> PreludeConfig:
        """Build a config from the environment.

        Reads:
        1. FP_PRELUDE_LOG_LEVEL: any stdlib level name; unset or empty = None
        2. FP_PRELUDE_LOG_FORMAT: "json" (default) or "console"
        """
        level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper() or None

        log_format = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
        if log_format and log_format not in ('json', 'console'):
            logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, log_format)

        return cls(log_level=level, json_logs=log_format != 'console')


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
) -> PreludeConfig:
    """Resolve the configuration and set up logging.

    Explicit arguments win over the environment. Logging is configured only
    when a level is resolved; the config is returned, not stored.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from environment.
        json_logs: JSON (True) or console (False) output. None = from environment.

    Returns:
        The resolved PreludeConfig.

    Example:
        ```python
        from fp_prelude import init

        init()  # environment only
        init('DEBUG', json_logs=False)
        ```
    """
    env = PreludeConfig.from_env()
    config = PreludeConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    return config
