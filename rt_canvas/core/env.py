"""Runtime settings for rt-canvas, read from environment variables.

Recognised variables:
  RT_CANVAS_LOG_LEVEL   logging level name (default WARNING)
  RT_CANVAS_LOG_FILE    optional path for a log file

Command line flags win over the environment; see with_overrides().
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

ENV_PREFIX = 'RT_CANVAS_'
DEFAULT_LOG_LEVEL = 'WARNING'


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    log_level: int = logging.WARNING
    log_file: str | None = None

    def with_overrides(self, log_level: str | None = None, log_file: str | None = None) -> 'Settings':
        """Return a copy with any non-None command line values applied."""
        changes: dict = {}
        if log_level is not None:
            changes['log_level'] = parse_level(log_level)
        if log_file is not None:
            changes['log_file'] = log_file or None
        return replace(self, **changes)


def parse_level(name: str) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level: {name!r}')
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=parse_level(env.get(f'{ENV_PREFIX}LOG_LEVEL', DEFAULT_LOG_LEVEL)),
        log_file=env.get(f'{ENV_PREFIX}LOG_FILE') or None,
    )
