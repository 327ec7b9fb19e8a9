from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the root logger from the observability settings.

    Existing root handlers are replaced, so calling this more than once
    leaves a single handler in place.

    Raises:
        ConfigurationError: If the configured level is not a known name.
    """
    config = config or get_config().observability

    level_name = config.level.upper()
    if level_name not in _LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type=" | ".join(_LEVELS),
        )
    level = _LEVELS[level_name]

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.format))
    root.addHandler(handler)
    return root
