"""Runtime settings for the editor."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

ENV_API_URL = "SUDOKUDJ_API_URL"
ENV_TIMEOUT = "SUDOKUDJ_TIMEOUT"
ENV_LOG_LEVEL = "SUDOKUDJ_LOG_LEVEL"


@dataclass
class EditorConfig:
    """All user-tunable settings."""

    # Remote service
    api_base_url: str = "http://localhost:8081"
    request_timeout_s: float = 10.0

    # Editor
    default_difficulty: int = 1
    short_id_length: int = 8
    message_duration_ms: int = 3000

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorConfig:
        """Build settings from environment overrides."""
        env = os.environ if environ is None else environ
        config = cls()

        url = env.get(ENV_API_URL, "").strip()
        if url:
            config.api_base_url = url.rstrip("/")

        timeout = env.get(ENV_TIMEOUT, "").strip()
        if timeout:
            try:
                value = float(timeout)
            except ValueError:
                value = -1.0
            if value > 0:
                config.request_timeout_s = value
            else:
                _LOGGER.warning("Ignoring invalid %s=%r", ENV_TIMEOUT, timeout)

        level = env.get(ENV_LOG_LEVEL, "").strip().upper()
        if level:
            if isinstance(logging.getLevelName(level), int):
                config.log_level = level
            else:
                _LOGGER.warning("Ignoring invalid %s=%r", ENV_LOG_LEVEL, level)

        return config
