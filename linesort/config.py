from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = 'LINESORT_'


@dataclass
class AppConfig:
    title: str = "Line Sort"
    server_name: str = "127.0.0.1"
    server_port: int = 7860
    share: bool = False
    log_level: str = "INFO"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the app config from LINESORT_* environment variables."""
    if env is None:
        env = os.environ
    config = AppConfig()

    if env.get(f'{ENV_PREFIX}TITLE'):
        config.title = env[f'{ENV_PREFIX}TITLE']
    if env.get(f'{ENV_PREFIX}SERVER_NAME'):
        config.server_name = env[f'{ENV_PREFIX}SERVER_NAME']
    if env.get(f'{ENV_PREFIX}SERVER_PORT'):
        try:
            config.server_port = int(env[f'{ENV_PREFIX}SERVER_PORT'])
        except ValueError:
            raise ValueError(f"Invalid {ENV_PREFIX}SERVER_PORT: {env[f'{ENV_PREFIX}SERVER_PORT']!r}") from None
    if env.get(f'{ENV_PREFIX}SHARE'):
        config.share = _as_bool(env[f'{ENV_PREFIX}SHARE'])
    if env.get(f'{ENV_PREFIX}LOG_LEVEL'):
        config.log_level = env[f'{ENV_PREFIX}LOG_LEVEL'].upper()
    return config
