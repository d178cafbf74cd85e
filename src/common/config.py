"""Application-level configuration utilities."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  log_level: str = 'INFO'
  api_host: str = '0.0.0.0'
  api_port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  log_level = getenv('LOG_LEVEL', 'INFO').upper()
  if not isinstance(logging.getLevelName(log_level), int):
    raise ValueError(f'LOG_LEVEL must be a logging level name, got {log_level!r}')

  raw_port = getenv('API_PORT', '8000')
  try:
    api_port = int(raw_port)
  except ValueError:
    raise ValueError(f'API_PORT must be an integer, got {raw_port!r}') from None
  if not 0 < api_port < 65536:
    raise ValueError('API_PORT must be between 1 and 65535')

  return Settings(
    log_level=log_level,
    api_host=getenv('API_HOST', '0.0.0.0'),
    api_port=api_port,
  )
