"""Process-wide logging configuration."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str = 'INFO') -> None:
  root = logging.getLogger()
  root.setLevel(level)
  handler = logging.StreamHandler(sys.stdout)
  handler.setFormatter(logging.Formatter(LOG_FORMAT))
  root.handlers = [handler]
