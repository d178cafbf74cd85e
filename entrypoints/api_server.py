"""API server entrypoint."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import uvicorn

from src.adapters.input.api.fastapi_adapter import FastAPIAdapter
from src.adapters.presentation.json_presenter import JsonPresenter
from src.common.config import get_settings
from src.common.container import create_analysis_service
from src.common.logging_setup import configure_logging


def get_app():
  analysis_service = create_analysis_service()
  adapter = FastAPIAdapter(analysis_service, JsonPresenter())
  return adapter.app


def main() -> None:
  settings = get_settings()
  configure_logging(settings.log_level)
  uvicorn.run(get_app(), host=settings.api_host, port=settings.api_port)


if __name__ == '__main__':
  main()
