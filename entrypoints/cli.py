"""CLI entrypoint for the LivelyAPI analyzer."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.adapters.input.cli.cli_adapter import CLIAdapter
from src.adapters.presentation.text_presenter import TextPresenter
from src.common.config import get_settings
from src.common.container import create_analysis_service
from src.common.logging_setup import configure_logging


def main() -> None:
  configure_logging(get_settings().log_level)
  analysis_service = create_analysis_service()
  CLIAdapter(analysis_service, TextPresenter()).run()


if __name__ == '__main__':
  main()
