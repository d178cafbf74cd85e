"""Input port for formatting analysis results."""
from __future__ import annotations

from typing import Any, Protocol

from src.application.queries.analysis_result import AnalysisResult


class ResultPresenter(Protocol):
  def present(self, result: AnalysisResult) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
