"""Implementation of the analysis service port."""
from __future__ import annotations

from typing import Optional, Tuple

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.handlers.analyze_api_handler import AnalyzeApiHandler
from src.application.queries.analysis_result import AnalysisResult
from src.domain.catalog.vendors import VendorListing, get_vendor, list_vendors
from src.domain.entities.parsed_api import ParsedApi
from src.ports.input.analysis_service import AnalysisService


class AnalysisServiceImpl(AnalysisService):
  """Concrete implementation that delegates analysis to the handler."""

  def __init__(self, analysis_handler: AnalyzeApiHandler) -> None:
    self._analysis_handler = analysis_handler

  async def analyze_api(self, command: AnalyzeApiCommand) -> AnalysisResult:
    return await self._analysis_handler.handle(command)

  def list_vendors(self) -> Tuple[VendorListing, ...]:
    return list_vendors()

  def get_vendor(self, vendor_id: str) -> Optional[ParsedApi]:
    return get_vendor(vendor_id)
