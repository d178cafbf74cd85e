"""Input port defining the analysis service contract."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.queries.analysis_result import AnalysisResult
from src.domain.catalog.vendors import VendorListing
from src.domain.entities.parsed_api import ParsedApi


class AnalysisService(Protocol):
  async def analyze_api(self, command: AnalyzeApiCommand) -> AnalysisResult:
    ...

  def list_vendors(self) -> Tuple[VendorListing, ...]:
    ...

  def get_vendor(self, vendor_id: str) -> Optional[ParsedApi]:
    ...
