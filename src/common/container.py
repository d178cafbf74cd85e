"""Simple dependency wiring helpers."""
from __future__ import annotations

from functools import lru_cache

from src.adapters.output.discovery.placeholder_discovery import PlaceholderEndpointDiscovery
from src.agents.analysis_agent.graph import ApiAnalysisRunner
from src.application.handlers.analyze_api_handler import AnalyzeApiHandler
from src.application.services.analysis_service_impl import AnalysisServiceImpl
from src.domain.services.api_analyzer import ApiAnalyzer
from src.domain.services.api_describer import ApiDescriber
from src.domain.services.openapi_transformer import OpenApiTransformer


@lru_cache(maxsize=1)
def create_analysis_service():
  analyzer = ApiAnalyzer(
    discovery=PlaceholderEndpointDiscovery(),
    transformer=OpenApiTransformer(),
  )
  runner = ApiAnalysisRunner(analyzer=analyzer, describer=ApiDescriber())
  handler = AnalyzeApiHandler(runner)
  return AnalysisServiceImpl(handler)
