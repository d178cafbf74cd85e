"""Node implementations for the API analysis agent."""
from __future__ import annotations

import logging
from typing import Any, Dict

from src.domain.errors import UnrecognizedInputError
from src.domain.services.api_analyzer import ApiAnalyzer
from src.domain.services.api_describer import ApiDescriber

logger = logging.getLogger(__name__)


class ApiAnalysisActions:
  def __init__(self, analyzer: ApiAnalyzer, describer: ApiDescriber) -> None:
    self._analyzer = analyzer
    self._describer = describer

  def classify(self, state: Dict[str, Any]) -> Dict[str, Any]:
    """Classify the raw input and build the canonical description."""
    try:
      classification = self._analyzer.classify(state['api_input'])
    except UnrecognizedInputError as e:
      logger.info('Rejected API input: %s', e)
      state['error'] = str(e)
      state['step'] = 'error'
      return state

    state['source'] = classification.source
    state['parsed_api'] = classification.api
    state['step'] = 'classified'
    logger.info(
      'Classified input as %s (%s, %d endpoints)',
      classification.source.value,
      classification.api.name,
      len(classification.api.endpoints),
    )
    return state

  def describe(self, state: Dict[str, Any]) -> Dict[str, Any]:
    state['description'] = self._describer.describe(state['parsed_api'])
    state['step'] = 'described'
    return state

  def finalize(self, state: Dict[str, Any]) -> Dict[str, Any]:
    if state.get('error'):
      state['parsed_api'] = None
    state['step'] = 'complete'
    return state

  @staticmethod
  def route_after_classify(state: Dict[str, Any]) -> str:
    if state.get('error') or not state.get('include_description', True):
      return 'finalize'
    return 'describe'
