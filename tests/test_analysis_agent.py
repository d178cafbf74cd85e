import asyncio

import pytest

from src.application.commands.analyze_api_command import AnalyzeApiCommand
from src.application.handlers.analyze_api_handler import AnalyzeApiHandler
from src.application.queries.analysis_result import AnalysisStatus
from src.domain.catalog.vendors import SHOPIFY, STRIPE
from src.domain.entities.parsed_api import InputSource


def test_runner_classifies_and_describes(runner):
  state = asyncio.run(runner.run({'api_input': 'shopify', 'include_description': True}))

  assert state['source'] == InputSource.VENDOR
  assert state['parsed_api'] is SHOPIFY
  assert state['description'].startswith('Shopify is E-commerce platform for online stores.')
  assert state['step'] == 'complete'
  assert not state.get('error')


def test_runner_skips_description_when_not_requested(runner):
  state = asyncio.run(runner.run({'api_input': 'https://api.example.com', 'include_description': False}))

  assert state['source'] == InputSource.URL
  assert state.get('description') is None
  assert state['step'] == 'complete'


def test_runner_records_unrecognized_input(runner):
  state = asyncio.run(runner.run({'api_input': 'just some words', 'include_description': True}))

  assert 'valid URL or OpenAPI specification' in state['error']
  assert state.get('parsed_api') is None
  assert state.get('description') is None
  assert state['step'] == 'complete'


def test_service_returns_success_result(analysis_service, petstore_json):
  result = asyncio.run(analysis_service.analyze_api(AnalyzeApiCommand(api_input=petstore_json)))

  assert result.status == AnalysisStatus.SUCCESS
  assert result.source == InputSource.OPENAPI
  assert result.api.name == 'Petstore'
  assert result.metadata['endpoints_found'] == 4
  assert result.metadata['capabilities_found'] == 4
  assert result.metadata['methods'] == {'GET': 2, 'POST': 1, 'DELETE': 1}
  assert 'Available operations include: 2 GET endpoints, 1 POST endpoint, 1 DELETE endpoint.' in result.description
  assert result.error is None
  assert result.execution_time >= 0


def test_service_returns_error_result(analysis_service):
  result = asyncio.run(analysis_service.analyze_api(AnalyzeApiCommand(api_input='just some words')))

  assert result.status == AnalysisStatus.ERROR
  assert result.api is None
  assert result.error.startswith('Unable to analyze API')
  assert result.metadata == {'step': 'complete'}


def test_handler_turns_runner_failures_into_error_result():
  class ExplodingRunner:
    async def run(self, state):
      raise RuntimeError('graph exploded')

  result = asyncio.run(AnalyzeApiHandler(ExplodingRunner()).handle(AnalyzeApiCommand(api_input='stripe')))

  assert result.status == AnalysisStatus.ERROR
  assert result.error == 'graph exploded'


@pytest.mark.parametrize('api_input', ['', '   '])
def test_command_requires_input(api_input):
  with pytest.raises(ValueError, match='api_input is required'):
    AnalyzeApiCommand(api_input=api_input)


def test_service_lists_vendors(analysis_service):
  assert [listing.name for listing in analysis_service.list_vendors()] == ['Stripe', 'Shopify', 'Slack']


def test_service_looks_up_vendors(analysis_service):
  assert analysis_service.get_vendor('STRIPE') is STRIPE
  assert analysis_service.get_vendor('twilio') is None
