import json

import pytest

from src.adapters.output.discovery.placeholder_discovery import PlaceholderEndpointDiscovery
from src.agents.analysis_agent.graph import ApiAnalysisRunner
from src.application.handlers.analyze_api_handler import AnalyzeApiHandler
from src.application.services.analysis_service_impl import AnalysisServiceImpl
from src.domain.services.api_analyzer import ApiAnalyzer
from src.domain.services.api_describer import ApiDescriber

PETSTORE = {
  'openapi': '3.0.0',
  'info': {'title': 'Petstore', 'version': '1.0', 'description': 'a sample pet store'},
  'servers': [{'url': 'https://petstore.example.com/v1'}, {'url': 'https://backup.example.com'}],
  'paths': {
    '/pets': {
      'get': {
        'summary': 'List pets',
        'tags': ['pets'],
        'parameters': [
          {'name': 'limit', 'in': 'query', 'schema': {'type': 'integer'}, 'description': 'Page size'},
        ],
        'responses': {
          '200': {
            'description': 'A list of pets',
            'content': {'application/json': {'example': [{'id': 1}]}},
          },
        },
      },
      'post': {
        'summary': 'Create a pet',
        'tags': ['pets'],
        'requestBody': {
          'content': {
            'application/json': {
              'schema': {
                'type': 'object',
                'properties': {
                  'name': {'type': 'string', 'description': 'Pet name'},
                  'age': {'type': 'integer'},
                },
                'required': ['name'],
              },
            },
          },
        },
        'responses': {'201': {'description': 'Created'}},
      },
      'options': {'summary': 'CORS preflight', 'responses': {'204': {'description': 'No content'}}},
    },
    '/pets/{petId}': {
      'get': {
        'summary': 'Get a pet',
        'parameters': [{'name': 'petId', 'in': 'path', 'required': True}],
        'responses': {'200': {'description': 'A pet'}, '404': {'description': 'Not found'}},
      },
      'delete': {'summary': 'Delete a pet', 'responses': {'204': {'description': 'Deleted'}}},
      'head': {'responses': {'200': {'description': 'Exists'}}},
    },
  },
  'components': {
    'securitySchemes': {
      'bearerAuth': {'type': 'http', 'scheme': 'bearer'},
      'apiKeyAuth': {'type': 'apiKey', 'in': 'header', 'name': 'X-API-Key'},
    },
  },
}


@pytest.fixture
def petstore_document():
  return json.loads(json.dumps(PETSTORE))


@pytest.fixture
def petstore_json():
  return json.dumps(PETSTORE)


@pytest.fixture
def analyzer():
  return ApiAnalyzer(discovery=PlaceholderEndpointDiscovery())


@pytest.fixture
def runner(analyzer):
  return ApiAnalysisRunner(analyzer=analyzer, describer=ApiDescriber())


@pytest.fixture
def analysis_service(runner):
  return AnalysisServiceImpl(AnalyzeApiHandler(runner))
