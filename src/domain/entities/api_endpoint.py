"""Domain entities for the operations exposed by an API."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


def freeze(value: Any) -> Any:
  """Recursively turn mappings into read-only proxies and lists into tuples."""
  if isinstance(value, Mapping):
    return MappingProxyType({key: freeze(item) for key, item in value.items()})
  if isinstance(value, (list, tuple)):
    return tuple(freeze(item) for item in value)
  return value


def thaw(value: Any) -> Any:
  """Plain dict/list copy of a frozen value, safe to hand to callers."""
  if isinstance(value, Mapping):
    return {key: thaw(item) for key, item in value.items()}
  if isinstance(value, tuple):
    return [thaw(item) for item in value]
  return value


class HttpMethod(str, Enum):
  GET = 'GET'
  POST = 'POST'
  PUT = 'PUT'
  DELETE = 'DELETE'
  PATCH = 'PATCH'

  @classmethod
  def parse(cls, value: str) -> Optional['HttpMethod']:
    """Return the enum member for a verb, or None for verbs outside the set."""
    try:
      return cls(value.upper())
    except (ValueError, AttributeError):
      return None


class ParameterLocation(str, Enum):
  QUERY = 'query'
  PATH = 'path'
  BODY = 'body'
  HEADER = 'header'


@dataclass(frozen=True)
class ApiParameter:
  """Represents one input accepted by an endpoint."""

  name: str
  type: str
  required: bool
  description: str
  location: ParameterLocation
  example: Any = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'example', freeze(self.example))

  def to_dict(self) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
      'name': self.name,
      'type': self.type,
      'required': self.required,
      'description': self.description,
      'location': self.location.value,
    }
    if self.example is not None:
      payload['example'] = thaw(self.example)
    return payload


@dataclass(frozen=True)
class ApiResponse:
  """Represents one documented response of an endpoint."""

  status_code: int
  description: str
  schema: Optional[Mapping[str, Any]] = None
  example: Any = None

  def __post_init__(self) -> None:
    object.__setattr__(self, 'schema', freeze(self.schema))
    object.__setattr__(self, 'example', freeze(self.example))

  def to_dict(self) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
      'statusCode': self.status_code,
      'description': self.description,
    }
    if self.schema is not None:
      payload['schema'] = thaw(self.schema)
    if self.example is not None:
      payload['example'] = thaw(self.example)
    return payload


@dataclass(frozen=True)
class ApiEndpoint:
  """Represents a single operation (path + method) of an API."""

  path: str
  method: HttpMethod
  summary: str = ''
  description: str = ''
  tags: Tuple[str, ...] = ()
  parameters: Tuple[ApiParameter, ...] = ()
  responses: Tuple[ApiResponse, ...] = ()

  def identifier(self) -> str:
    return f'{self.method.value} {self.path}'

  def to_dict(self) -> Dict[str, Any]:
    return {
      'path': self.path,
      'method': self.method.value,
      'summary': self.summary,
      'description': self.description,
      'tags': list(self.tags),
      'parameters': [parameter.to_dict() for parameter in self.parameters],
      'responses': [response.to_dict() for response in self.responses],
    }
