"""Hand-authored descriptions of well-known third-party APIs.

These records are process-wide constants. Every container in them is a tuple
and every record is a frozen dataclass, so callers can share them freely.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from src.domain.entities.api_endpoint import (
  ApiEndpoint,
  ApiParameter,
  ApiResponse,
  HttpMethod,
  ParameterLocation,
)
from src.domain.entities.parsed_api import ParsedApi
from src.domain.value_objects.api_authentication import ApiAuthentication, ApiKeyLocation, AuthType

QUERY = ParameterLocation.QUERY
BODY = ParameterLocation.BODY


def _param(name, type_, required, description, location, example=None) -> ApiParameter:
  return ApiParameter(
    name=name,
    type=type_,
    required=required,
    description=description,
    location=location,
    example=example,
  )


STRIPE = ParsedApi(
  name='Stripe',
  base_url='https://api.stripe.com/v1',
  description='Payment processing and subscription management',
  authentication=ApiAuthentication(type=AuthType.BEARER),
  endpoints=(
    ApiEndpoint(
      path='/customers',
      method=HttpMethod.GET,
      summary='List customers',
      description='Returns a list of your customers',
      parameters=(
        _param('limit', 'integer', False, 'Number of customers to return', QUERY, 10),
        _param('email', 'string', False, 'Filter by customer email', QUERY),
      ),
      responses=(ApiResponse(200, 'List of customers', example={'data': [], 'has_more': False}),),
      tags=('customers',),
    ),
    ApiEndpoint(
      path='/customers',
      method=HttpMethod.POST,
      summary='Create customer',
      description='Creates a new customer object',
      parameters=(
        _param('email', 'string', False, 'Customer email', BODY),
        _param('name', 'string', False, 'Customer name', BODY),
        _param('phone', 'string', False, 'Customer phone', BODY),
      ),
      responses=(
        ApiResponse(200, 'Customer created', example={'id': 'cus_123', 'email': 'customer@example.com'}),
      ),
      tags=('customers',),
    ),
    ApiEndpoint(
      path='/payment_intents',
      method=HttpMethod.POST,
      summary='Create payment intent',
      description='Creates a PaymentIntent object',
      parameters=(
        _param('amount', 'integer', True, 'Amount in cents', BODY, 2000),
        _param('currency', 'string', True, 'Currency code', BODY, 'usd'),
        _param('customer', 'string', False, 'Customer ID', BODY),
      ),
      responses=(
        ApiResponse(200, 'Payment intent created', example={'id': 'pi_123', 'status': 'requires_payment_method'}),
      ),
      tags=('payments',),
    ),
    ApiEndpoint(
      path='/subscriptions',
      method=HttpMethod.GET,
      summary='List subscriptions',
      description='Returns a list of your subscriptions',
      parameters=(
        _param('customer', 'string', False, 'Filter by customer ID', QUERY),
        _param('status', 'string', False, 'Filter by status', QUERY),
      ),
      responses=(ApiResponse(200, 'List of subscriptions', example={'data': [], 'has_more': False}),),
      tags=('subscriptions',),
    ),
  ),
  capabilities=(
    'Process payments',
    'Manage customers',
    'Handle subscriptions',
    'Create invoices',
    'Manage payment methods',
  ),
)

SHOPIFY = ParsedApi(
  name='Shopify',
  base_url='https://{shop}.myshopify.com/admin/api/2023-10',
  description='E-commerce platform for online stores',
  authentication=ApiAuthentication(
    type=AuthType.API_KEY,
    location=ApiKeyLocation.HEADER,
    name='X-Shopify-Access-Token',
  ),
  endpoints=(
    ApiEndpoint(
      path='/products.json',
      method=HttpMethod.GET,
      summary='List products',
      description='Retrieve a list of products',
      parameters=(
        _param('limit', 'integer', False, 'Number of products to return', QUERY, 50),
        _param('status', 'string', False, 'Filter by status', QUERY),
      ),
      responses=(ApiResponse(200, 'List of products', example={'products': []}),),
      tags=('products',),
    ),
    ApiEndpoint(
      path='/orders.json',
      method=HttpMethod.GET,
      summary='List orders',
      description='Retrieve a list of orders',
      parameters=(
        _param('status', 'string', False, 'Filter by order status', QUERY),
        _param('limit', 'integer', False, 'Number of orders to return', QUERY, 50),
      ),
      responses=(ApiResponse(200, 'List of orders', example={'orders': []}),),
      tags=('orders',),
    ),
    ApiEndpoint(
      path='/customers.json',
      method=HttpMethod.GET,
      summary='List customers',
      description='Retrieve a list of customers',
      parameters=(
        _param('limit', 'integer', False, 'Number of customers to return', QUERY, 50),
      ),
      responses=(ApiResponse(200, 'List of customers', example={'customers': []}),),
      tags=('customers',),
    ),
    ApiEndpoint(
      path='/inventory_levels.json',
      method=HttpMethod.GET,
      summary='Get inventory levels',
      description='Retrieve inventory levels for products',
      parameters=(
        _param('inventory_item_ids', 'string', False, 'Comma-separated inventory item IDs', QUERY),
      ),
      responses=(ApiResponse(200, 'Inventory levels', example={'inventory_levels': []}),),
      tags=('inventory',),
    ),
  ),
  capabilities=(
    'Manage products',
    'Process orders',
    'Handle customers',
    'Track inventory',
    'Manage collections',
  ),
)

SLACK = ParsedApi(
  name='Slack',
  base_url='https://slack.com/api',
  description='Team communication and collaboration platform',
  authentication=ApiAuthentication(type=AuthType.BEARER),
  endpoints=(
    ApiEndpoint(
      path='/chat.postMessage',
      method=HttpMethod.POST,
      summary='Send message',
      description='Sends a message to a channel',
      parameters=(
        _param('channel', 'string', True, 'Channel ID or name', BODY, '#general'),
        _param('text', 'string', True, 'Message text', BODY, 'Hello, world!'),
        _param('username', 'string', False, 'Bot username', BODY),
      ),
      responses=(ApiResponse(200, 'Message sent', example={'ok': True, 'ts': '1234567890.123456'}),),
      tags=('messaging',),
    ),
    ApiEndpoint(
      path='/users.list',
      method=HttpMethod.GET,
      summary='List users',
      description='Lists all users in a Slack team',
      parameters=(
        _param('limit', 'integer', False, 'Number of users to return', QUERY, 100),
      ),
      responses=(ApiResponse(200, 'List of users', example={'ok': True, 'members': []}),),
      tags=('users',),
    ),
    ApiEndpoint(
      path='/channels.list',
      method=HttpMethod.GET,
      summary='List channels',
      description='Lists all channels in a Slack team',
      parameters=(
        _param('exclude_archived', 'boolean', False, 'Exclude archived channels', QUERY, True),
      ),
      responses=(ApiResponse(200, 'List of channels', example={'ok': True, 'channels': []}),),
      tags=('channels',),
    ),
    ApiEndpoint(
      path='/files.upload',
      method=HttpMethod.POST,
      summary='Upload file',
      description='Uploads or creates a file',
      parameters=(
        _param('channels', 'string', False, 'Comma-separated list of channel names or IDs', BODY),
        _param('content', 'string', False, 'File contents', BODY),
        _param('filename', 'string', False, 'Filename of file', BODY),
      ),
      responses=(ApiResponse(200, 'File uploaded', example={'ok': True, 'file': {'id': 'F1234567890'}}),),
      tags=('files',),
    ),
  ),
  capabilities=(
    'Send messages',
    'Manage channels',
    'Handle users',
    'Upload files',
    'Create workflows',
  ),
)


@dataclass(frozen=True)
class VendorListing:
  """Short entry shown when offering the catalog to a user."""

  id: str
  name: str
  description: str
  url: str

  def to_dict(self) -> Dict[str, str]:
    return {'id': self.id, 'name': self.name, 'description': self.description, 'url': self.url}


# Checked in order; the first vendor with a matching substring wins.
VENDOR_SIGNATURES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
  ('stripe', ('stripe', 'api.stripe.com')),
  ('shopify', ('shopify', 'myshopify.com')),
  ('slack', ('slack', 'slack.com/api')),
)

_CATALOG: Dict[str, ParsedApi] = {
  'stripe': STRIPE,
  'shopify': SHOPIFY,
  'slack': SLACK,
}

_LISTINGS: Tuple[VendorListing, ...] = (
  VendorListing('stripe', 'Stripe', 'Payment processing', STRIPE.base_url),
  VendorListing('shopify', 'Shopify', 'E-commerce platform', SHOPIFY.base_url),
  VendorListing('slack', 'Slack', 'Team communication', SLACK.base_url),
)


def match_vendor(text: str) -> Optional[ParsedApi]:
  """Return the catalog record whose signature occurs anywhere in ``text``.

  This is plain substring matching, so unrelated text that merely mentions a
  vendor (for example "post to the #slack-alerts channel") matches too.
  """
  normalized = text.lower()
  for vendor_id, signatures in VENDOR_SIGNATURES:
    if any(signature in normalized for signature in signatures):
      return _CATALOG[vendor_id]
  return None


def get_vendor(vendor_id: str) -> Optional[ParsedApi]:
  return _CATALOG.get(vendor_id.lower())


def list_vendors() -> Tuple[VendorListing, ...]:
  return _LISTINGS
