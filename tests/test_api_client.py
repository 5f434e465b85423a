"""
Storefront API client tests.
"""
import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from shared.infrastructure.http import (
    StorefrontApiClient,
    ApiTimeoutError,
    ApiConnectionError,
    ApiResponseError,
    OpaqueResponseError,
)

URL = 'https://storefront.test/exec'


def response(status_code=200, body=None, json_error=False):
    mock = MagicMock(status_code=status_code)
    if json_error:
        mock.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        mock.json.return_value = body
    return mock


@pytest.fixture
def client():
    return StorefrontApiClient(URL, timeout=5)


class TestRequests:
    def test_get_sends_action_as_query(self, client):
        with patch.object(client.session, 'request', return_value=response(body={'success': True})) as request:
            assert client.get('products') == {'success': True}

        request.assert_called_once_with('GET', URL, timeout=5, params={'action': 'products'})

    def test_post_merges_action_into_body(self, client):
        with patch.object(client.session, 'request', return_value=response(body={'success': True})) as request:
            client.post('create_order', {'customer_name': 'রহিম'}, timeout=2)

        args, kwargs = request.call_args
        assert args == ('POST', URL)
        assert kwargs['timeout'] == 2
        assert json.loads(kwargs['data']) == {'customer_name': 'রহিম', 'action': 'create_order'}

    def test_sends_json_headers(self, client):
        assert client.session.headers['Content-Type'] == 'application/json'


class TestErrorClassification:
    def test_timeout(self, client):
        with patch.object(client.session, 'request', side_effect=requests.Timeout("read timed out")):
            with pytest.raises(ApiTimeoutError):
                client.get('products')

    def test_connection_error(self, client):
        with patch.object(client.session, 'request', side_effect=requests.ConnectionError("refused")):
            with pytest.raises(ApiConnectionError):
                client.get('products')

    def test_http_error_status(self, client):
        with patch.object(client.session, 'request', return_value=response(status_code=502)):
            with pytest.raises(ApiResponseError) as exc_info:
                client.get('products')

        assert exc_info.value.status_code == 502

    def test_unreadable_body(self, client):
        with patch.object(client.session, 'request', return_value=response(json_error=True)):
            with pytest.raises(OpaqueResponseError):
                client.post('create_order', {})
