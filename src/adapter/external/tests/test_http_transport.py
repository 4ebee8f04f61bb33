"""Tests for the httpx JsonTransport."""

import json
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from adapter.external.http_transport import HttpxJsonTransport
from domain.model.errors import MalformedResponseError, TransportError

URL = "https://api.dictionaryapi.dev/api/v2/entries/en/keyboard"


def make_client(response=None, side_effect=None) -> AsyncMock:
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get.side_effect = side_effect
    else:
        mock_client.get.return_value = response
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    return mock_client


def make_response(status_code: int, body=None) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = body
    if status_code >= 400:
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}",
            request=httpx.Request("GET", URL),
            response=httpx.Response(status_code),
        )
    return mock_response


class TestHttpxJsonTransport(unittest.IsolatedAsyncioTestCase):
    """Test async fetch and error mapping."""

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_successful_fetch(self, mock_client_class):
        body = [{"word": "keyboard"}]
        mock_client = make_client(make_response(200, body))
        mock_client_class.return_value = mock_client

        result = await HttpxJsonTransport(timeout=2.5).get_json(URL)

        self.assertEqual(result, body)
        mock_client.get.assert_awaited_once_with(URL)
        mock_client_class.assert_called_once_with(timeout=2.5)

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_404_body_is_returned(self, mock_client_class):
        """The provider's not-found object is handed back for classification."""
        body = {"title": "No Definitions Found", "message": "Sorry pal."}
        response = make_response(404, body)
        mock_client_class.return_value = make_client(response)

        result = await HttpxJsonTransport().get_json(URL)

        self.assertEqual(result, body)
        response.raise_for_status.assert_not_called()

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_server_error_raises_transport_error(self, mock_client_class):
        mock_client_class.return_value = make_client(make_response(500))

        with self.assertRaises(TransportError) as ctx:
            await HttpxJsonTransport().get_json(URL)

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.url, URL)
        self.assertIsInstance(ctx.exception.__cause__, httpx.HTTPStatusError)

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_timeout_raises_transport_error(self, mock_client_class):
        mock_client = make_client(side_effect=httpx.TimeoutException("Timeout"))
        mock_client_class.return_value = mock_client

        with self.assertRaises(TransportError) as ctx:
            await HttpxJsonTransport(max_attempts=1).get_json(URL)

        self.assertIsNone(ctx.exception.status_code)
        self.assertEqual(mock_client.get.await_count, 1)

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_request_error_raises_transport_error(self, mock_client_class):
        mock_client_class.return_value = make_client(
            side_effect=httpx.RequestError("Connection failed"),
        )

        with self.assertRaises(TransportError):
            await HttpxJsonTransport().get_json(URL)

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_connect_error_retried_when_configured(self, mock_client_class):
        response = make_response(200, [])
        mock_client = make_client(side_effect=[httpx.ConnectError("refused"), response])
        mock_client_class.return_value = mock_client

        result = await HttpxJsonTransport(max_attempts=2).get_json(URL)

        self.assertEqual(result, [])
        self.assertEqual(mock_client.get.await_count, 2)

    @patch('adapter.external.http_transport.httpx.AsyncClient')
    async def test_invalid_json_raises_malformed(self, mock_client_class):
        response = make_response(200)
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        mock_client_class.return_value = make_client(response)

        with self.assertRaises(MalformedResponseError):
            await HttpxJsonTransport().get_json(URL)

    def test_max_attempts_floor(self):
        self.assertEqual(HttpxJsonTransport(max_attempts=0).max_attempts, 1)


if __name__ == '__main__':
    unittest.main()
