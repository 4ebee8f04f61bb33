"""Unit tests for FakeJsonTransport — verifies Port contract compliance."""

import unittest

from adapter.fake.transport import FakeJsonTransport
from domain.model.errors import TransportError


class TestFakeJsonTransport(unittest.IsolatedAsyncioTestCase):
    """Tests that FakeJsonTransport behaves like a JsonTransport."""

    async def test_returns_configured_body(self):
        transport = FakeJsonTransport(body=[{"word": "keyboard"}])
        self.assertEqual(await transport.get_json("https://x.test/a"), [{"word": "keyboard"}])

    async def test_records_urls(self):
        transport = FakeJsonTransport(body=[])
        self.assertIsNone(transport.last_url)

        await transport.get_json("https://x.test/a")
        await transport.get_json("https://x.test/b")

        self.assertEqual(transport.requested_urls, ["https://x.test/a", "https://x.test/b"])
        self.assertEqual(transport.last_url, "https://x.test/b")

    async def test_raises_configured_error(self):
        transport = FakeJsonTransport(error=TransportError("https://x.test/a", "ConnectError"))
        with self.assertRaises(TransportError):
            await transport.get_json("https://x.test/a")
        self.assertEqual(transport.requested_urls, ["https://x.test/a"])
