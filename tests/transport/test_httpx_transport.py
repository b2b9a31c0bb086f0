"""
Tests for HttpxTransport

Uses httpx.MockTransport for in-process testing (no network).
"""

import httpx
import pytest

from redirectguard import HttpxTransport, Request

pytestmark = pytest.mark.anyio


async def done():
    raise AssertionError("terminal fallback must not be called")


class TestHttpxTransport:

    async def test_sends_request_fields(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="ok")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            transport = HttpxTransport(client)
            res = await transport(
                Request("PUT", "http://example.com/item", headers={"X-Trace": "abc"}, body=b"payload"),
                done,
            )
            body = await res.read()
            await res.dispose()

        assert res.status == 200
        assert body == b"ok"
        assert res.url == "http://example.com/item"
        assert seen[0].method == "PUT"
        assert str(seen[0].url) == "http://example.com/item"
        assert seen[0].headers["x-trace"] == "abc"
        assert seen[0].content == b"payload"

    async def test_does_not_follow_redirects(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(302, headers={"Location": "/elsewhere"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True) as client:
            res = await HttpxTransport(client)(Request("GET", "http://example.com/"), done)
            await res.dispose()

        assert res.status == 302
        assert res.headers.get("location") == "/elsewhere"
        assert calls == ["http://example.com/"]

    async def test_dispose_closes_httpx_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="ok")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            res = await HttpxTransport(client)(Request("GET", "http://example.com/"), done)
            await res.dispose()

        assert res.disposed
        assert res.raw.is_closed

    async def test_borrowed_client_left_open(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with HttpxTransport(client):
            pass

        assert not client.is_closed
        await client.aclose()

    async def test_transport_errors_propagate(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.ConnectError):
                await HttpxTransport(client)(Request("GET", "http://example.com/"), done)
