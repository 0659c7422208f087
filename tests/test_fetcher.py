# File: tests/test_fetcher.py
"""Fetcher tests against a local aiohttp server."""
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from robots_rules.crawler.fetcher import fetch_robots_txt, fetch_robots_txt_async
from robots_rules.parser.robots_parser import build_rule_set
from robots_rules.utils import request_uri, robots_url_for

ROBOTS_TXT = "User-agent: *\nDisallow: /private\nSitemap: /sitemap.xml\n"


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def robots_server(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_robots(_):
        return web.Response(text=ROBOTS_TXT, content_type="text/plain")

    app.router.add_get("/robots.txt", handle_robots)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest.mark.asyncio()
async def test_fetch_plain_text(robots_server: str):
    document = await fetch_robots_txt_async(f"{robots_server}/some/page?x=1", "TestAgent/1.0")

    assert document is not None
    assert document.status == 200
    assert document.reason == "OK"
    assert document.content_type == "text/plain"
    assert document.lines == ROBOTS_TXT.splitlines()
    assert document.is_usable()
    assert build_rule_set(document).other_directives == {"sitemap": ["/sitemap.xml"]}


@pytest.mark.asyncio()
async def test_fetch_sends_user_agent(unused_tcp_port: int):
    agents: list[str] = []

    async def handle_robots(request):
        agents.append(request.headers.get("User-Agent", ""))
        return web.Response(text="", content_type="text/plain")

    app = web.Application()
    app.router.add_get("/robots.txt", handle_robots)
    async for base in _serve_app(app, unused_tcp_port):
        await fetch_robots_txt_async(f"{base}/", "PoliteBot/2.0")

    assert agents == ["PoliteBot/2.0"]


@pytest.mark.asyncio()
async def test_fetch_404_returns_unusable_document(unused_tcp_port: int):
    app = web.Application()
    async for base in _serve_app(app, unused_tcp_port):
        document = await fetch_robots_txt_async(f"{base}/", "TestAgent/1.0")

    assert document is not None
    assert document.status == 404
    assert not document.is_usable()
    assert build_rule_set(document).is_default


@pytest.mark.asyncio()
async def test_fetch_html_is_not_usable(unused_tcp_port: int):
    async def handle_robots(_):
        return web.Response(text="<html>User-agent: *</html>", content_type="text/html")

    app = web.Application()
    app.router.add_get("/robots.txt", handle_robots)
    async for base in _serve_app(app, unused_tcp_port):
        document = await fetch_robots_txt_async(f"{base}/", "TestAgent/1.0")

    assert document is not None
    assert document.content_type == "text/html"
    assert build_rule_set(document).is_default


@pytest.mark.asyncio()
async def test_fetch_timeout_returns_none(unused_tcp_port: int):
    async def handle_slow(_):
        await asyncio.sleep(1.0)
        return web.Response(text="User-agent: *\nDisallow: /", content_type="text/plain")

    app = web.Application()
    app.router.add_get("/robots.txt", handle_slow)
    async for base in _serve_app(app, unused_tcp_port):
        document = await fetch_robots_txt_async(f"{base}/", "TestAgent/1.0", timeout=0.1)

    assert document is None


def test_sync_fetch_connection_refused_returns_none(unused_tcp_port: int):
    assert fetch_robots_txt(f"http://127.0.0.1:{unused_tcp_port}/page", "TestAgent/1.0", timeout=1.0) is None


def test_sync_fetch_without_host_returns_none():
    assert fetch_robots_txt("/relative/path", "TestAgent/1.0") is None


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://example.com/a/b?c=d#e", "http://example.com/robots.txt"),
        ("https://user@example.com:8443/x", "https://user@example.com:8443/robots.txt"),
        ("/relative", None),
        ("example.com/page", None),
    ],
)
def test_robots_url_for(url, expected):
    assert robots_url_for(url) == expected


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://example.com", "/"),
        ("http://example.com/mail?foo=bar", "/mail?foo=bar"),
        ("http://example.com?x=1", "/?x=1"),
        ("http://example.com/a#frag", "/a"),
    ],
)
def test_request_uri(url, expected):
    assert request_uri(url) == expected
