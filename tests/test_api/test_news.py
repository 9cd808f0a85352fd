"""
Tests for the /news proxy.

The upstream API is replaced by httpx.MockTransport, so the real
NewsClient code runs against a fake server with no network access.
"""

import httpx
import pytest

from api.dependencies import get_news_client
from config.settings import Settings
from news.client import NewsClient, NewsFetchError

UPSTREAM = {"status": "ok", "totalResults": 1, "articles": [{"title": "New Vande Bharat route"}]}


def _config() -> Settings:
    return Settings(NEWS_API_KEY="test-key", NEWS_API_URL="https://news.test/v2/everything")


@pytest.fixture
def use_news(app):
    """
    Point the app's news dependency at a mock upstream.

    Returns the list of httpx clients the override opened, so tests can
    check they were closed once the request finished.
    """
    opened: list[httpx.AsyncClient] = []

    def _use(handler):
        async def override():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
                opened.append(http_client)
                yield NewsClient(http_client, _config())

        app.dependency_overrides[get_news_client] = override
        return opened

    yield _use
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_news_relays_upstream_json(client, use_news):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["host"] = request.url.host
        return httpx.Response(200, json=UPSTREAM)

    use_news(handler)
    response = await client.get("/news")

    assert response.status_code == 200
    assert response.json() == UPSTREAM
    assert seen["host"] == "news.test"
    assert seen["params"] == {
        "q": "railway india",
        "language": "en",
        "sortBy": "publishedAt",
        "pageSize": "8",
        "apiKey": "test-key",
    }


@pytest.mark.asyncio
async def test_news_network_failure_is_500(client, use_news):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    use_news(handler)
    response = await client.get("/news")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to fetch news"
    assert "connection refused" in body["details"]


@pytest.mark.asyncio
async def test_news_bad_json_is_500(client, use_news):
    use_news(lambda request: httpx.Response(200, text="<html>oops</html>"))
    response = await client.get("/news")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch news"


@pytest.mark.asyncio
async def test_client_raises_news_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(NewsFetchError, match="timed out"):
            await NewsClient(http_client, _config()).fetch()



@pytest.mark.asyncio
async def test_news_closes_http_client_after_request(client, use_news):
    opened = use_news(lambda request: httpx.Response(200, json=UPSTREAM))

    response = await client.get("/news")

    assert response.status_code == 200
    assert len(opened) == 1
    assert opened[0].is_closed
