"""
News proxy endpoint.

GET /news → relays the upstream news API's JSON body.

Only two outcomes:
- 200 with whatever the upstream returned
- 500 with {"error": "Failed to fetch news", "details": "..."}
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_news_client
from news.client import NewsClient, NewsFetchError

router = APIRouter(tags=["news"])


@router.get("/news")
async def get_news(
    client: NewsClient = Depends(get_news_client),
):
    try:
        return await client.fetch()
    except NewsFetchError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch news", "details": str(e)},
        )
