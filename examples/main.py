from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI, Depends, Path, Request
import uvicorn

from anilist_querybuilder.api import MediaApi
from anilist_querybuilder.client import AsyncGraphQLClient
from anilist_querybuilder.core import QueryRequest
from anilist_querybuilder.dependencies import SearchMediaBuilder
from anilist_querybuilder.schemas import (
    AiringSort,
    AnimeSeason,
    GraphQLResponse,
    MediaSeason,
    MediaType,
)

# ───── Client Setup ──────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with AsyncGraphQLClient() as client:
        app.state.client = client
        app.state.media_api = MediaApi(client)
        yield


def get_media_api(request: Request) -> MediaApi:
    return request.app.state.media_api


# ───── FastAPI App ───────────────────────────────

app = FastAPI(lifespan=lifespan)


@app.get("/anime/search", response_model=GraphQLResponse)
async def search_anime(request: Request, query: QueryRequest = SearchMediaBuilder(MediaType.ANIME)):
    return await request.app.state.client.query(query)


@app.get("/manga/search", response_model=GraphQLResponse)
async def search_manga(request: Request, query: QueryRequest = SearchMediaBuilder(MediaType.MANGA)):
    return await request.app.state.client.query(query)


@app.get("/media/{media_id}", response_model=GraphQLResponse)
async def get_media(media_id: int = Path(gt=0), api: MediaApi = Depends(get_media_api)):
    return await api.media_details(media_id)


@app.get("/seasons/{year}/{season}", response_model=GraphQLResponse)
async def get_season(year: int, season: MediaSeason, page: int = 1, per_page: int = 25,
                     api: MediaApi = Depends(get_media_api)):
    return await api.seasonal_anime(AnimeSeason(year=year, season=season), page, per_page)


@app.get("/airing/today", response_model=GraphQLResponse)
async def get_airing_today(page: int = 1, per_page: int = 25, api: MediaApi = Depends(get_media_api)):
    start = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return await api.airing_animes(
        airing_at_greater=int(start.timestamp()),
        airing_at_lesser=int(end.timestamp()),
        sort=[AiringSort.TIME],
        page=page,
        per_page=per_page,
    )


# ───── Run Server ────────────────────────────────

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
