# anilist_querybuilder/params.py

from typing import Optional

from fastapi import Query
from pydantic import BaseModel, StrictInt

from .schemas import (
    AiringSort,
    AnimeSeason,
    CountryOfOrigin,
    MediaFormat,
    MediaSort,
    MediaStatus,
    MediaType,
)


class PageParams(BaseModel):
    page: int
    per_page: int


class SearchMediaParams(PageParams):
    media_type: MediaType
    query: Optional[str] = None
    sort: list[MediaSort]
    genre_in: Optional[list[str]] = None
    genre_not_in: Optional[list[str]] = None
    tag_in: Optional[list[str]] = None
    tag_not_in: Optional[list[str]] = None
    format_in: Optional[list[MediaFormat]] = None
    status_in: Optional[list[MediaStatus]] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    on_list: Optional[bool] = None
    is_licensed: Optional[bool] = None
    is_adult: Optional[bool] = None
    country: Optional[CountryOfOrigin] = None


class NoParams(BaseModel):
    pass


class AiringAnimesParams(PageParams):
    # unix timestamps in seconds
    airing_at_greater: Optional[int] = None
    airing_at_lesser: Optional[int] = None
    sort: list[AiringSort]


class SeasonalAnimeParams(PageParams):
    anime_season: AnimeSeason


class MediaSortedParams(PageParams):
    media_type: MediaType
    sort: list[MediaSort]


class MediaIdParams(BaseModel):
    # no coercion: True or "7" must not turn into an id
    media_id: Optional[StrictInt] = None


class MediaPageParams(PageParams):
    media_id: Optional[StrictInt] = None


class MediaThreadsParams(BaseModel):
    media_id: Optional[StrictInt] = None
    page: int = 1
    per_page: int = 25


class MediaChartParams(PageParams):
    media_type: MediaType
    sort: list[MediaSort]
    status: Optional[MediaStatus] = None
    format: Optional[MediaFormat] = None


class UserIdParams(BaseModel):
    user_id: Optional[StrictInt] = None


class SearchQueryParams:
    def __init__(
        self,
        search: Optional[str] = Query(None, description="Free-text title search."),
        sort: Optional[list[MediaSort]] = Query(None, description="e.g. sort=SCORE_DESC&sort=POPULARITY_DESC"),
        genre_in: Optional[list[str]] = Query(None),
        genre_not_in: Optional[list[str]] = Query(None),
        tag_in: Optional[list[str]] = Query(None),
        tag_not_in: Optional[list[str]] = Query(None),
        format_in: Optional[list[MediaFormat]] = Query(None),
        status_in: Optional[list[MediaStatus]] = Query(None),
        start_year: Optional[int] = Query(None, description="Started after this year."),
        end_year: Optional[int] = Query(None, description="Started before this year."),
        on_list: Optional[bool] = Query(None),
        is_licensed: Optional[bool] = Query(None),
        is_adult: Optional[bool] = Query(None),
        country: Optional[CountryOfOrigin] = Query(None),
        page: int = Query(1, ge=1),
        per_page: int = Query(25, ge=1, le=50),
    ):
        self.search = search
        self.sort = sort
        self.genre_in = genre_in
        self.genre_not_in = genre_not_in
        self.tag_in = tag_in
        self.tag_not_in = tag_not_in
        self.format_in = format_in
        self.status_in = status_in
        self.start_year = start_year
        self.end_year = end_year
        self.on_list = on_list
        self.is_licensed = is_licensed
        self.is_adult = is_adult
        self.country = country
        self.page = page
        self.per_page = per_page

    def to_params(self, media_type: MediaType) -> SearchMediaParams:
        if self.start_year is not None and self.end_year is not None and self.start_year > self.end_year:
            raise ValueError(f"start_year {self.start_year} is after end_year {self.end_year}")
        sort = self.sort
        if not sort:
            # SEARCH_MATCH is meaningless without a search term
            sort = [MediaSort.SEARCH_MATCH if self.search else MediaSort.POPULARITY_DESC]
        return SearchMediaParams(
            media_type=media_type,
            query=self.search,
            sort=sort,
            genre_in=self.genre_in,
            genre_not_in=self.genre_not_in,
            tag_in=self.tag_in,
            tag_not_in=self.tag_not_in,
            format_in=self.format_in,
            status_in=self.status_in,
            start_year=self.start_year,
            end_year=self.end_year,
            on_list=self.on_list,
            is_licensed=self.is_licensed,
            is_adult=self.is_adult,
            country=self.country,
            page=self.page,
            per_page=self.per_page,
        )
