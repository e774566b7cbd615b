from typing import Optional

from .builder import build_request
from .client import Transport
from .params import (
    AiringAnimesParams,
    MediaChartParams,
    MediaIdParams,
    MediaPageParams,
    MediaSortedParams,
    MediaThreadsParams,
    PageParams,
    SearchMediaParams,
    SeasonalAnimeParams,
    UserIdParams,
)
from .schemas import (
    AiringSort,
    AnimeSeason,
    CountryOfOrigin,
    MediaFormat,
    MediaSort,
    MediaStatus,
    MediaType,
)


class MediaApi:
    """
    Typed entry points for media queries.

    Every method builds a fresh request and returns whatever the transport
    returns for it, unchanged. With an async transport that is a coroutine.
    """

    def __init__(self, client: Transport):
        self.client = client

    def _query(self, operation: str, params=None):
        return self.client.query(build_request(operation, params))

    def search_media(
        self,
        media_type: MediaType,
        query: Optional[str],
        sort: list[MediaSort],
        genre_in: Optional[list[str]] = None,
        genre_not_in: Optional[list[str]] = None,
        tag_in: Optional[list[str]] = None,
        tag_not_in: Optional[list[str]] = None,
        format_in: Optional[list[MediaFormat]] = None,
        status_in: Optional[list[MediaStatus]] = None,
        start_year: Optional[int] = None,
        end_year: Optional[int] = None,
        on_list: Optional[bool] = None,
        is_licensed: Optional[bool] = None,
        is_adult: Optional[bool] = None,
        country: Optional[CountryOfOrigin] = None,
        page: int = 1,
        per_page: int = 25,
    ):
        return self._query("SearchMedia", SearchMediaParams(
            media_type=media_type,
            query=query,
            sort=sort,
            genre_in=genre_in,
            genre_not_in=genre_not_in,
            tag_in=tag_in,
            tag_not_in=tag_not_in,
            format_in=format_in,
            status_in=status_in,
            start_year=start_year,
            end_year=end_year,
            on_list=on_list,
            is_licensed=is_licensed,
            is_adult=is_adult,
            country=country,
            page=page,
            per_page=per_page,
        ))

    def genre_tag_collection(self):
        return self._query("GenreTagCollection")

    def airing_animes(
        self,
        airing_at_greater: Optional[int],
        airing_at_lesser: Optional[int],
        sort: list[AiringSort],
        page: int,
        per_page: int,
    ):
        return self._query("AiringAnimes", AiringAnimesParams(
            airing_at_greater=airing_at_greater,
            airing_at_lesser=airing_at_lesser,
            sort=sort,
            page=page,
            per_page=per_page,
        ))

    def airing_on_my_list(self, page: int, per_page: int):
        return self._query("AiringOnMyList", PageParams(page=page, per_page=per_page))

    def seasonal_anime(self, anime_season: AnimeSeason, page: int, per_page: int):
        return self._query("SeasonalAnime", SeasonalAnimeParams(
            anime_season=anime_season, page=page, per_page=per_page))

    def media_sorted(self, media_type: MediaType, sort: list[MediaSort], page: int, per_page: int):
        return self._query("MediaSorted", MediaSortedParams(
            media_type=media_type, sort=sort, page=page, per_page=per_page))

    def media_details(self, media_id: int):
        return self._query("MediaDetails", MediaIdParams(media_id=media_id))

    def media_characters_and_staff(self, media_id: int):
        return self._query("MediaCharactersAndStaff", MediaIdParams(media_id=media_id))

    def media_relations_and_recommendations(self, media_id: int):
        return self._query("MediaRelationsAndRecommendations", MediaIdParams(media_id=media_id))

    def media_stats(self, media_id: int):
        return self._query("MediaStats", MediaIdParams(media_id=media_id))

    def media_reviews(self, media_id: int, page: int, per_page: int):
        return self._query("MediaReviews", MediaPageParams(
            media_id=media_id, page=page, per_page=per_page))

    def media_threads(self, media_id: int, page: int = 1, per_page: int = 25):
        return self._query("MediaThreads", MediaThreadsParams(
            media_id=media_id, page=page, per_page=per_page))

    def media_chart(
        self,
        media_type: MediaType,
        sort: list[MediaSort],
        status: Optional[MediaStatus],
        format: Optional[MediaFormat],
        page: int,
        per_page: int,
    ):
        return self._query("MediaChart", MediaChartParams(
            media_type=media_type,
            sort=sort,
            status=status,
            format=format,
            page=page,
            per_page=per_page,
        ))

    def user_current_anime_list(self, user_id: int):
        return self._query("UserCurrentAnimeList", UserIdParams(user_id=user_id))
