# anilist_querybuilder/operations.py

from typing import Any, Callable, NamedTuple

from . import documents
from .core import (
    OptionalField,
    present,
    present_if_not_blank,
    present_if_not_empty,
    present_if_not_null,
    require_id,
    year_bound,
)
from .params import (
    AiringAnimesParams,
    MediaChartParams,
    MediaIdParams,
    MediaPageParams,
    MediaSortedParams,
    MediaThreadsParams,
    NoParams,
    PageParams,
    SearchMediaParams,
    SeasonalAnimeParams,
    UserIdParams,
)
from .schemas import MediaSort, ThreadSort

Fields = dict[str, OptionalField]

SEASONAL_SORT = [MediaSort.POPULARITY_DESC]
THREADS_SORT = [ThreadSort.CREATED_AT_DESC]


class Operation(NamedTuple):
    params_type: type
    document: str
    build: Callable[[Any], Fields]


def _page(params: PageParams) -> Fields:
    return {
        "page": present(params.page),
        "perPage": present(params.per_page),
    }


def _search_media(params: SearchMediaParams) -> Fields:
    return {
        **_page(params),
        "search": present_if_not_blank(params.query),
        "type": present(params.media_type),
        "sort": present(list(params.sort)),
        "genre_in": present_if_not_empty(params.genre_in),
        "genre_not_in": present_if_not_empty(params.genre_not_in),
        "tag_in": present_if_not_empty(params.tag_in),
        "tag_not_in": present_if_not_empty(params.tag_not_in),
        "format_in": present_if_not_empty(params.format_in),
        "status_in": present_if_not_empty(params.status_in),
        "startDateGreater": year_bound(params.start_year),
        "startDateLesser": year_bound(params.end_year),
        "onList": present_if_not_null(params.on_list),
        "isLicensed": present_if_not_null(params.is_licensed),
        "isAdult": present_if_not_null(params.is_adult),
        "country": present_if_not_null(params.country),
    }


def _genre_tag_collection(params: NoParams) -> Fields:
    return {}


def _airing_animes(params: AiringAnimesParams) -> Fields:
    return {
        **_page(params),
        "sort": present(list(params.sort)),
        "airingAtGreater": present_if_not_null(params.airing_at_greater),
        "airingAtLesser": present_if_not_null(params.airing_at_lesser),
    }


def _seasonal_anime(params: SeasonalAnimeParams) -> Fields:
    return {
        **_page(params),
        "season": present(params.anime_season.season),
        "seasonYear": present(params.anime_season.year),
        "sort": present(list(SEASONAL_SORT)),
    }


def _media_sorted(params: MediaSortedParams) -> Fields:
    return {
        **_page(params),
        "type": present(params.media_type),
        "sort": present(list(params.sort)),
    }


def _media_id(params: MediaIdParams) -> Fields:
    return {"mediaId": present(require_id("media_id", params.media_id))}


def _media_reviews(params: MediaPageParams) -> Fields:
    media_id = require_id("media_id", params.media_id)
    return {"mediaId": present(media_id), **_page(params)}


def _media_threads(params: MediaThreadsParams) -> Fields:
    media_id = require_id("media_id", params.media_id)
    return {
        "page": present(params.page),
        "perPage": present(params.per_page),
        "mediaCategoryId": present(media_id),
        "sort": present(list(THREADS_SORT)),
    }


def _media_chart(params: MediaChartParams) -> Fields:
    return {
        **_page(params),
        "sort": present(list(params.sort)),
        "type": present(params.media_type),
        "status": present_if_not_null(params.status),
        "format": present_if_not_null(params.format),
    }


def _user_id(params: UserIdParams) -> Fields:
    return {"userId": present(require_id("user_id", params.user_id))}


OPERATIONS: dict[str, Operation] = {
    "SearchMedia": Operation(SearchMediaParams, documents.SEARCH_MEDIA_QUERY, _search_media),
    "GenreTagCollection": Operation(NoParams, documents.GENRE_TAG_COLLECTION_QUERY, _genre_tag_collection),
    "AiringAnimes": Operation(AiringAnimesParams, documents.AIRING_ANIMES_QUERY, _airing_animes),
    "AiringOnMyList": Operation(PageParams, documents.AIRING_ON_MY_LIST_QUERY, _page),
    "SeasonalAnime": Operation(SeasonalAnimeParams, documents.SEASONAL_ANIME_QUERY, _seasonal_anime),
    "MediaSorted": Operation(MediaSortedParams, documents.MEDIA_SORTED_QUERY, _media_sorted),
    "MediaDetails": Operation(MediaIdParams, documents.MEDIA_DETAILS_QUERY, _media_id),
    "MediaCharactersAndStaff": Operation(
        MediaIdParams, documents.MEDIA_CHARACTERS_AND_STAFF_QUERY, _media_id),
    "MediaRelationsAndRecommendations": Operation(
        MediaIdParams, documents.MEDIA_RELATIONS_AND_RECOMMENDATIONS_QUERY, _media_id),
    "MediaStats": Operation(MediaIdParams, documents.MEDIA_STATS_QUERY, _media_id),
    "MediaReviews": Operation(MediaPageParams, documents.MEDIA_REVIEWS_QUERY, _media_reviews),
    "MediaThreads": Operation(MediaThreadsParams, documents.MEDIA_THREADS_QUERY, _media_threads),
    "MediaChart": Operation(MediaChartParams, documents.MEDIA_CHART_QUERY, _media_chart),
    "UserCurrentAnimeList": Operation(UserIdParams, documents.USER_CURRENT_ANIME_LIST_QUERY, _user_id),
}
