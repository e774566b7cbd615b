from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    ANIME = "ANIME"
    MANGA = "MANGA"


class MediaSeason(str, Enum):
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class MediaFormat(str, Enum):
    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"


class MediaStatus(str, Enum):
    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"


class MediaSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    TITLE_ROMAJI = "TITLE_ROMAJI"
    TITLE_ROMAJI_DESC = "TITLE_ROMAJI_DESC"
    TITLE_ENGLISH = "TITLE_ENGLISH"
    TITLE_ENGLISH_DESC = "TITLE_ENGLISH_DESC"
    TITLE_NATIVE = "TITLE_NATIVE"
    TITLE_NATIVE_DESC = "TITLE_NATIVE_DESC"
    TYPE = "TYPE"
    TYPE_DESC = "TYPE_DESC"
    FORMAT = "FORMAT"
    FORMAT_DESC = "FORMAT_DESC"
    START_DATE = "START_DATE"
    START_DATE_DESC = "START_DATE_DESC"
    END_DATE = "END_DATE"
    END_DATE_DESC = "END_DATE_DESC"
    SCORE = "SCORE"
    SCORE_DESC = "SCORE_DESC"
    POPULARITY = "POPULARITY"
    POPULARITY_DESC = "POPULARITY_DESC"
    TRENDING = "TRENDING"
    TRENDING_DESC = "TRENDING_DESC"
    EPISODES = "EPISODES"
    EPISODES_DESC = "EPISODES_DESC"
    DURATION = "DURATION"
    DURATION_DESC = "DURATION_DESC"
    STATUS = "STATUS"
    STATUS_DESC = "STATUS_DESC"
    CHAPTERS = "CHAPTERS"
    CHAPTERS_DESC = "CHAPTERS_DESC"
    VOLUMES = "VOLUMES"
    VOLUMES_DESC = "VOLUMES_DESC"
    UPDATED_AT = "UPDATED_AT"
    UPDATED_AT_DESC = "UPDATED_AT_DESC"
    SEARCH_MATCH = "SEARCH_MATCH"
    FAVOURITES = "FAVOURITES"
    FAVOURITES_DESC = "FAVOURITES_DESC"


class AiringSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    MEDIA_ID = "MEDIA_ID"
    MEDIA_ID_DESC = "MEDIA_ID_DESC"
    TIME = "TIME"
    TIME_DESC = "TIME_DESC"
    EPISODE = "EPISODE"
    EPISODE_DESC = "EPISODE_DESC"


class ThreadSort(str, Enum):
    ID = "ID"
    ID_DESC = "ID_DESC"
    TITLE = "TITLE"
    TITLE_DESC = "TITLE_DESC"
    CREATED_AT = "CREATED_AT"
    CREATED_AT_DESC = "CREATED_AT_DESC"
    UPDATED_AT = "UPDATED_AT"
    UPDATED_AT_DESC = "UPDATED_AT_DESC"
    REPLIED_AT = "REPLIED_AT"
    REPLIED_AT_DESC = "REPLIED_AT_DESC"
    REPLY_COUNT = "REPLY_COUNT"
    REPLY_COUNT_DESC = "REPLY_COUNT_DESC"
    VIEW_COUNT = "VIEW_COUNT"
    VIEW_COUNT_DESC = "VIEW_COUNT_DESC"
    IS_STICKY = "IS_STICKY"
    SEARCH_MATCH = "SEARCH_MATCH"


class CountryOfOrigin(str, Enum):
    JAPAN = "JP"
    SOUTH_KOREA = "KR"
    CHINA = "CN"
    TAIWAN = "TW"


# -------------------
# Season
# -------------------

class AnimeSeason(BaseModel):
    year: int
    season: MediaSeason

    model_config = {"frozen": True}


# -------------------
# Transport responses
# -------------------

class GraphQLError(BaseModel):
    message: str
    status: Optional[int] = None
    locations: Optional[list[dict[str, Any]]] = None
    path: Optional[list[Any]] = None


class GraphQLResponse(BaseModel):
    data: Optional[dict[str, Any]] = None
    errors: list[GraphQLError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
