"""
GraphQL documents for the AniList API.

One document per operation; the operation name inside each document matches
the key used in the operation registry.
"""

# =============================================================================
# Fragments
# =============================================================================

_MEDIA_BASIC = """
    id
    type
    title { userPreferred romaji english native }
    coverImage { large medium color }
    format
    status
    averageScore
    meanScore
    popularity
    startDate { year month day }
    mediaListEntry { id status }
"""

_PAGE_INFO = """
    pageInfo { currentPage hasNextPage total }
"""

# =============================================================================
# Explore
# =============================================================================

SEARCH_MEDIA_QUERY = f"""
query SearchMedia(
    $page: Int, $perPage: Int, $search: String, $type: MediaType, $sort: [MediaSort],
    $genre_in: [String], $genre_not_in: [String], $tag_in: [String], $tag_not_in: [String],
    $format_in: [MediaFormat], $status_in: [MediaStatus],
    $startDateGreater: FuzzyDateInt, $startDateLesser: FuzzyDateInt,
    $onList: Boolean, $isLicensed: Boolean, $isAdult: Boolean, $country: CountryCode
) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    media(
      search: $search, type: $type, sort: $sort,
      genre_in: $genre_in, genre_not_in: $genre_not_in,
      tag_in: $tag_in, tag_not_in: $tag_not_in,
      format_in: $format_in, status_in: $status_in,
      startDate_greater: $startDateGreater, startDate_lesser: $startDateLesser,
      onList: $onList, isLicensed: $isLicensed, isAdult: $isAdult,
      countryOfOrigin: $country
    ) {{
      {_MEDIA_BASIC}
    }}
  }}
}}
"""

GENRE_TAG_COLLECTION_QUERY = """
query GenreTagCollection {
  genres: GenreCollection
  tags: MediaTagCollection { name description category isAdult }
}
"""

AIRING_ANIMES_QUERY = f"""
query AiringAnimes(
    $page: Int, $perPage: Int, $sort: [AiringSort],
    $airingAtGreater: Int, $airingAtLesser: Int
) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    airingSchedules(
      sort: $sort, airingAt_greater: $airingAtGreater, airingAt_lesser: $airingAtLesser
    ) {{
      id
      airingAt
      episode
      timeUntilAiring
      media {{
        {_MEDIA_BASIC}
      }}
    }}
  }}
}}
"""

AIRING_ON_MY_LIST_QUERY = f"""
query AiringOnMyList($page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    media(type: ANIME, status: RELEASING, onList: true, sort: POPULARITY_DESC) {{
      {_MEDIA_BASIC}
      nextAiringEpisode {{ airingAt episode timeUntilAiring }}
    }}
  }}
}}
"""

SEASONAL_ANIME_QUERY = f"""
query SeasonalAnime(
    $page: Int, $perPage: Int, $season: MediaSeason, $seasonYear: Int, $sort: [MediaSort]
) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    media(type: ANIME, season: $season, seasonYear: $seasonYear, sort: $sort) {{
      {_MEDIA_BASIC}
    }}
  }}
}}
"""

MEDIA_SORTED_QUERY = f"""
query MediaSorted($page: Int, $perPage: Int, $type: MediaType, $sort: [MediaSort]) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    media(type: $type, sort: $sort) {{
      {_MEDIA_BASIC}
    }}
  }}
}}
"""

MEDIA_CHART_QUERY = f"""
query MediaChart(
    $page: Int, $perPage: Int, $sort: [MediaSort], $type: MediaType,
    $status: MediaStatus, $format: MediaFormat
) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    media(sort: $sort, type: $type, status: $status, format: $format) {{
      {_MEDIA_BASIC}
    }}
  }}
}}
"""

# =============================================================================
# Media details
# =============================================================================

MEDIA_DETAILS_QUERY = f"""
query MediaDetails($mediaId: Int) {{
  Media(id: $mediaId) {{
    {_MEDIA_BASIC}
    idMal
    description
    season
    seasonYear
    episodes
    duration
    chapters
    volumes
    genres
    synonyms
    source
    countryOfOrigin
    isAdult
    isLicensed
    siteUrl
    endDate {{ year month day }}
    nextAiringEpisode {{ airingAt episode timeUntilAiring }}
    studios {{ nodes {{ id name isAnimationStudio }} }}
    tags {{ name rank isMediaSpoiler }}
    externalLinks {{ url site }}
  }}
}}
"""

MEDIA_CHARACTERS_AND_STAFF_QUERY = """
query MediaCharactersAndStaff($mediaId: Int) {
  Media(id: $mediaId) {
    id
    characters(sort: [ROLE, RELEVANCE, ID]) {
      edges {
        role
        node { id name { userPreferred } image { medium } }
        voiceActors(language: JAPANESE) { id name { userPreferred } image { medium } }
      }
    }
    staff(sort: [RELEVANCE, ID]) {
      edges {
        role
        node { id name { userPreferred } image { medium } }
      }
    }
  }
}
"""

MEDIA_RELATIONS_AND_RECOMMENDATIONS_QUERY = """
query MediaRelationsAndRecommendations($mediaId: Int) {
  Media(id: $mediaId) {
    id
    relations {
      edges {
        relationType
        node { id type title { userPreferred } coverImage { large } format status }
      }
    }
    recommendations(sort: [RATING_DESC, ID]) {
      nodes {
        rating
        mediaRecommendation { id type title { userPreferred } coverImage { large } format }
      }
    }
  }
}
"""

MEDIA_STATS_QUERY = """
query MediaStats($mediaId: Int) {
  Media(id: $mediaId) {
    id
    rankings { id rank type allTime season year context }
    stats {
      statusDistribution { status amount }
      scoreDistribution { score amount }
    }
  }
}
"""

MEDIA_REVIEWS_QUERY = f"""
query MediaReviews($mediaId: Int, $page: Int, $perPage: Int) {{
  Media(id: $mediaId) {{
    id
    reviews(page: $page, perPage: $perPage, sort: [RATING_DESC, ID]) {{
      {_PAGE_INFO}
      nodes {{ id summary score rating ratingAmount user {{ id name avatar {{ medium }} }} }}
    }}
  }}
}}
"""

MEDIA_THREADS_QUERY = f"""
query MediaThreads($page: Int, $perPage: Int, $mediaCategoryId: Int, $sort: [ThreadSort]) {{
  Page(page: $page, perPage: $perPage) {{
    {_PAGE_INFO}
    threads(mediaCategoryId: $mediaCategoryId, sort: $sort) {{
      id
      title
      replyCount
      viewCount
      createdAt
      user {{ id name avatar {{ medium }} }}
    }}
  }}
}}
"""

# =============================================================================
# User
# =============================================================================

USER_CURRENT_ANIME_LIST_QUERY = f"""
query UserCurrentAnimeList($userId: Int) {{
  Page(page: 1, perPage: 50) {{
    mediaList(userId: $userId, type: ANIME, status_in: [CURRENT, REPEATING], sort: UPDATED_TIME_DESC) {{
      id
      status
      progress
      media {{
        {_MEDIA_BASIC}
        episodes
        nextAiringEpisode {{ airingAt episode timeUntilAiring }}
      }}
    }}
  }}
}}
"""
