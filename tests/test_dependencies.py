import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from anilist_querybuilder.core import QueryRequest
from anilist_querybuilder.dependencies import SearchMediaBuilder
from anilist_querybuilder.schemas import MediaType


@pytest.fixture
def client():
    app = FastAPI()

    @app.get("/search")
    def search(query: QueryRequest = SearchMediaBuilder(MediaType.ANIME)):
        return {"operation": query.operation, "variables": query.variables()}

    return TestClient(app)


def test_defaults(client):
    response = client.get("/search")

    assert response.status_code == 200
    assert response.json()["variables"] == {
        "page": 1,
        "perPage": 25,
        "type": "ANIME",
        "sort": ["POPULARITY_DESC"],
    }


def test_search_term_defaults_to_search_match(client):
    response = client.get("/search", params={"search": "mushishi"})

    variables = response.json()["variables"]
    assert variables["search"] == "mushishi"
    assert variables["sort"] == ["SEARCH_MATCH"]


def test_filters_from_query_string(client):
    response = client.get("/search", params=[
        ("genre_in", "Drama"),
        ("genre_in", "Mystery"),
        ("format_in", "MOVIE"),
        ("sort", "SCORE_DESC"),
        ("start_year", "2001"),
        ("is_adult", "false"),
        ("country", "KR"),
        ("page", "2"),
        ("per_page", "10"),
    ])

    assert response.status_code == 200
    variables = response.json()["variables"]
    assert variables["genre_in"] == ["Drama", "Mystery"]
    assert variables["format_in"] == ["MOVIE"]
    assert variables["sort"] == ["SCORE_DESC"]
    assert variables["startDateGreater"] == 20010000
    assert "startDateLesser" not in variables
    assert variables["isAdult"] is False
    assert variables["country"] == "KR"
    assert variables["page"] == 2
    assert variables["perPage"] == 10


def test_inverted_year_range_is_rejected(client):
    response = client.get("/search", params={"start_year": 2020, "end_year": 2010})

    assert response.status_code == 400
    assert "start_year" in response.json()["detail"]


@pytest.mark.parametrize("params", [{"page": 0}, {"per_page": 51}, {"format_in": "CARTOON"}])
def test_out_of_range_values(client, params):
    assert client.get("/search", params=params).status_code == 422
