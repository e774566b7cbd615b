import asyncio
import json

import httpx
import pytest

from anilist_querybuilder.builder import build_request
from anilist_querybuilder.client import AsyncGraphQLClient, GraphQLClient
from anilist_querybuilder.params import MediaIdParams, SearchMediaParams
from anilist_querybuilder.schemas import MediaSort, MediaType

URL = "https://graphql.test/"


def _search_request():
    return build_request("SearchMedia", SearchMediaParams(
        media_type=MediaType.ANIME, query="", sort=[MediaSort.POPULARITY_DESC],
        start_year=2016, page=1, per_page=5))


def test_posts_operation_and_present_variables_only():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"data": {"Page": {"media": []}}})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    with GraphQLClient(url=URL, token="secret", http_client=http) as client:
        response = client.query(_search_request())

    assert response.data == {"Page": {"media": []}}
    assert not response.has_errors
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["operationName"] == "SearchMedia"
    assert seen["body"]["variables"] == {
        "page": 1,
        "perPage": 5,
        "type": "ANIME",
        "sort": ["POPULARITY_DESC"],
        "startDateGreater": 20160000,
    }


def test_no_token_means_no_authorization_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"data": {}})

    client = GraphQLClient(url=URL, token="", http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    client.query(build_request("GenreTagCollection"))

    assert seen["auth"] is None


def test_graphql_errors_are_returned_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={
            "data": {"Media": None},
            "errors": [{"message": "Not Found.", "status": 404, "locations": [{"line": 2, "column": 3}]}],
        })

    client = GraphQLClient(url=URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    response = client.query(build_request("MediaDetails", MediaIdParams(media_id=999999)))

    assert response.has_errors
    assert response.errors[0].message == "Not Found."
    assert response.errors[0].status == 404
    assert response.data == {"Media": None}


def test_null_errors_field():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"Media": {"id": 1}}, "errors": None})

    client = GraphQLClient(url=URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    response = client.query(build_request("MediaDetails", MediaIdParams(media_id=1)))

    assert response.errors == []


def test_http_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"errors": [{"message": "Too Many Requests."}]})

    client = GraphQLClient(url=URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(httpx.HTTPStatusError):
        client.query(build_request("GenreTagCollection"))


def test_network_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GraphQLClient(url=URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(httpx.ConnectError):
        client.query(build_request("GenreTagCollection"))


def test_async_client():
    seen = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"Media": {"id": 1}}})

    async def run():
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with AsyncGraphQLClient(url=URL, http_client=http) as client:
            return await client.query(build_request("MediaDetails", MediaIdParams(media_id=1)))

    response = asyncio.run(run())

    assert response.data == {"Media": {"id": 1}}
    assert seen["body"]["variables"] == {"mediaId": 1}
