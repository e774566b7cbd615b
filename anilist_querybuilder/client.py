"""
GraphQL transports over httpx.

Network failures and non-2xx responses surface as the usual httpx exceptions.
GraphQL errors reported in the body are returned on the response, not raised.
"""
import logging
from typing import Any, Optional, Protocol

import httpx

from . import config
from .core import QueryRequest
from .schemas import GraphQLResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def query(self, request: QueryRequest) -> Any: ...


def _headers(token: Optional[str]) -> dict[str, str]:
    headers = {"Accept": "application/json", "Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _payload(request: QueryRequest) -> dict[str, Any]:
    return {
        "query": request.document,
        "operationName": request.operation,
        "variables": request.variables(),
    }


def _parse(request: QueryRequest, response: httpx.Response) -> GraphQLResponse:
    response.raise_for_status()
    body = response.json()
    result = GraphQLResponse(data=body.get("data"), errors=body.get("errors") or [])
    if result.has_errors:
        logger.warning(
            f"{request.operation} returned errors: {[e.message for e in result.errors]}")
    return result


class GraphQLClient:
    """Blocking transport; safe to share between threads."""

    def __init__(
        self,
        url: str = config.ANILIST_API_URL,
        token: Optional[str] = config.ANILIST_ACCESS_TOKEN,
        timeout: float = config.ANILIST_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.headers = _headers(token)
        self._http = http_client or httpx.Client(timeout=timeout)

    def query(self, request: QueryRequest) -> GraphQLResponse:
        logger.debug(f"POST {self.url} {request.operation}")
        response = self._http.post(self.url, json=_payload(request), headers=self.headers)
        return _parse(request, response)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GraphQLClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncGraphQLClient:
    def __init__(
        self,
        url: str = config.ANILIST_API_URL,
        token: Optional[str] = config.ANILIST_ACCESS_TOKEN,
        timeout: float = config.ANILIST_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.headers = _headers(token)
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def query(self, request: QueryRequest) -> GraphQLResponse:
        logger.debug(f"POST {self.url} {request.operation}")
        response = await self._http.post(self.url, json=_payload(request), headers=self.headers)
        return _parse(request, response)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncGraphQLClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
