"""Async client for the VNDB Kana API."""

from typing import Any, Dict, List, Optional, Tuple

import httpx

from .constants import POST_ENDPOINTS, ULIST_LABEL_FIELDS, USER_STATS_FIELDS, Endpoint
from .exceptions import CredentialAbsentError, TransportError
from .logger import get_logger
from .query import QueryFormat
from .schema import AuthInfo, QueryResponse, UlistLabels, UserStat, UserStats, VndbStats, parse_reply
from .settings import settings
from .types import Query, UserIds

_FROM_SETTINGS: Any = object()


class VndbClient:
    """Thin async wrapper over the Kana HTTP API.

    The API token is optional. Operations that need one raise
    `CredentialAbsentError` before sending anything; all other requests carry
    the `Authorization` header whenever a token is configured.

    Usage:
        async with VndbClient() as client:
            stats = await client.stats()
            reply = await client.vn(QueryFormat.builder().filters(["id", "=", "v17"]).build())
    """

    def __init__(
        self,
        token: Optional[str] = _FROM_SETTINGS,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._token: Optional[str] = settings.VNDB_API_TOKEN if token is _FROM_SETTINGS else token
        self.base_url = (base_url or settings.VNDB_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.VNDB_TIMEOUT
        self._client = http_client
        self._owns_client = http_client is None
        self.logger = get_logger(__name__)

    @classmethod
    def simple(cls, **kwargs: Any) -> "VndbClient":
        """Client without a token, ignoring `VNDB_API_TOKEN`."""
        return cls(token=None, **kwargs)

    @classmethod
    def with_token(cls, token: str, **kwargs: Any) -> "VndbClient":
        return cls(token=token, **kwargs)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazily create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": settings.VNDB_USER_AGENT},
            )
        return self._client

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def set_token(self, token: Optional[str]) -> None:
        self._token = token

    async def close(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "VndbClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    # -------------------
    # Internals
    # -------------------
    def _require_token(self, operation: str) -> str:
        if not self._token:
            raise CredentialAbsentError("API token required", operation=operation)
        return self._token

    def _auth_headers(self, token: Optional[str]) -> Dict[str, str]:
        if not token:
            return {}
        return {"Authorization": f"token {token}"}

    def _url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[List[Tuple[str, str]]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = self._url(endpoint)
        self.logger.message(f"{method} {url}")
        self.logger.debug(f"params={params} body={json}")
        try:
            response = await self.client.request(method, url, params=params, json=json, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(f"{method} {url} failed with status {e.response.status_code}")
            raise TransportError(
                "Request failed",
                method=method,
                url=url,
                status_code=e.response.status_code,
                body=e.response.text[:200],
            ) from e
        except httpx.HTTPError as e:
            self.logger.exception(f"{method} {url} failed: {e}")
            raise TransportError("Request failed", method=method, url=url, reason=str(e)) from e
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                "Reply body is not valid JSON",
                method=method,
                url=url,
                status_code=response.status_code,
            ) from e

    # -------------------
    # GET endpoints
    # -------------------
    async def stats(self) -> VndbStats:
        data = await self._request("GET", Endpoint.STATS)
        return parse_reply(VndbStats, data)

    async def users_stats(self, ids: UserIds) -> UserStats:
        """Look up users by id ("u2") or username.

        Unknown users map to None in the result.
        """
        if isinstance(ids, str):
            ids = [ids]
        params = [("q", user_id) for user_id in ids]
        params.append(("fields", USER_STATS_FIELDS))
        data = await self._request("GET", Endpoint.USER, params=params)
        return parse_reply(UserStats, data)

    async def user_stats(self, user_id: str) -> Optional[UserStat]:
        users = await self.users_stats([user_id])
        return users.get(user_id)

    async def authinfo(self) -> AuthInfo:
        token = self._require_token("authinfo")
        data = await self._request("GET", Endpoint.AUTHINFO, headers=self._auth_headers(token))
        return parse_reply(AuthInfo, data)

    async def ulist_labels(self, user: Optional[str] = None) -> UlistLabels:
        """Fetch list labels of `user`, or of the token owner when `user` is None."""
        params = [("fields", ULIST_LABEL_FIELDS)]
        if user is not None:
            params.append(("user", user))
            headers = self._auth_headers(self._token)
        else:
            headers = self._auth_headers(self._require_token("ulist_labels"))
        data = await self._request("GET", Endpoint.ULIST_LABELS, params=params, headers=headers)
        return parse_reply(UlistLabels, data)

    # -------------------
    # POST endpoints
    # -------------------
    async def post_request(self, endpoint: str, query: Optional[Query] = None, require_token: bool = False) -> QueryResponse:
        """Send a query to a POST endpoint.

        Args:
            endpoint: Category name ("vn", "release", ...), path or full URL
            query: Built `QueryFormat` or a payload dict; defaults to an empty query
            require_token: Fail with `CredentialAbsentError` when no token is set
        """
        if require_token:
            token = self._require_token(endpoint)
        else:
            token = self._token
        endpoint = POST_ENDPOINTS.get(endpoint, endpoint)
        if query is None:
            query = QueryFormat()
        payload = query.to_payload() if isinstance(query, QueryFormat) else dict(query)
        data = await self._request("POST", endpoint, json=payload, headers=self._auth_headers(token))
        return QueryResponse.from_json(data)

    async def vn(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.VN, query)

    async def release(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.RELEASE, query)

    async def producer(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.PRODUCER, query)

    async def character(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.CHARACTER, query)

    async def staff(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.STAFF, query)

    async def tag(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.TAG, query)

    async def trait(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.TRAIT, query)

    async def ulist(self, query: Optional[Query] = None) -> QueryResponse:
        return await self.post_request(Endpoint.ULIST, query)
