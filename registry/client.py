"""Async client for the GHIN handicap registry."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx

from registry.exceptions import AuthError, UpstreamUnavailable
from registry.strategies import DEFAULT_SCORE_ENDPOINTS, ScoreFetchStrategy
from registry.token_cache import ServiceTokenCache

logger = logging.getLogger(__name__)


# --- Configuration ---

GHIN_BASE_URL = "https://api2.ghin.com/api/v1/"
GHIN_SOURCE_TOKEN = "roastmygolfgame"
SCORES_LIMIT = 20
SEARCH_LIMIT = 10


@dataclass(frozen=True)
class LoginResult:
    """A successful registry login."""
    profile: Dict[str, Any]
    token: str
    registry_id: Optional[str]


def registry_id_of(golfer: Dict[str, Any]) -> Optional[str]:
    """The registry names a golfer's id `ghin` or `ghin_number` depending on the endpoint."""
    if not isinstance(golfer, dict):
        return None
    for key in ("ghin", "ghin_number", "golfer_id", "id"):
        value = golfer.get(key)
        if value not in (None, ""):
            return str(value)
    return None


class RegistryClient:
    """Talks to the handicap registry on behalf of a golfer or the service account."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        base_url: str = GHIN_BASE_URL,
        service_user: Optional[str] = None,
        service_password: Optional[str] = None,
        token_cache: Optional[ServiceTokenCache] = None,
        score_endpoints: Sequence[ScoreFetchStrategy] = DEFAULT_SCORE_ENDPOINTS,
    ):
        self._http = http
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.service_user = service_user
        self.service_password = service_password
        self.token_cache = token_cache or ServiceTokenCache()
        self.score_endpoints = tuple(score_endpoints)

    def _url(self, path: str) -> str:
        return self.base_url + path

    @staticmethod
    def _auth_headers(token: str) -> Dict[str, str]:
        return {"Accept": "application/json", "Authorization": f"Bearer {token}"}

    # ================================================================
    # Login
    # ================================================================

    async def login(self, identifier: str, secret: str) -> LoginResult:
        """Log in with a golfer's email/GHIN number and password."""
        body = {
            "user": {
                "email_or_ghin": identifier,
                "password": secret,
                "remember_me": "true",
            },
            "token": GHIN_SOURCE_TOKEN,
        }
        try:
            response = await self._http.post(
                self._url("golfer_login.json"),
                json=body,
                headers={"Accept": "application/json"},
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("Registry login request failed")
            raise UpstreamUnavailable("Failed to connect to GHIN") from e

        golfer_user = data.get("golfer_user") if isinstance(data, dict) else None
        if not isinstance(golfer_user, dict):
            golfer_user = {}
        golfers = golfer_user.get("golfers")
        if not response.is_success or not isinstance(golfers, list) or not golfers:
            raise AuthError("Invalid credentials or no golfer found")

        token = golfer_user.get("golfer_user_token")
        if not token:
            raise AuthError("Registry login returned no token")

        profile = golfers[0]
        if not isinstance(profile, dict):
            raise AuthError("Registry login returned no golfer profile")
        return LoginResult(profile=profile, token=token, registry_id=registry_id_of(profile))

    async def service_token(self) -> str:
        """Token for the service account, logging in again once the cached one expires."""
        token = self.token_cache.get()
        if token:
            return token

        if not self.service_user or not self.service_password:
            raise UpstreamUnavailable("Lookup service is not configured")
        try:
            result = await self.login(self.service_user, self.service_password)
        except AuthError as e:
            logger.error("Service account login rejected by registry")
            raise UpstreamUnavailable("Lookup service unavailable") from e

        self.token_cache.set(result.token)
        logger.info("Refreshed registry service token")
        return result.token

    # ================================================================
    # Scores
    # ================================================================

    async def _fetch_with(
        self, endpoint: ScoreFetchStrategy, registry_id: str, token: str, limit: int,
    ) -> List[Dict[str, Any]]:
        path, params = endpoint.request(registry_id, limit)
        try:
            response = await self._http.get(
                self._url(path), params=params, headers=self._auth_headers(token),
            )
        except httpx.HTTPError as e:
            logger.warning("Score endpoint %s unreachable: %s", endpoint.name, e)
            return []
        if not response.is_success:
            logger.warning("Score endpoint %s returned %s", endpoint.name, response.status_code)
            return []
        try:
            return endpoint.extract(response.json())
        except ValueError:
            logger.warning("Score endpoint %s returned invalid JSON", endpoint.name)
            return []

    async def fetch_scores(
        self, registry_id: Optional[str], token: str, limit: int = SCORES_LIMIT,
    ) -> List[Dict[str, Any]]:
        """Recent scores for a golfer. Empty when no endpoint shape yields data."""
        if not registry_id:
            return []
        for endpoint in self.score_endpoints:
            scores = await self._fetch_with(endpoint, registry_id, token, limit)
            if scores:
                logger.debug("Fetched %d scores via %s", len(scores), endpoint.name)
                return scores
        logger.info("No scores found for golfer %s", registry_id)
        return []

    # ================================================================
    # Golfer search
    # ================================================================

    async def _search(self, params: Dict[str, Any], token: str) -> List[Dict[str, Any]]:
        try:
            response = await self._http.get(
                self._url("golfers/search.json"),
                params={"per_page": SEARCH_LIMIT, "page": 1, "status": "Active", **params},
                headers=self._auth_headers(token),
            )
        except httpx.HTTPError as e:
            logger.exception("Registry golfer search failed")
            raise UpstreamUnavailable("Lookup service unavailable") from e

        if response.status_code == 401:
            # Token revoked before our TTL ran out; refresh on the next request.
            self.token_cache.clear()
            raise UpstreamUnavailable("Lookup service unavailable")
        if response.status_code == 404:
            return []
        if not response.is_success:
            logger.error("Registry golfer search returned %s", response.status_code)
            raise UpstreamUnavailable("Lookup service unavailable")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailable("Lookup service returned invalid data") from e
        golfers = data.get("golfers") if isinstance(data, dict) else None
        return [g for g in (golfers or []) if isinstance(g, dict)]

    async def search_golfers(
        self,
        last_name: str,
        token: str,
        first_name: Optional[str] = None,
        limit: int = SEARCH_LIMIT,
    ) -> List[Dict[str, Any]]:
        """Golfers matching a name, at most `limit`."""
        params: Dict[str, Any] = {"last_name": last_name}
        if first_name:
            params["first_name"] = first_name
        golfers = await self._search(params, token)
        return golfers[:limit]

    async def get_golfer(self, registry_id: str, token: str) -> Optional[Dict[str, Any]]:
        """A single golfer by registry id, or None."""
        golfers = await self._search({"golfer_id": registry_id}, token)
        return golfers[0] if golfers else None
