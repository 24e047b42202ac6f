from .client import LoginResult, RegistryClient, registry_id_of
from .exceptions import AuthError, GolferNotFound, RegistryError, UpstreamUnavailable
from .strategies import (
    DEFAULT_SCORE_ENDPOINTS,
    GolferScoresEndpoint,
    ScoreFetchStrategy,
    ScoresSearchEndpoint,
)
from .token_cache import ServiceTokenCache

__all__ = [
    "LoginResult",
    "RegistryClient",
    "registry_id_of",
    "AuthError",
    "GolferNotFound",
    "RegistryError",
    "UpstreamUnavailable",
    "DEFAULT_SCORE_ENDPOINTS",
    "GolferScoresEndpoint",
    "ScoreFetchStrategy",
    "ScoresSearchEndpoint",
    "ServiceTokenCache",
]
