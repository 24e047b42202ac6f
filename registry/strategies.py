from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple


class ScoreFetchStrategy(Protocol):
    """One known shape of the registry's score endpoint.

    Any class with matching attributes satisfies this protocol.
    """

    name: str

    def request(self, registry_id: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        """Return (path, query params) for this endpoint shape."""
        ...

    def extract(self, payload: Any) -> List[Dict[str, Any]]:
        """Pull the list of score records out of the response body."""
        ...


def _scores_from(payload: Any, keys: Tuple[str, ...]) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return [s for s in payload if isinstance(s, dict)]
    if not isinstance(payload, dict):
        return []
    for key in keys:
        scores = payload.get(key)
        if isinstance(scores, list):
            return [s for s in scores if isinstance(s, dict)]
    return []


@dataclass(frozen=True)
class ScoresSearchEndpoint:
    """GET scores.json?golfer_id=... (the endpoint the GHIN web app uses)."""
    name: str = "scores_search"
    statuses: str = "Validated"
    source: str = "GHINcom"
    keys: Tuple[str, ...] = field(default=("scores", "Scores"))

    def request(self, registry_id: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        return "scores.json", {
            "golfer_id": registry_id,
            "offset": 0,
            "limit": limit,
            "statuses": self.statuses,
            "source": self.source,
        }

    def extract(self, payload: Any) -> List[Dict[str, Any]]:
        return _scores_from(payload, self.keys)


@dataclass(frozen=True)
class GolferScoresEndpoint:
    """GET golfers/{id}/scores.json (older per-golfer endpoint)."""
    name: str = "golfer_scores"
    keys: Tuple[str, ...] = field(default=("scores", "Scores", "revision_scores"))

    def request(self, registry_id: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        return f"golfers/{registry_id}/scores.json", {"offset": 0, "limit": limit}

    def extract(self, payload: Any) -> List[Dict[str, Any]]:
        if isinstance(payload, dict) and isinstance(payload.get("revision_scores"), dict):
            payload = payload["revision_scores"]
        return _scores_from(payload, self.keys)


# Tried in order; first successful, non-empty result wins.
DEFAULT_SCORE_ENDPOINTS: Tuple[ScoreFetchStrategy, ...] = (
    ScoresSearchEndpoint(),
    GolferScoresEndpoint(),
)
