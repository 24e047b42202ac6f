"""Registry login and public golfer lookup endpoints."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from analytics.reducer import reduce_rounds
from api.dependencies import get_registry
from api.errors import InvalidQuery
from api.schemas import GolferSummary, LoginRequest, LookupRequest, LookupResultsResponse
from registry.client import RegistryClient, registry_id_of
from registry.exceptions import GolferNotFound

logger = logging.getLogger(__name__)

router = APIRouter()

MIN_QUERY_LENGTH = 2


def normalize_golfer(golfer: Dict[str, Any]) -> Dict[str, Any]:
    """Fill player_name/display on search-shaped records (first_name, last_name, handicap_index)."""
    normalized = dict(golfer)
    if not normalized.get("player_name"):
        normalized["player_name"] = " ".join(
            str(part) for part in (golfer.get("first_name"), golfer.get("last_name")) if part
        ) or None
    if normalized.get("display") is None and golfer.get("handicap_index") is not None:
        normalized["display"] = str(golfer["handicap_index"])
    if normalized.get("low_hi_display") is None and golfer.get("low_hi") is not None:
        normalized["low_hi_display"] = str(golfer["low_hi"])
    return normalized


def _with_recent_scores(golfer: Dict[str, Any], raw_scores: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge reduced scores onto the normalized golfer record."""
    merged = normalize_golfer(golfer)
    merged["recent_scores"] = [r.model_dump(mode="json") for r in reduce_rounds(raw_scores)]
    return merged


def summarize_golfer(golfer: Dict[str, Any]) -> GolferSummary:
    """Project a registry search hit into a lightweight candidate."""
    golfer = normalize_golfer(golfer)
    display = golfer.get("display")
    return GolferSummary(
        ghin=registry_id_of(golfer),
        player_name=golfer.get("player_name"),
        club_name=golfer.get("club_name"),
        display=str(display) if display is not None else None,
        state=golfer.get("state"),
    )


def split_name(query: str) -> tuple:
    """Split a name query into (first_name, last_name); a single word is a last name."""
    parts = query.split()
    if len(parts) == 1:
        return None, parts[0]
    return parts[0], parts[-1]


@router.post("/ghin")
async def login(req: LoginRequest, registry: RegistryClient = Depends(get_registry)):
    """Log a golfer in and return their profile with reduced recent scores."""
    result = await registry.login(req.email_or_ghin, req.password)
    scores = await registry.fetch_scores(result.registry_id, result.token)
    logger.info("Golfer %s logged in with %d scores", result.registry_id, len(scores))
    return _with_recent_scores(result.profile, scores)


@router.post("/lookup")
async def lookup(req: LookupRequest, registry: RegistryClient = Depends(get_registry)):
    """Find golfers by name, or load one golfer's profile by GHIN number."""
    if len(req.query) < MIN_QUERY_LENGTH:
        raise InvalidQuery(f"Query must be at least {MIN_QUERY_LENGTH} characters")

    token = await registry.service_token()

    if req.query.isdigit():
        golfer: Optional[Dict[str, Any]] = await registry.get_golfer(req.query, token)
        if golfer is None:
            raise GolferNotFound(f"No golfer found with GHIN {req.query}")
        scores = await registry.fetch_scores(registry_id_of(golfer) or req.query, token)
        profile = _with_recent_scores(golfer, scores)
        profile["lookup_mode"] = True
        return profile

    first_name, last_name = split_name(req.query)
    golfers = await registry.search_golfers(last_name, token, first_name=first_name)
    if not golfers:
        raise GolferNotFound(f"No golfers found matching '{req.query}'")
    return LookupResultsResponse(results=[summarize_golfer(g) for g in golfers])
