"""API request and response models."""

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from llm.prompts import Intensity

_UNSAFE_CHARS = re.compile(r"[<>\x00-\x1f\x7f]")


def sanitize(value: str) -> str:
    """Strip whitespace, angle brackets and control characters."""
    return _UNSAFE_CHARS.sub("", value).strip()


class LoginRequest(BaseModel):
    email_or_ghin: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email_or_ghin")
    @classmethod
    def clean_identifier(cls, v: str) -> str:
        v = sanitize(v)
        if not v:
            raise ValueError("must not be empty")
        return v


class LookupRequest(BaseModel):
    query: str = Field(..., max_length=100)

    @field_validator("query")
    @classmethod
    def clean_query(cls, v: str) -> str:
        return " ".join(sanitize(v).split())


class RoastRequest(BaseModel):
    golferData: Dict[str, Any]
    intensity: Intensity = Intensity.SAVAGE


class RoastResponse(BaseModel):
    roast: str


class GolferSummary(BaseModel):
    """One candidate in a name search."""
    ghin: Optional[str] = None
    player_name: Optional[str] = None
    club_name: Optional[str] = None
    display: Optional[str] = None
    state: Optional[str] = None


class LookupResultsResponse(BaseModel):
    results: List[GolferSummary]
