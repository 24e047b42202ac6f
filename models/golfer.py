from pydantic import ConfigDict, Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel, to_display, to_flag
from .round import ReducedRound

FALLBACK_FIRST_NAME = "this golfer"


class GolferProfile(BaseGolfModel):
    """Identity snapshot of a golfer plus their reduced recent scores."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    player_name: Optional[str] = None
    display: Optional[str] = None
    low_hi_display: Optional[str] = None
    club_name: Optional[str] = None
    soft_cap: bool = False
    hard_cap: bool = False
    ghin: Optional[str] = None
    recent_scores: List[ReducedRound] = Field(default_factory=list)
    lookup_mode: bool = False

    @field_validator("player_name", "display", "low_hi_display", "club_name", "ghin", mode="before")
    @classmethod
    def coerce_display(cls, v):
        return to_display(v)

    @field_validator("soft_cap", "hard_cap", "lookup_mode", mode="before")
    @classmethod
    def coerce_flag(cls, v):
        return to_flag(v)

    @field_validator("recent_scores", mode="before")
    @classmethod
    def coerce_scores(cls, v):
        if not isinstance(v, list):
            return []
        return [s for s in v if isinstance(s, (dict, ReducedRound))]

    @property
    def first_name(self) -> str:
        parts = (self.player_name or "").split()
        return parts[0] if parts else FALLBACK_FIRST_NAME
