from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel, to_display, to_float, to_int
from .hole_score import HoleDetail, WorstHole


class RawRound(BaseGolfModel):
    """A posted round exactly as the registry returns it (minus unknown fields)."""
    course_name: Optional[str] = None
    facility_name: Optional[str] = None
    adjusted_gross_score: Optional[int] = None
    differential: Optional[float] = None
    played_at: Optional[str] = None
    tee_name: Optional[str] = None
    course_rating: Optional[float] = None
    slope_rating: Optional[float] = None
    number_of_holes: Optional[int] = None
    hole_details: List[HoleDetail] = Field(default_factory=list)

    @field_validator("course_name", "facility_name", "played_at", "tee_name", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return to_display(v)

    @field_validator("adjusted_gross_score", "number_of_holes", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return to_int(v)

    @field_validator("differential", "course_rating", "slope_rating", mode="before")
    @classmethod
    def coerce_float(cls, v):
        return to_float(v)

    @field_validator("hole_details", mode="before")
    @classmethod
    def coerce_hole_details(cls, v):
        if not isinstance(v, list):
            return []
        return [h for h in v if isinstance(h, (dict, HoleDetail))]

    def resolved_course_name(self) -> Optional[str]:
        """The registry names the course under either of two fields."""
        return self.course_name or self.facility_name


class ReducedRound(BaseGolfModel):
    """Round trimmed to the fields worth roasting. Never carries hole detail."""
    course_name: Optional[str] = None
    adjusted_gross_score: Optional[int] = None
    differential: Optional[float] = None
    played_at: Optional[str] = None
    number_of_holes: Optional[int] = None
    worst_hole: Optional[WorstHole] = None

    @field_validator("course_name", "played_at", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return to_display(v)

    @field_validator("adjusted_gross_score", "number_of_holes", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return to_int(v)

    @field_validator("differential", mode="before")
    @classmethod
    def coerce_float(cls, v):
        return to_float(v)

    @field_validator("worst_hole", mode="before")
    @classmethod
    def drop_invalid_worst_hole(cls, v):
        if not isinstance(v, dict):
            return v if isinstance(v, WorstHole) else None
        if to_int(v.get("score")) is None or to_int(v.get("par")) is None:
            return None
        if (to_int(v.get("over")) or 0) <= 0:
            return None
        return {
            "hole_number": to_int(v.get("hole_number")),
            "score": to_int(v.get("score")),
            "par": to_int(v.get("par")),
            "over": to_int(v.get("over")),
        }

    @property
    def played_on(self) -> Optional[str]:
        """Date portion of played_at (the registry sends full timestamps)."""
        return self.played_at[:10] if self.played_at else None

    def is_eighteen_holes(self) -> bool:
        # Registry omits number_of_holes on some older 18-hole postings.
        return self.number_of_holes in (None, 18)
