from pydantic import Field, field_validator
from typing import Optional

from .base import BaseGolfModel, to_int


class HoleDetail(BaseGolfModel):
    """One hole from a registry round's hole-by-hole detail."""
    hole_number: Optional[int] = None
    par: Optional[int] = None
    raw_score: Optional[int] = None
    adjusted_gross_score: Optional[int] = None

    @field_validator("hole_number", "par", "raw_score", "adjusted_gross_score", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return to_int(v)

    @property
    def score(self) -> Optional[int]:
        """Strokes taken: raw score when posted, otherwise the adjusted score."""
        if self.raw_score is not None:
            return self.raw_score
        return self.adjusted_gross_score

    def to_par(self) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if self.score is None or self.par is None:
            return None
        return self.score - self.par


class WorstHole(BaseGolfModel):
    """The single hole in a round with the most strokes over par."""
    hole_number: Optional[int] = None
    score: int
    par: int
    over: int = Field(..., gt=0)

    def get_score_type(self) -> str:
        """Get the name for this score (bogey, double bogey, etc.)."""
        score_names = {
            1: "bogey",
            2: "double bogey",
            3: "triple bogey",
            4: "quadruple bogey",
        }
        if self.over >= 5:
            return "snowman" if self.score == 8 else f"+{self.over} disaster"
        return score_names[self.over]
