from typing import Optional

from .base import BaseGolfModel
from .hole_score import WorstHole
from .round import ReducedRound


class WorstHoleHighlight(BaseGolfModel):
    """The worst hole across all considered rounds, with where it happened."""
    hole: WorstHole
    course_name: Optional[str] = None
    played_on: Optional[str] = None


class Highlights(BaseGolfModel):
    """Roastable facts pulled out of a golfer's recent rounds. Every field is optional."""
    worst_round: Optional[ReducedRound] = None
    best_round: Optional[ReducedRound] = None
    worst_hole: Optional[WorstHoleHighlight] = None
    trending_up: bool = False
    recent_average_differential: Optional[float] = None
    rounds_considered: int = 0

    def is_empty(self) -> bool:
        return (
            self.worst_round is None
            and self.best_round is None
            and self.worst_hole is None
            and not self.trending_up
        )
