from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from models.base import to_float
from models.highlights import Highlights, WorstHoleHighlight
from models.round import ReducedRound

MIN_WORST_HOLE_OVER = 3
TREND_MARGIN = 2.0


class WorstRoundMetric(str, Enum):
    """Which number decides the "worst" recent round."""
    SCORE = "score"                # Highest adjusted gross score
    DIFFERENTIAL = "differential"  # Highest score differential


class HighlightSettings(BaseModel):
    """How many rounds to look at and how to rank them."""
    model_config = ConfigDict(frozen=True)

    window: int = Field(10, ge=1)
    holes: Union[Literal[18], Literal["any"]] = 18
    worst_round_metric: WorstRoundMetric = WorstRoundMetric.SCORE


# Roasting a logged-in golfer: last 10 full rounds, worst by raw score.
SCORE_HIGHLIGHTS = HighlightSettings(window=10, holes=18, worst_round_metric=WorstRoundMetric.SCORE)
# Roasting a looked-up golfer: last 6 rounds of any length, worst by differential.
DIFFERENTIAL_HIGHLIGHTS = HighlightSettings(
    window=6, holes="any", worst_round_metric=WorstRoundMetric.DIFFERENTIAL,
)


def parse_handicap(display: Optional[str]) -> float:
    """Numeric handicap for comparisons. Non-numeric displays ("unknown", "NH") count as 0.

    A plus handicap keeps its magnitude: "+5.4" parses as 5.4, not -5.4, so a plus
    golfer is compared as if they were a 5.4.
    """
    value = to_float(display)
    return value if value is not None else 0.0


def _score(round_obj: ReducedRound) -> float:
    return float(round_obj.adjusted_gross_score or 0)


def _metric(round_obj: ReducedRound, metric: WorstRoundMetric) -> float:
    if metric == WorstRoundMetric.DIFFERENTIAL:
        return round_obj.differential if round_obj.differential is not None else 0.0
    return _score(round_obj)


def select_rounds(rounds: Sequence[ReducedRound], settings: HighlightSettings) -> List[ReducedRound]:
    """Filter by hole count (if asked) and keep the most recent `window` rounds."""
    if settings.holes == 18:
        rounds = [r for r in rounds if r.is_eighteen_holes()]
    return list(rounds[:settings.window])


def _scored_rounds(rounds: Sequence[ReducedRound]) -> List[ReducedRound]:
    return [r for r in rounds if _score(r) > 0]


def worst_round(
    rounds: Sequence[ReducedRound],
    metric: WorstRoundMetric = WorstRoundMetric.SCORE,
) -> Optional[ReducedRound]:
    """Round with the highest metric; first one wins a tie."""
    worst: Optional[ReducedRound] = None
    for round_obj in _scored_rounds(rounds):
        if worst is None or _metric(round_obj, metric) > _metric(worst, metric):
            worst = round_obj
    return worst


def best_round(rounds: Sequence[ReducedRound]) -> Optional[ReducedRound]:
    """Round with the lowest positive score; first one wins a tie."""
    best: Optional[ReducedRound] = None
    for round_obj in _scored_rounds(rounds):
        if best is None or _score(round_obj) < _score(best):
            best = round_obj
    return best


def worst_hole_ever(
    rounds: Sequence[ReducedRound],
    minimum_over: int = MIN_WORST_HOLE_OVER,
) -> Optional[WorstHoleHighlight]:
    """The ugliest hole across rounds. Anything under `minimum_over` doesn't qualify."""
    worst: Optional[WorstHoleHighlight] = None
    for round_obj in rounds:
        hole = round_obj.worst_hole
        if hole is None or hole.over < minimum_over:
            continue
        if worst is None or hole.over > worst.hole.over:
            worst = WorstHoleHighlight(
                hole=hole,
                course_name=round_obj.course_name,
                played_on=round_obj.played_on,
            )
    return worst


def average_differential(rounds: Sequence[ReducedRound]) -> Optional[float]:
    """Mean differential over the rounds that have one."""
    values = [r.differential for r in rounds if r.differential is not None]
    if not values:
        return None
    return sum(values) / len(values)


def is_trending_up(
    rounds: Sequence[ReducedRound],
    current_handicap: Optional[str],
    margin: float = TREND_MARGIN,
) -> bool:
    """True when recent differentials run well above the current index.

    A non-numeric handicap is compared as 0, which flags almost any golfer
    with differentials on file as trending up.
    """
    average = average_differential(rounds)
    if average is None:
        return False
    return average > parse_handicap(current_handicap) + margin


def extract_highlights(
    rounds: Sequence[ReducedRound],
    current_handicap: Optional[str],
    settings: HighlightSettings = SCORE_HIGHLIGHTS,
) -> Highlights:
    """Compute worst/best round, worst hole and trend for the roast context."""
    considered = select_rounds(rounds, settings)
    if not considered:
        return Highlights()

    average = average_differential(considered)
    return Highlights(
        worst_round=worst_round(considered, settings.worst_round_metric),
        best_round=best_round(considered),
        worst_hole=worst_hole_ever(considered),
        trending_up=is_trending_up(considered, current_handicap),
        recent_average_differential=round(average, 1) if average is not None else None,
        rounds_considered=len(considered),
    )
