from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Union

from models.hole_score import HoleDetail, WorstHole
from models.round import RawRound, ReducedRound

MAX_RECENT_SCORES = 20

RawRoundInput = Union[RawRound, Mapping[str, Any]]


def find_worst_hole(hole_details: Iterable[HoleDetail]) -> Optional[WorstHole]:
    """Return the hole with the most strokes over par, or None if nothing went over.

    Ties keep the first hole encountered. Holes missing a score or par are skipped.
    """
    worst: Optional[WorstHole] = None
    for hole in hole_details:
        over = hole.to_par()
        if over is None or over <= 0:
            continue
        if worst is None or over > worst.over:
            worst = WorstHole(
                hole_number=hole.hole_number,
                score=hole.score,
                par=hole.par,
                over=over,
            )
    return worst


def reduce_round(raw: RawRoundInput) -> ReducedRound:
    """Trim one registry round down to its roastable fields."""
    if not isinstance(raw, RawRound):
        raw = RawRound.model_validate(raw)

    return ReducedRound(
        course_name=raw.resolved_course_name(),
        adjusted_gross_score=raw.adjusted_gross_score,
        differential=raw.differential,
        played_at=raw.played_at,
        number_of_holes=raw.number_of_holes,
        worst_hole=find_worst_hole(raw.hole_details),
    )


def reduce_rounds(
    raw_rounds: Iterable[RawRoundInput],
    limit: int = MAX_RECENT_SCORES,
) -> List[ReducedRound]:
    """Reduce the first `limit` rounds, keeping the registry's order."""
    reduced: List[ReducedRound] = []
    for raw in raw_rounds:
        if len(reduced) >= limit:
            break
        reduced.append(reduce_round(raw))
    return reduced
