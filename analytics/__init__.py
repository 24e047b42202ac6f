from .reducer import MAX_RECENT_SCORES, find_worst_hole, reduce_round, reduce_rounds
from .stats import (
    DIFFERENTIAL_HIGHLIGHTS,
    SCORE_HIGHLIGHTS,
    HighlightSettings,
    WorstRoundMetric,
    extract_highlights,
)

__all__ = [
    "MAX_RECENT_SCORES",
    "find_worst_hole",
    "reduce_round",
    "reduce_rounds",
    "DIFFERENTIAL_HIGHLIGHTS",
    "SCORE_HIGHLIGHTS",
    "HighlightSettings",
    "WorstRoundMetric",
    "extract_highlights",
]
