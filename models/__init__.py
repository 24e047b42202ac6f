from .base import BaseGolfModel
from .golfer import GolferProfile
from .highlights import Highlights, WorstHoleHighlight
from .hole_score import HoleDetail, WorstHole
from .round import RawRound, ReducedRound

__all__ = [
    "BaseGolfModel",
    "GolferProfile",
    "Highlights",
    "HoleDetail",
    "RawRound",
    "ReducedRound",
    "WorstHole",
    "WorstHoleHighlight",
]
