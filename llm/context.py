"""Render a golfer and their highlights into the text block the roast prompt embeds."""

from typing import List, Optional

from models import GolferProfile, Highlights, ReducedRound

FALLBACK_HANDICAP = "unknown"
FALLBACK_CLUB = "some random club"


def _format_number(value: Optional[float]) -> str:
    if value is None:
        return "?"
    return f"{value:g}"


def _describe_round(round_obj: ReducedRound) -> str:
    parts = [str(round_obj.adjusted_gross_score)]
    if round_obj.course_name:
        parts.append(f"at {round_obj.course_name}")
    if round_obj.differential is not None:
        parts.append(f"(differential {_format_number(round_obj.differential)})")
    if round_obj.played_on:
        parts.append(f"on {round_obj.played_on}")
    return " ".join(parts)


def _describe_worst_hole(highlights: Highlights) -> str:
    worst = highlights.worst_hole
    hole = worst.hole
    where = f"hole {hole.hole_number}" if hole.hole_number is not None else "one hole"
    line = f"made a {hole.score} on a par {hole.par} ({where}, +{hole.over}, a {hole.get_score_type()})"
    if worst.course_name:
        line += f" at {worst.course_name}"
    return line


def _describe_trend(profile: GolferProfile, highlights: Highlights) -> str:
    return (
        f"last {highlights.rounds_considered} rounds averaging a "
        f"{_format_number(highlights.recent_average_differential)} differential, "
        f"way above their {profile.display or FALLBACK_HANDICAP} index (getting worse)"
    )


def build_context(profile: GolferProfile, highlights: Highlights) -> str:
    """Build the golfer context block. Pure: same input, same text."""
    lines: List[str] = [
        f"Golfer: {profile.first_name}",
        f"Handicap: {profile.display or FALLBACK_HANDICAP}",
        f"Low HI: {profile.low_hi_display or FALLBACK_HANDICAP}",
        f"Club: {profile.club_name or FALLBACK_CLUB}",
    ]

    if profile.soft_cap:
        lines.append("SOFT CAP active (handicap rising fast)")
    if profile.hard_cap:
        lines.append("HARD CAP hit (total meltdown)")
    if highlights.worst_round is not None:
        lines.append(f"Worst recent round: {_describe_round(highlights.worst_round)}")
    if highlights.best_round is not None:
        lines.append(f"Best recent round: {_describe_round(highlights.best_round)}")
    if highlights.worst_hole is not None:
        lines.append(f"Worst hole: {_describe_worst_hole(highlights)}")
    if highlights.trending_up:
        lines.append(f"Trend: {_describe_trend(profile, highlights)}")

    return "\n".join(lines)
