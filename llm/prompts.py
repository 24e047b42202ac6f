import random
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple

from pydantic import BaseModel


class Intensity(str, Enum):
    """How hard the roast hits."""
    LIGHT = "light"    # Playful ribbing, no profanity
    SAVAGE = "savage"  # No mercy, profanity allowed


class IndexSource(Protocol):
    """Anything with random.Random's randrange; tests inject a scripted one."""

    def randrange(self, stop: int) -> int:
        ...


# ================================================================
# Option catalogs
# ================================================================

VOICES: Tuple[str, ...] = (
    "a washed-up tour pro who now gives lessons at a driving range next to a Costco",
    "a grizzled Scottish caddie who has carried bags since 1971 and hates everyone",
    "a golf broadcaster whispering like it's the 18th at Augusta",
    "a country club bartender who has heard every excuse twice",
    "a disappointed father watching his kid's recital",
    "a nature documentary narrator observing a rare, struggling species",
    "a drill sergeant on day one of basic training",
    "a sports-radio caller who has been on hold for three hours",
    "a passive-aggressive HOA president writing a violation notice",
    "a sommelier describing a wine that has gone badly off",
    "a true-crime podcast host describing a scene nobody should have witnessed",
    "a motivational speaker who has completely given up",
)

ANGLES: Tuple[str, ...] = (
    "the gap between their handicap and their delusions",
    "their worst round and what it says about them as a person",
    "the single worst hole on their record",
    "how much money they have poured into equipment that hasn't helped",
    "their home club and the people who have to play with them",
    "how their game is trending and where it is headed",
    "their best round as a fluke that will never happen again",
    "the time they could have spent with family instead",
    "their low handicap as a glory-days story nobody asked to hear",
    "what their playing partners say about them in the parking lot",
)

FORMATS: Tuple[str, ...] = (
    "a eulogy for their golf game",
    "a scouting report from a tour that would never sign them",
    "a breaking news bulletin",
    "a Yelp review of their round",
    "a weather forecast",
    "a police incident report",
    "a dating-app profile written by their golf bag",
    "an apology letter from golf itself",
    "a sports-betting line and odds",
    "a one-star product review",
)

# Empty entries make "no wildcard" the most likely single outcome.
WILDCARDS: Tuple[str, ...] = (
    "a reference to their range finder being the only accurate thing about them",
    "a comparison to a specific cartoon character",
    "a fake statistic that sounds real",
    "a callback to the snack bar",
    "a mention of their cart-path-only etiquette",
    "an unnecessary reference to their golf glove tan line",
    "a suggestion for a new hobby",
    "a nod to their pre-shot routine taking longer than the shot",
    "",
    "",
    "",
)

TEMPERATURES = {
    Intensity.LIGHT: 0.9,
    Intensity.SAVAGE: 1.1,
}


# ================================================================
# Shared prompt fragments
# ================================================================

_TONE = {
    Intensity.LIGHT: (
        "Keep it playful: tease hard, but it should feel like ribbing from a friend "
        "at the 19th hole. No profanity."
    ),
    Intensity.SAVAGE: (
        "Be BRUTAL. Absolutely destroy them. Profanity is allowed and encouraged "
        "(shit, damn, hell, ass), but every line must still land as a joke."
    ),
}

_LENGTH_RULES = """
RULES:
- 2-3 sentences MAX. Every sentence should sting.
- No warmup, no filler, no hashtags, no emojis.
- Use at least one specific number from the stats.
- Output only the roast itself."""


_HANDICAP_TIERS = """ROAST BY HANDICAP:
- Scratch or better: tryhard who blew their life on golf and STILL isn't on tour
- 1-9: good enough to know how bad they actually are
- 10-15: mediocre, probably blames equipment
- 16-20: delusional weekend hacker
- 21-30: embarrassing, why even keep score
- 30+: absolutely hopeless, golf owes them an apology
- Soft/hard cap: their game is in free fall and everyone notices"""


class PromptSelection(BaseModel):
    """One draw from each catalog. Fully determines the prompt text."""
    voice: str
    angle: str
    format: str
    wildcard: str = ""
    intensity: Intensity = Intensity.SAVAGE


class RoastPrompt(BaseModel):
    system: str
    user: str
    temperature: float
    selection: PromptSelection


def build_system_prompt(selection: PromptSelection) -> str:
    """System instruction: who is talking and how hard they hit."""
    return (
        f"You are {selection.voice}, roasting a golfer based on their handicap stats.\n"
        + _TONE[selection.intensity]
        + _LENGTH_RULES
    )


def build_user_prompt(context: str, selection: PromptSelection) -> str:
    """User instruction: the stats, the handicap tier guide, then the sampled focus,
    delivery style and wildcard."""
    lines = [
        "Roast this golfer.",
        "",
        "STATS:",
        context or "(no stats available)",
        "",
        _HANDICAP_TIERS,
        "",
        f"FOCUS: {selection.angle}",
        f"DELIVERY STYLE: {selection.format}",
    ]
    if selection.wildcard:
        lines.append(f"INCLUDE: {selection.wildcard}")
    return "\n".join(lines)


class RoastPromptBuilder:
    """Assembles roast prompts from independently sampled catalog entries.

    Each call draws a fresh voice, angle, format and wildcard, so back-to-back
    roasts of the same golfer read differently. Draws are with replacement;
    repeats across calls are expected.
    """

    def __init__(
        self,
        rng: Optional[IndexSource] = None,
        *,
        voices: Sequence[str] = VOICES,
        angles: Sequence[str] = ANGLES,
        formats: Sequence[str] = FORMATS,
        wildcards: Sequence[str] = WILDCARDS,
    ):
        self._rng = rng or random.Random()
        self.voices = tuple(voices)
        self.angles = tuple(angles)
        self.formats = tuple(formats)
        self.wildcards = tuple(wildcards)

    def _pick(self, catalog: Tuple[str, ...]) -> str:
        return catalog[self._rng.randrange(len(catalog))]

    def select(self, intensity: Intensity = Intensity.SAVAGE) -> PromptSelection:
        return PromptSelection(
            voice=self._pick(self.voices),
            angle=self._pick(self.angles),
            format=self._pick(self.formats),
            wildcard=self._pick(self.wildcards),
            intensity=intensity,
        )

    def compose(self, context: str, intensity: Intensity = Intensity.SAVAGE) -> RoastPrompt:
        intensity = Intensity(intensity)
        selection = self.select(intensity)
        return RoastPrompt(
            system=build_system_prompt(selection),
            user=build_user_prompt(context, selection),
            temperature=TEMPERATURES[intensity],
            selection=selection,
        )
