"""Roast generation endpoint."""

import asyncio
import logging

from fastapi import APIRouter, Depends

from analytics.stats import DIFFERENTIAL_HIGHLIGHTS, SCORE_HIGHLIGHTS, extract_highlights
from api.dependencies import get_generator, get_prompt_builder
from api.schemas import RoastRequest, RoastResponse
from llm.context import build_context
from llm.generation import GenerationClient, GenerationNotConfigured
from llm.prompts import RoastPromptBuilder
from models import GolferProfile

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/roast", response_model=RoastResponse)
async def roast(
    req: RoastRequest,
    generator: GenerationClient = Depends(get_generator),
    builder: RoastPromptBuilder = Depends(get_prompt_builder),
):
    """Turn a golfer profile (from /ghin or /lookup) into a roast."""
    if not generator.is_configured:
        raise GenerationNotConfigured("GOOGLE_API_KEY is not set")

    profile = GolferProfile.model_validate(req.golferData)
    settings = DIFFERENTIAL_HIGHLIGHTS if profile.lookup_mode else SCORE_HIGHLIGHTS
    highlights = extract_highlights(profile.recent_scores, profile.display, settings)
    context = build_context(profile, highlights)
    prompt = builder.compose(context, req.intensity)
    logger.info(
        "Roasting %s (%s) as %r",
        profile.first_name, prompt.selection.intensity.value, prompt.selection.voice,
    )

    # SDK call is blocking; keep it off the event loop.
    loop = asyncio.get_running_loop()
    text = await loop.run_in_executor(
        None,
        lambda: generator.generate(prompt.system, prompt.user, prompt.temperature),
    )
    return RoastResponse(roast=text)
