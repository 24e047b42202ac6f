from .context import build_context
from .generation import GenerationClient, GenerationError, GenerationNotConfigured
from .prompts import (
    Intensity,
    PromptSelection,
    RoastPrompt,
    RoastPromptBuilder,
)

__all__ = [
    "build_context",
    "GenerationClient",
    "GenerationError",
    "GenerationNotConfigured",
    "Intensity",
    "PromptSelection",
    "RoastPrompt",
    "RoastPromptBuilder",
]
