import logging
import os
from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)


# --- Configuration ---

GEMINI_MODEL = "gemini-2.5-flash"
MAX_OUTPUT_TOKENS = 400


class GenerationError(Exception):
    """The text-generation call failed or came back without text."""


class GenerationNotConfigured(GenerationError):
    """No API key is available for the text-generation API."""


class GenerationClient:
    """Thin wrapper around the Gemini text-generation API.

    The underlying SDK call is synchronous; callers on the event loop should
    run `generate` in an executor.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = GEMINI_MODEL,
        client: Optional[genai.Client] = None,
    ):
        self.api_key = api_key if api_key is not None else os.environ.get("GOOGLE_API_KEY")
        self.model = model
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise GenerationNotConfigured(
                    "GOOGLE_API_KEY environment variable is not set. "
                    "Get an API key at https://aistudio.google.com/apikey"
                )
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, system: str, user: str, temperature: float) -> str:
        """Send the system/user instructions and return the generated text."""
        client = self._get_client()
        try:
            response = client.models.generate_content(
                model=self.model,
                contents=user,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    temperature=temperature,
                    max_output_tokens=MAX_OUTPUT_TOKENS,
                ),
            )
        except errors.APIError as e:
            logger.error("Gemini API error %s: %s", e.code, e.message)
            raise GenerationError(f"Generation API returned {e.code}") from e
        except httpx.HTTPError as e:
            logger.error("Gemini transport error: %s", e)
            raise GenerationError("Generation API unreachable") from e

        text = (response.text or "").strip()
        if not text:
            raise GenerationError("Generation API returned no text")
        return text
