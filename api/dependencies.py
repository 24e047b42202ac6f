from fastapi import Request

from llm.generation import GenerationClient
from llm.prompts import RoastPromptBuilder
from registry.client import RegistryClient


def get_registry(request: Request) -> RegistryClient:
    """FastAPI dependency that provides the RegistryClient."""
    return request.app.state.registry


def get_generator(request: Request) -> GenerationClient:
    """FastAPI dependency that provides the GenerationClient."""
    return request.app.state.generator


def get_prompt_builder(request: Request) -> RoastPromptBuilder:
    """FastAPI dependency that provides the RoastPromptBuilder."""
    return request.app.state.prompt_builder
