import httpx
from contextlib import asynccontextmanager
from fastapi import Depends, Request

from .config import get_settings
from .email_generator import EmailGenerator
from .gemini_client import GeminiClient
from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser


@asynccontextmanager
async def lifespan(app):
    settings = get_settings()
    if settings.gemini_timeout is not None:
        http_client = httpx.AsyncClient(timeout=settings.gemini_timeout)
    else:
        http_client = httpx.AsyncClient()
    try:
        # fails fast when GEMINI_API_URL / GEMINI_API_KEY are unset
        app.state.gemini_client = GeminiClient(
            settings.gemini_api_url, settings.gemini_api_key, http_client
        )
        yield
    finally:
        await http_client.aclose()

async def gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini_client     # already set in lifespan()

def prompt_builder() -> PromptBuilder:
    return PromptBuilder()

def response_parser() -> ResponseParser:
    return ResponseParser()

def email_generator(
    client: GeminiClient = Depends(gemini_client),
    builder: PromptBuilder = Depends(prompt_builder),
    parser: ResponseParser = Depends(response_parser),
) -> EmailGenerator:
    return EmailGenerator(client, builder, parser)
