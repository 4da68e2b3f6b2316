# vendor_ai/core/lifespan.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from openai import AsyncOpenAI

from vendor_ai.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_llm_client(settings: Settings) -> AsyncOpenAI:
    """
    Build the process-wide Groq client (OpenAI-compatible API).
    max_retries=0: a failed call fails the batch, the SDK must not retry behind our back.
    """
    kwargs = {
        "api_key": settings.GROQ_API_KEY,
        "base_url": settings.GROQ_BASE_URL,
        "max_retries": 0,
    }
    if settings.GROQ_TIMEOUT_S is not None:
        kwargs["timeout"] = settings.GROQ_TIMEOUT_S
    return AsyncOpenAI(**kwargs)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    if not settings.GROQ_API_KEY:
        logger.warning("⚠️ GROQ_API_KEY is empty, every model call will be rejected")
    app.state.llm_client = create_llm_client(settings)
    logger.info(f"✅ LLM client ready model={settings.GROQ_MODEL} base_url={settings.GROQ_BASE_URL}")

    # Application runs
    yield

    # --- Shutdown ---
    await app.state.llm_client.close()
    app.state.llm_client = None
    logger.info("🔌 LLM client closed")
