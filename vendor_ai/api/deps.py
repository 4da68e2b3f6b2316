# vendor_ai/api/deps.py
from fastapi import Depends, Request
from openai import AsyncOpenAI
from vendor_ai.core.config import Settings, get_settings
from vendor_ai.domain.services.suggestion_svc import SuggestionProcessor

# Dependency for the shared LLM client created in the lifespan
def llm_client_dep(request: Request) -> AsyncOpenAI:
    client = getattr(request.app.state, "llm_client", None)
    assert client is not None, "LLM client not initialized"
    return client

# Dependency for a per-request batch processor bound to the shared client
def suggestion_processor_dep(
    client: AsyncOpenAI = Depends(llm_client_dep),
    settings: Settings = Depends(get_settings),
) -> SuggestionProcessor:
    return SuggestionProcessor(client, model=settings.GROQ_MODEL)
