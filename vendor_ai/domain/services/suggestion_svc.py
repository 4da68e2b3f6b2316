# vendor_ai/domain/services/suggestion_svc.py

from __future__ import annotations
from typing import Any, AsyncIterable, List, Mapping, Optional, Sequence, Union
import logging
from time import monotonic as _now

from openai import AsyncOpenAI

from vendor_ai.domain.models.product import ProductRecord, SuggestionResult
from vendor_ai.domain.services.constants import MAX_TOKENS, TEMPERATURE, TOP_P
from vendor_ai.domain.services.prompts import SYSTEM_PROMPT, build_prompt, utc_today

logger = logging.getLogger(__name__)

ProductInput = Union[ProductRecord, Mapping[str, Any]]

# =============================================================================
#                               ERRORS
# =============================================================================

class SuggestionProcessingError(Exception):
    """
    Raised when any product of a batch fails (bad record, network, provider, stream).
    The whole batch is lost: no partial results travel with it.
    """
    def __init__(self, index: int, product_name: Optional[str], cause: BaseException):
        self.index = index
        self.product_name = product_name
        self.cause = cause
        super().__init__(
            f"product #{index} ({product_name or '?'}) failed: {type(cause).__name__}: {cause}"
        )

# =============================================================================
#                               STREAM AGGREGATION
# =============================================================================

def _chunk_text(chunk: Any) -> str:
    """Text delta carried by one completion chunk, or "" when it carries none."""
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    if delta is None:
        return ""
    return getattr(delta, "content", None) or ""


async def collect_stream(stream: AsyncIterable[Any]) -> str:
    """Concatenate the text deltas of a streamed completion, in arrival order."""
    parts: List[str] = []
    async for chunk in stream:
        parts.append(_chunk_text(chunk))
    return "".join(parts)

# =============================================================================
#                               BATCH PROCESSOR
# =============================================================================

class SuggestionProcessor:
    """
    Turns a batch of products into one model suggestion each.

    Products are processed strictly one after the other, in input order.
    The LLM client is shared and read-only; one processor per request is fine.
    """
    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str,
        temperature: float = TEMPERATURE,
        top_p: float = TOP_P,
        max_tokens: int = MAX_TOKENS,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.max_tokens = max_tokens

    def _messages(self, prompt: str) -> List[dict]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    async def suggest(self, prompt: str) -> str:
        """Open one streaming completion for `prompt` and drain it into a single string."""
        stream = await self.client.chat.completions.create(
            model=self.model,
            messages=self._messages(prompt),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
            stream=True,
        )
        return await collect_stream(stream)

    async def process_batch(self, records: Sequence[ProductInput]) -> List[SuggestionResult]:
        """
        All-or-nothing: the first failing product aborts the batch with
        SuggestionProcessingError and the remaining products are never sent.
        """
        if not records:
            logger.info("Empty batch, nothing to send to the model.")
            return []

        today = utc_today()  # one date for the whole batch
        results: List[SuggestionResult] = []
        t_batch = _now()

        for i, raw in enumerate(records):
            name = raw.get("Product Name") if isinstance(raw, Mapping) else getattr(raw, "product_name", None)
            try:
                record = raw if isinstance(raw, ProductRecord) else ProductRecord.model_validate(raw)
                prompt = build_prompt(record, today=today)
                logger.debug(f"Prompt #{i} preview: {prompt[:300]}")

                t0 = _now()
                text = await self.suggest(prompt)
                logger.info(
                    f"Suggestion #{i} product={record.product_name!r} model={self.model} "
                    f"duration={_now() - t0:.3f}s chars={len(text)}"
                )
            except Exception as e:
                logger.error(f"Batch aborted at product #{i} ({name!r}): {e}")
                raise SuggestionProcessingError(i, name, e) from e

            results.append(SuggestionResult(product_name=record.product_name, suggestion=text))

        logger.info(f"Batch done products={len(results)} duration={_now() - t_batch:.3f}s")
        return results
