"""Shared pytest fixtures for vendor sales AI tests."""

import os

# Settings are read at import time of vendor_ai.main; the key must exist first.
os.environ.setdefault("GROQ_API_KEY", "test-key")

from types import SimpleNamespace

import pytest


def make_chunk(content):
    """Build a completion chunk shaped like the SDK's ChatCompletionChunk."""
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class FakeStream:
    """Async iterator over pre-built chunks; optionally raises mid-stream."""

    def __init__(self, chunks, error=None):
        self._chunks = list(chunks)
        self._error = error

    def __aiter__(self):
        return self._gen()

    async def _gen(self):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error


class FakeCompletions:
    """Stands in for client.chat.completions.

    `script` is a list with one entry per expected call: either a list of
    text fragments (None allowed) or an exception to raise on create().
    """

    def __init__(self, script):
        self.script = list(script)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        step = self.script[len(self.calls) - 1]
        if isinstance(step, BaseException):
            raise step
        return FakeStream(make_chunk(c) for c in step)


class FakeLLMClient:
    def __init__(self, script=()):
        self.completions = FakeCompletions(script)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    @property
    def calls(self):
        return self.completions.calls

    async def close(self):
        self.closed = True


@pytest.fixture
def product():
    """A complete product record, keyed by display labels."""
    return {
        "Product Name": "Greek Yogurt 500g",
        "Vendor": "Fresh Dairy Co",
        "Category": "Dairy",
        "Stock Qty": 120,
        "Units/Day": 7.5,
        "Price": 3.49,
        "Currency": "EUR",
        "Wholesale Price": 2.1,
        "Manufacture Date": "2026-10-01",
        "Expiry Date": "2026-10-25",
        "Product Expiry Days": 6,
    }


@pytest.fixture
def make_product(product):
    """Factory for variants of the base product."""

    def _make(**overrides):
        data = dict(product)
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def fake_client_factory():
    return FakeLLMClient
