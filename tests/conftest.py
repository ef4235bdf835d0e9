"""Shared fixtures: in-memory storage, fake LLM providers and a fake PDF writer."""

import time
from pathlib import Path

import pytest

from vitae.contexts.document.record_store import RecordStore
from vitae.contexts.document.storage import MemoryStorage
from vitae.utils.llm import LLMResponse


class FakeProvider:
    """Stands in for an LLMProvider; returns canned text and records prompts."""

    name = "fake/model"

    def __init__(self, content: str = "", error: Exception = None, delay: float = 0):
        self.content = content
        self.error = error
        self.delay = delay
        self.prompts = []

    def generate(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model="model", input_tokens=10, output_tokens=20)


class FakePdfWriter:
    """Stands in for the weasyprint writer; writes placeholder bytes or fails."""

    def __init__(self, error: Exception = None, delay: float = 0):
        self.error = error
        self.delay = delay
        self.calls = []

    def __call__(self, html: str, pdf_path: Path, stylesheet: str) -> None:
        self.calls.append((html, pdf_path, stylesheet))
        time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        Path(pdf_path).write_bytes(b"not a real pdf")


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return RecordStore(storage)


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def make_writer():
    return FakePdfWriter
