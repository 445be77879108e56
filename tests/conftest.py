"""Shared pytest fixtures for Nail Logic tests."""

import asyncio
from types import SimpleNamespace
from typing import Generator

import pytest
from google.genai import types

from naillogic.core.config import NailLogicConfig
from naillogic.core.gemini_client import GenerationError

# Three zero bytes encode to "AAAA"
AAAA_PAYLOAD = "data:image/png;base64,AAAA"


class StubImageClient:
    """Stand-in for ImageGenerationClient that replays scripted outcomes.

    Each outcome is returned in order; an exception instance is raised
    instead of returned.  The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [None]
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class GatedImageClient(StubImageClient):
    """StubImageClient whose calls block until ``release()`` is called."""

    def __init__(self, *outcomes):
        super().__init__(*outcomes)
        self.gate = asyncio.Event()

    def release(self) -> None:
        self.gate.set()

    async def generate(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        await self.gate.wait()
        self.gate = asyncio.Event()
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class StubSuggestionClient:
    """Stand-in for DesignSuggestionClient."""

    def __init__(self, suggestion: str = "Soft lilac French tips with silver micro-studs."):
        self.suggestion = suggestion
        self.moods: list[str] = []

    async def suggest(self, mood: str) -> str:
        self.moods.append(mood)
        return self.suggestion


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a single-candidate Gemini response holding *parts*."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes = b"\x00\x00\x00") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type="image/png"))


def text_part(text: str = "Here is your design.") -> types.Part:
    return types.Part(text=text)


@pytest.fixture
def test_config() -> NailLogicConfig:
    """Create a configuration that ignores the environment's .env file.

    Returns:
        NailLogicConfig without an API key
    """
    return NailLogicConfig(_env_file=None, api_key=None)


@pytest.fixture
def keyed_config() -> NailLogicConfig:
    """Configuration with a (fake) Gemini API key."""
    return NailLogicConfig(_env_file=None, api_key="test-key")


@pytest.fixture
def service_failure() -> GenerationError:
    """A GenerationError wrapping a transport failure."""
    error = GenerationError("Image generation failed: connection reset by peer")
    error.__cause__ = ConnectionError("connection reset by peer")
    return error


@pytest.fixture
def stub_image_client() -> StubImageClient:
    """Image client that always succeeds with the AAAA payload."""
    return StubImageClient(AAAA_PAYLOAD)


@pytest.fixture
def stub_suggestion_client() -> StubSuggestionClient:
    return StubSuggestionClient()


@pytest.fixture
def test_client(
    stub_image_client: StubImageClient, stub_suggestion_client: StubSuggestionClient
) -> Generator:
    """FastAPI TestClient with the Gemini clients replaced by stubs.

    Yields:
        TestClient bound to ``naillogic.api.main.app``
    """
    from fastapi.testclient import TestClient

    from naillogic.api.main import app

    with TestClient(app) as client:
        app.state.image_client = stub_image_client
        app.state.suggestion_client = stub_suggestion_client
        yield client


@pytest.fixture
def make_client() -> type[StubImageClient]:
    """Factory for scripted image clients: ``make_client(payload, error, ...)``."""
    return StubImageClient


@pytest.fixture
def make_gated_client() -> type[GatedImageClient]:
    """Factory for image clients that block until released."""
    return GatedImageClient


@pytest.fixture
def gemini() -> SimpleNamespace:
    """Builders for Gemini SDK response objects.

    Returns:
        Namespace with ``response(*parts)``, ``image(data)`` and ``text(text)``
    """
    return SimpleNamespace(response=make_response, image=image_part, text=text_part)
