"""Gemini clients for the Design Atelier.

This module wraps the two hosted calls the site makes through the
``google-genai`` SDK:

- :class:`ImageGenerationClient` turns a client's description into a nail-art
  concept image, returned as a self-contained PNG data URI.
- :class:`DesignSuggestionClient` asks the text model for a short design
  description for a mood.  It never raises; every failure becomes a friendly
  fallback sentence.

Both clients share one SDK handle, created by :func:`create_genai_client`
from :class:`~naillogic.core.config.NailLogicConfig`.  When no API key is
configured the handle is ``None`` and both clients degrade without making a
network call (the image client returns ``None``, the suggestion client
returns its fallback).

Usage
-----
::

    from naillogic.core.config import config
    from naillogic.core.gemini_client import ImageGenerationClient

    client = ImageGenerationClient.from_config(config)
    payload = await client.generate("marble texture with gold foil")
    if payload is None:
        ...  # the service answered without an image
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterator
from typing import Any

from google import genai
from google.genai import types

from naillogic.core.config import NailLogicConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Fixed request text.
# ---------------------------------------------------------------------------
DESIGN_PREAMBLE = (
    "Professional nail art design, macro photography style, high resolution, "
    "realistic texture. The design should be: "
)

SUGGESTION_TEMPLATE = (
    'Suggest a unique and trendy nail art design description for a client who wants '
    'something related to: "{mood}". Keep it concise, under 50 words, and focused on '
    "visual details."
)

DATA_URI_PREFIX = "data:image/png;base64,"

NO_SUGGESTION_MESSAGE = "Could not generate a suggestion at this time."


class GenerationError(Exception):
    """The image service call failed.

    Raised for transport, authentication and service-side errors.  The
    original SDK exception is always attached as ``__cause__``.
    """


def create_genai_client(settings: NailLogicConfig) -> genai.Client | None:
    """Build the shared Gemini SDK handle.

    Args:
        settings: Application configuration.

    Returns:
        A ``genai.Client`` bound to the configured API key, or ``None`` when
        no key is configured.
    """
    if not settings.has_api_key:
        logger.warning("NAILLOGIC_API_KEY is not set; Design Atelier calls are disabled.")
        return None
    return genai.Client(api_key=settings.api_key.get_secret_value())


def compose_instruction(prompt: str) -> str:
    """Prefix the client's description with the studio's photographic preamble.

    The prompt is interpolated as-is; it is neither trimmed nor validated.
    """
    return f"{DESIGN_PREAMBLE}{prompt}"


def iter_response_parts(response: Any) -> Iterator[Any]:
    """Yield the parts of the first candidate, in order.

    Yields nothing when the response has no candidates, or the first
    candidate has no content or no parts.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return
    content = getattr(candidates[0], "content", None)
    if content is None:
        return
    yield from getattr(content, "parts", None) or []


def to_data_uri(data: bytes | str) -> str:
    """Wrap inline image data as a PNG data URI.

    The SDK decodes inline data to raw bytes, which are base64-encoded here.
    Data that already arrives as a base64 string is wrapped unchanged.
    """
    if isinstance(data, (bytes, bytearray)):
        data = base64.b64encode(data).decode("ascii")
    return f"{DATA_URI_PREFIX}{data}"


def extract_image_payload(response: Any) -> str | None:
    """Return the first inline image in *response* as a data URI.

    Args:
        response: A ``GenerateContentResponse`` (or any object of the same
            shape).

    Returns:
        The data URI of the first part carrying inline data, or ``None``
        if no part does.
    """
    for part in iter_response_parts(response):
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            return to_data_uri(inline.data)
    return None


class ImageGenerationClient:
    """Generates nail-art concept images with a Gemini image model.

    Holds no per-request state: each :meth:`generate` call builds its own
    request and makes exactly one outbound call.

    Attributes:
        model_id: Gemini image model identifier.
        aspect_ratio: Aspect ratio requested for every image.
    """

    def __init__(
        self,
        sdk_client: genai.Client | None,
        model_id: str = "gemini-2.5-flash-image",
        aspect_ratio: str = "1:1",
    ) -> None:
        """Initialise the client.

        Args:
            sdk_client: Shared SDK handle, or ``None`` when no credential is
                configured.
            model_id: Gemini image model identifier.
            aspect_ratio: Aspect ratio for generated images.
        """
        self._sdk_client = sdk_client
        self.model_id = model_id
        self.aspect_ratio = aspect_ratio

    @classmethod
    def from_config(
        cls, settings: NailLogicConfig, sdk_client: genai.Client | None = None
    ) -> ImageGenerationClient:
        """Create a client from configuration, building an SDK handle if needed."""
        if sdk_client is None:
            sdk_client = create_genai_client(settings)
        return cls(sdk_client, model_id=settings.image_model_id, aspect_ratio=settings.aspect_ratio)

    @property
    def is_configured(self) -> bool:
        """True when an SDK handle (and therefore a credential) is available."""
        return self._sdk_client is not None

    def build_config(self) -> types.GenerateContentConfig:
        """Return the output-shape configuration sent with every request."""
        return types.GenerateContentConfig(
            image_config=types.ImageConfig(aspect_ratio=self.aspect_ratio),
        )

    async def generate(self, prompt: str) -> str | None:
        """Generate one concept image for *prompt*.

        Args:
            prompt: The client's description.  Forwarded unchanged into the
                instruction template, even when empty.

        Returns:
            A ``data:image/png;base64,...`` string, or ``None`` when the
            service produced no image or no credential is configured.

        Raises:
            GenerationError: If the service call fails for any reason.
        """
        if self._sdk_client is None:
            logger.warning("No Gemini API key configured; skipping image generation.")
            return None

        instruction = compose_instruction(prompt)
        logger.info(f"Requesting nail-art concept from {self.model_id}")

        try:
            response = await self._sdk_client.aio.models.generate_content(
                model=self.model_id,
                contents=types.Content(role="user", parts=[types.Part(text=instruction)]),
                config=self.build_config(),
            )
        except Exception as e:
            raise GenerationError(f"Image generation failed: {e}") from e

        payload = extract_image_payload(response)
        if payload is None:
            logger.info("Image service responded without image data")
        return payload


class DesignSuggestionClient:
    """Suggests short nail-art design descriptions with a Gemini text model."""

    def __init__(
        self,
        sdk_client: genai.Client | None,
        model_id: str = "gemini-2.5-flash",
        owner: str = "Miral",
    ) -> None:
        self._sdk_client = sdk_client
        self.model_id = model_id
        self.owner = owner

    @classmethod
    def from_config(
        cls,
        settings: NailLogicConfig,
        sdk_client: genai.Client | None = None,
        owner: str = "Miral",
    ) -> DesignSuggestionClient:
        if sdk_client is None:
            sdk_client = create_genai_client(settings)
        return cls(sdk_client, model_id=settings.text_model_id, owner=owner)

    @property
    def fallback_message(self) -> str:
        return f"Connect with {self.owner} directly for personalized suggestions!"

    async def suggest(self, mood: str) -> str:
        """Return a design suggestion for *mood*, or a fallback sentence.

        Never raises: service errors are logged and replaced by
        :attr:`fallback_message`.
        """
        if self._sdk_client is None:
            logger.warning("No Gemini API key configured; returning fallback suggestion.")
            return self.fallback_message

        try:
            response = await self._sdk_client.aio.models.generate_content(
                model=self.model_id,
                contents=SUGGESTION_TEMPLATE.format(mood=mood),
            )
        except Exception as e:
            logger.error(f"Error generating design suggestion: {e}", exc_info=True)
            return self.fallback_message

        return response.text or NO_SUGGESTION_MESSAGE
