"""Pydantic request and response models for the Nail Logic API.

Models
------
GenerateDesignRequest
    Payload for ``POST /api/generate``: the client's design prompt.
GenerateDesignResponse
    Outcome of one generation: final form state, image data URI and the
    user-facing message.
SuggestRequest / SuggestResponse
    Payload and result of ``POST /api/suggest``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GenerateDesignRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Attributes:
        prompt: Free-text description of the desired nail-art design.  A
            blank prompt is accepted and ignored (no generation happens).
    """

    prompt: str = Field(
        ...,
        description="Description of the desired design, e.g. 'rose gold chrome'.",
    )


class GenerateDesignResponse(BaseModel):
    """Response body for the ``POST /api/generate`` endpoint.

    Attributes:
        state: Final form state: ``"idle"`` when the prompt was blank,
            otherwise ``"success"`` or ``"error"``.
        image: PNG data URI of the concept image (``success`` only).
        message: Generic retry message (``error`` only).
    """

    state: Literal["idle", "loading", "success", "error"] = Field(
        ...,
        description="Final form state.",
    )
    image: str | None = Field(
        default=None,
        description="data:image/png;base64,... URI of the generated design.",
    )
    message: str | None = Field(
        default=None,
        description="User-facing status message.",
    )


class SuggestRequest(BaseModel):
    """Request body for the ``POST /api/suggest`` endpoint."""

    mood: str = Field(
        ...,
        description="Mood, outfit or occasion to suggest a design for.",
    )


class SuggestResponse(BaseModel):
    """Response body for the ``POST /api/suggest`` endpoint."""

    suggestion: str = Field(
        ...,
        description="Short design description, or a friendly fallback sentence.",
    )
