"""Data models for the Design Atelier form state."""

from dataclasses import dataclass
from enum import Enum


class GenerationState(str, Enum):
    """Observable state of one Design Atelier form."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# One user-facing message for every failure cause
ERROR_MESSAGE = "Please try again in a moment."

# Generate button labels
GENERATE_LABEL = "Generate Design"
LOADING_LABEL = "Rendering Concept..."


@dataclass(frozen=True)
class GenerationSnapshot:
    """Read-only view of a controller, handed to the presentation layer.

    Attributes
    ----------
    state : GenerationState
        Current form state
    payload : str | None
        PNG data URI of the displayed concept image, only set on SUCCESS
    message : str | None
        User-facing status text, only set on ERROR
    """

    state: GenerationState
    payload: str | None = None
    message: str | None = None

    @property
    def has_image(self) -> bool:
        return self.payload is not None

    def to_dict(self) -> dict:
        """Serialise for the JSON API (``image`` is the data URI)."""
        return {
            "state": self.state.value,
            "image": self.payload,
            "message": self.message,
        }
