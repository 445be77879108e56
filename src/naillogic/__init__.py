"""Nail Logic - studio link page with an AI nail-art Design Atelier."""

__version__ = "0.1.0"

from naillogic.core.config import NailLogicConfig, config
from naillogic.core.gemini_client import GenerationError, ImageGenerationClient
from naillogic.ui.controller import GenerationRequestController
from naillogic.ui.models import GenerationSnapshot, GenerationState

__all__ = [
    "GenerationError",
    "GenerationRequestController",
    "GenerationSnapshot",
    "GenerationState",
    "ImageGenerationClient",
    "NailLogicConfig",
    "config",
]
