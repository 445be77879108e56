"""Core functionality for the Nail Logic studio site.

- **NailLogicConfig / config**: environment-based settings (NAILLOGIC_ prefix)
- **ImageGenerationClient**: one Gemini image call per design prompt
- **DesignSuggestionClient**: short text suggestions with a friendly fallback
- **StudioProfile / default_profile**: studio identity and outbound links
"""

from naillogic.core.config import NailLogicConfig, config
from naillogic.core.gemini_client import (
    DesignSuggestionClient,
    GenerationError,
    ImageGenerationClient,
    create_genai_client,
)
from naillogic.core.studio import StudioLink, StudioProfile, default_profile

__all__ = [
    "NailLogicConfig",
    "config",
    "DesignSuggestionClient",
    "GenerationError",
    "ImageGenerationClient",
    "create_genai_client",
    "StudioLink",
    "StudioProfile",
    "default_profile",
]
