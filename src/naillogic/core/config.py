"""Configuration management for the Nail Logic studio site.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the NAILLOGIC_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (NAILLOGIC_* prefix)
2. .env file in the project root
3. Default values defined in NailLogicConfig

Example .env file:
    NAILLOGIC_API_KEY=your-gemini-key
    NAILLOGIC_IMAGE_MODEL_ID=gemini-2.5-flash-image
    NAILLOGIC_SERVER_PORT=7860

Credentials
-----------
The Gemini API key is optional.  When it is missing the site still starts:
the Design Atelier logs a warning on each submission and reports that no
image was produced, while the link page keeps working.

Usage Example
-------------
    from naillogic.core.config import config

    print(config.image_model_id)
    print(config.has_api_key)
"""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class NailLogicConfig(BaseSettings):
    """Main configuration for the Nail Logic studio site.

    Attributes
    ----------
    Gemini Settings:
        api_key : SecretStr | None
            Gemini API key.  ``None`` disables outbound generation calls.
        image_model_id : str
            Model used for nail-art concept images
        text_model_id : str
            Model used for short design suggestions
        aspect_ratio : str
            Aspect ratio requested for generated images

    Server Settings:
        server_host : str
            Bind address for the uvicorn and Gradio servers
        server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Paths:
        static_dir : Path
            CSS and JS assets served at ``/static``
        templates_dir : Path
            Directory holding ``index.html``
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NAILLOGIC_",
        case_sensitive=False,
    )

    # Gemini settings
    api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key; leave unset to run without image generation",
    )
    image_model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for nail-art concept images",
    )
    text_model_id: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used for design suggestions",
    )
    aspect_ratio: str = Field(
        default="1:1",
        description="Aspect ratio requested for generated images",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory of static CSS/JS assets",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Directory holding the HTML page",
    )

    @property
    def has_api_key(self) -> bool:
        """True when a non-blank Gemini API key is configured."""
        return self.api_key is not None and bool(self.api_key.get_secret_value().strip())


# Global configuration instance, loaded from NAILLOGIC_* variables and .env
config = NailLogicConfig()
