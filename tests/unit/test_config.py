"""Tests for naillogic.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the NAILLOGIC_ prefix.
- Optional API key handling.
- Pydantic validation constraints (port range).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from naillogic.core.config import NailLogicConfig


class TestConfigDefaults:
    """Verify that NailLogicConfig provides sensible defaults."""

    def test_default_models(self, test_config: NailLogicConfig):
        assert test_config.image_model_id == "gemini-2.5-flash-image"
        assert test_config.text_model_id == "gemini-2.5-flash"

    def test_default_aspect_ratio_is_square(self, test_config: NailLogicConfig):
        assert test_config.aspect_ratio == "1:1"

    def test_default_server_port(self, monkeypatch):
        monkeypatch.delenv("NAILLOGIC_SERVER_PORT", raising=False)
        cfg = NailLogicConfig(_env_file=None)
        assert cfg.server_port == 7860
        assert cfg.server_host == "0.0.0.0"
        assert cfg.gradio_share is False

    def test_default_paths_exist(self, test_config: NailLogicConfig):
        """The shipped static and templates directories are found."""
        assert (test_config.templates_dir / "index.html").is_file()
        assert test_config.static_dir.is_dir()


class TestApiKey:
    """The Gemini credential is optional."""

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("NAILLOGIC_API_KEY", raising=False)
        cfg = NailLogicConfig(_env_file=None)
        assert cfg.api_key is None
        assert cfg.has_api_key is False

    def test_blank_key_is_not_a_key(self):
        cfg = NailLogicConfig(_env_file=None, api_key="  ")
        assert cfg.has_api_key is False

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("NAILLOGIC_API_KEY", "env-key")
        cfg = NailLogicConfig(_env_file=None)
        assert cfg.has_api_key is True
        assert cfg.api_key.get_secret_value() == "env-key"

    def test_key_is_masked(self, keyed_config: NailLogicConfig):
        assert "test-key" not in repr(keyed_config)
        assert "test-key" not in str(keyed_config.model_dump())


class TestEnvironmentOverrides:
    def test_model_override(self, monkeypatch):
        monkeypatch.setenv("NAILLOGIC_IMAGE_MODEL_ID", "gemini-3-pro-image-preview")
        cfg = NailLogicConfig(_env_file=None)
        assert cfg.image_model_id == "gemini-3-pro-image-preview"

    def test_port_override(self, monkeypatch):
        monkeypatch.setenv("NAILLOGIC_SERVER_PORT", "8080")
        cfg = NailLogicConfig(_env_file=None)
        assert cfg.server_port == 8080


class TestConfigValidation:
    @pytest.mark.parametrize("port", [80, 70000])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError):
            NailLogicConfig(_env_file=None, server_port=port)
