"""Tests for model identifier validation."""

import pytest

from lightning_issues.ai.config import DEFAULT_MODEL, validate_model_string


class TestValidateModelString:
    """Test validate_model_string()."""

    def test_default_model_is_valid(self) -> None:
        """Test the default Gemini model."""
        assert validate_model_string(DEFAULT_MODEL) == (
            "google-gla",
            "gemini-2.5-flash",
        )

    def test_provider_lowercased(self) -> None:
        """Test provider normalization."""
        assert validate_model_string("Google-Vertex:gemini-2.5-pro") == (
            "google-vertex",
            "gemini-2.5-pro",
        )

    @pytest.mark.parametrize("model", ["gemini-2.5-flash", ":gemini", "google-gla:"])
    def test_invalid_formats(self, model: str) -> None:
        """Test missing provider or model name."""
        with pytest.raises(ValueError, match="Invalid model format"):
            validate_model_string(model)
