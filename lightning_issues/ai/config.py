"""Model identifier helpers."""

DEFAULT_MODEL = "google-gla:gemini-2.5-flash"


def validate_model_string(model: str) -> tuple[str, str]:
    """Validate and parse model string format.

    Args:
        model: Model identifier (e.g., 'google-gla:gemini-2.5-flash')

    Returns:
        Tuple of (provider, model_name)

    Raises:
        ValueError: If model string format is invalid
    """
    if ":" not in model:
        raise ValueError(
            f"Invalid model format '{model}'. Expected format: provider:model\n\n"
            f"💡 Examples of valid model formats:\n"
            f"   google-gla:gemini-2.5-flash\n"
            f"   google-gla:gemini-2.5-pro\n"
            f"   google-vertex:gemini-2.5-flash"
        )

    provider, model_name = model.split(":", 1)
    if not provider or not model_name:
        raise ValueError(
            f"Invalid model format '{model}'. Both provider and model name must be "
            f"non-empty."
        )

    return provider.lower(), model_name
