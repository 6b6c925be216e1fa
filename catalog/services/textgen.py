"""
Text generation through Google Generative AI (Gemini).

The SDK is configured once per API key; the model name comes from
GENAI_MODEL.
"""

from __future__ import annotations

from typing import Any, Optional

import google.generativeai as genai
from flask import current_app

from ..errors import ServiceUnavailableError, UpstreamServiceError, ValidationError
from ..logger import get_logger

logger = get_logger(__name__)

PROMPT_MAX_LENGTH = 4000
DEFAULT_MAX_TOKENS = 256
MAX_TOKENS_LIMIT = 2048
DEFAULT_TEMPERATURE = 0.7

_configured_key: Optional[str] = None


def configure_genai() -> None:
    """Configure the Gemini API key (only when it changed)."""
    global _configured_key

    api_key = current_app.config.get("GOOGLE_API_KEY")
    if not api_key:
        raise ServiceUnavailableError("Text generation service is not configured.")
    if api_key == _configured_key:
        return

    genai.configure(api_key=api_key)
    _configured_key = api_key


def get_generative_model() -> genai.GenerativeModel:
    configure_genai()
    return genai.GenerativeModel(current_app.config["GENAI_MODEL"])


def parse_request(payload: Any) -> dict:
    """Validate the /generate-text body; returns prompt, max_tokens, temperature."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")

    errors: dict[str, str] = {}

    prompt = payload.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        errors["prompt"] = "is required"
    elif len(prompt) > PROMPT_MAX_LENGTH:
        errors["prompt"] = f"must be at most {PROMPT_MAX_LENGTH} characters"

    max_tokens = payload.get("max_tokens", DEFAULT_MAX_TOKENS)
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or not 1 <= max_tokens <= MAX_TOKENS_LIMIT:
        errors["max_tokens"] = f"must be an integer between 1 and {MAX_TOKENS_LIMIT}"

    temperature = payload.get("temperature", DEFAULT_TEMPERATURE)
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)) or not 0.0 <= temperature <= 2.0:
        errors["temperature"] = "must be a number between 0.0 and 2.0"

    if errors:
        raise ValidationError("Invalid text generation request.", details=errors)

    return {
        "prompt": prompt.strip(),
        "max_tokens": max_tokens,
        "temperature": float(temperature),
    }


def generate_text(prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS,
                  temperature: float = DEFAULT_TEMPERATURE) -> str:
    """Send the prompt to the model and return the generated text."""
    model = get_generative_model()

    try:
        response = model.generate_content(
            prompt,
            generation_config={
                "max_output_tokens": max_tokens,
                "temperature": temperature,
            },
        )
        # .text raises ValueError when the candidate was blocked or is empty
        text = response.text
    except ValueError as exc:
        logger.warning(f"Model returned no usable text: {exc}")
        raise UpstreamServiceError("Text generation returned no content.")
    except Exception as exc:
        logger.error(f"Text generation failed: {exc}", exc_info=True)
        raise UpstreamServiceError("Text generation provider failed.")

    if not text or not text.strip():
        raise UpstreamServiceError("Text generation returned no content.")
    return text.strip()
