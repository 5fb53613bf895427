from __future__ import annotations

import logging
from typing import Any

import dspy

from .config import AppConfig
from .errors import GenerationError, classify_generation_error

logger = logging.getLogger(__name__)

GEMINI_PROVIDER_PREFIX = "gemini/"


def _model_id(model: str) -> str:
    if model.startswith(GEMINI_PROVIDER_PREFIX):
        return model
    return GEMINI_PROVIDER_PREFIX + model


def configure_gemini_lm(config: AppConfig, *, cache: bool = False) -> dspy.LM:
    """Build a DSPy LM bound to the configured Gemini model."""
    if not config.api_key:
        logger.warning("GEMINI_API_KEY is not set; the Gemini request will likely be rejected.")
    model_id = _model_id(config.model)
    logger.info("Configuring Gemini model '%s'", model_id)
    return dspy.LM(
        model_id,
        api_key=config.api_key,
        cache=cache or config.lm_cache,
        num_retries=0,
    )


def _completion_text(output: Any) -> str:
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    if isinstance(output, dict):
        return str(output.get("text") or "")
    return str(output)


def generate_text(lm: dspy.LM, prompt: str) -> str:
    """Send ``prompt`` in a single request and return the first completion.

    An empty completion list yields ``""``. Any failure is re-raised as
    :class:`GenerationError`.
    """
    try:
        outputs = lm(prompt)
    except Exception as exc:
        error_class = classify_generation_error(exc)
        raise GenerationError(
            f"Gemini request failed ({error_class.value}): {exc}",
            error_class=error_class,
        ) from exc

    if not outputs:
        return ""
    return _completion_text(outputs[0])
