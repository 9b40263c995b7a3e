"""
LLM Service — single-shot chat completions via LiteLLM.

Responsibilities:
  • Send an OpenAI-format message list to the configured completion model
  • Request JSON mode when asked
  • Turn provider failures that carry an HTTP status into CompletionServiceError
  • No retries, no streaming, no conversation state
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from app.config import COMPLETION_MODEL, PROMPT_CONFIG

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True


class CompletionServiceError(Exception):
    """The completion service answered with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"Completion service returned {status_code}")
        self.status_code = status_code
        self.detail = detail


# ── Helpers ──────────────────────────────────────────────────────────────────


def _read_error_body(exc: Exception) -> str:
    """Best-effort raw body of a failed provider call ("" if unreadable)."""
    try:
        response = getattr(exc, "response", None)
        body = response.text if response is not None else ""
    except Exception:
        body = ""
    return body or getattr(exc, "message", "") or ""


def _error_status(exc: Exception) -> int | None:
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        return None
    # A "failure" outside the HTTP error range is reported as a bad gateway
    if not 400 <= status_code <= 599:
        return 502
    return status_code


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    json_mode: bool = False,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        api_key:     Server-side provider key
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)
        json_mode:   If True, request a strict JSON object

    Returns:
        The assistant's response text ("" if the model sent no content).

    Raises:
        CompletionServiceError: the provider rejected the call with a status.
    """
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.2)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 1500)

    kwargs: dict[str, Any] = {
        "model": COMPLETION_MODEL,
        "messages": messages,
        "temperature": temp,
        "max_tokens": tokens,
        "api_key": api_key,
    }

    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    logger.info(f"LLM call: model={COMPLETION_MODEL} temp={temp} tokens={tokens}")

    try:
        response = await acompletion(**kwargs)
    except Exception as e:
        status_code = _error_status(e)
        if status_code is None:
            logger.error(f"LLM error ({COMPLETION_MODEL}): {e}")
            raise
        logger.error(f"LLM error ({COMPLETION_MODEL}): status={status_code}")
        raise CompletionServiceError(status_code, _read_error_body(e)) from e

    content = response.choices[0].message.content or ""
    logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
    return content
