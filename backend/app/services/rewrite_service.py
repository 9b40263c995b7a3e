"""
Rewrite Service — turn a job ad into an inclusive, plain-language version.

Responsibilities:
  • Validate the caller's payload into a RewriteRequest
  • Build the system + user prompts
  • Make one JSON-mode completion call
  • Check the model's output before it is relayed

Every failure is raised as RewriteError carrying its HTTP status and body.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from app.models.rewrite_models import RewriteRequest
from app.prompts.job_ad_rewriter import build_messages
from app.services.llm_service import CompletionServiceError, complete

logger = logging.getLogger(__name__)

JOB_AD_TOO_SHORT = "Provide a job ad (min 40 chars)."
API_KEY_MISSING = "OPENAI_API_KEY not set"


class RewriteError(Exception):
    """A terminal failure with the status and JSON body to send back."""

    def __init__(self, status_code: int, error: str, **extra: Any):
        super().__init__(error)
        self.status_code = status_code
        self.payload: dict[str, Any] = {"error": error, **extra}


# ── Public API ───────────────────────────────────────────────────────────────


def build_request(payload: dict[str, Any]) -> RewriteRequest:
    """Validate the decoded body; only a missing or short job ad is rejected."""
    try:
        return RewriteRequest.model_validate(payload)
    except ValidationError as e:
        raise RewriteError(400, JOB_AD_TOO_SHORT) from e


async def rewrite_job_ad(payload: dict[str, Any], *, api_key: str | None) -> dict[str, Any]:
    """Rewrite the job ad in `payload` and return the model's JSON object."""
    req = build_request(payload)

    if not api_key:
        raise RewriteError(500, API_KEY_MISSING)

    logger.info(
        f"Rewriting job ad ({len(req.text)} chars) tone={req.tone.value} "
        f"length={req.length.value} neuroinclusive={req.neuroinclusive}"
    )

    try:
        raw = await complete(
            api_key=api_key,
            messages=build_messages(req),
            prompt_name="job_ad_rewriter",
            json_mode=True,
        )
    except CompletionServiceError as e:
        raise RewriteError(e.status_code, "Completion service request failed", detail=e.detail) from e

    return _validate_result(raw)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _validate_result(raw: str) -> dict[str, Any]:
    """Parse the model output; it must be an object with a non-empty `rewrite`."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Model returned invalid JSON ({len(raw)} chars)")
        raise RewriteError(502, "Model returned invalid JSON", raw=raw) from e

    rewrite = data.get("rewrite") if isinstance(data, dict) else None
    if not isinstance(rewrite, str) or not rewrite.strip():
        logger.warning("Model JSON is missing a 'rewrite' string")
        raise RewriteError(502, "Model response is missing 'rewrite'", raw=data)

    return data
