from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Job Ad Rewriter"
    debug: bool = False

    # CORS (comma-separated, first entry is the fallback origin)
    allowed_origins: str = ""

    # LLM API Key (server-side only, never sent by the browser)
    openai_api_key: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def cors_origins(self) -> list[str]:
        """Parse the comma-separated origin list, dropping blanks."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# ── Model ───────────────────────────────────────────────────────────────────

COMPLETION_MODEL = "openai/gpt-4o-mini"

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "job_ad_rewriter": {"temperature": 0.2, "max_tokens": 3000},
}
