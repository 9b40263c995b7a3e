"""
Origin negotiation for the rewrite endpoint.

The browser either gets its own origin echoed back (when allow-listed) or the
first configured origin, so a disallowed caller sees a mismatch and the
browser blocks the response.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.config import Settings

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


@dataclass(frozen=True)
class CorsPolicy:
    """Allow-list of origins; the first entry is the default."""

    allowed_origins: list[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CorsPolicy":
        return cls(allowed_origins=settings.cors_origins)

    @property
    def default_origin(self) -> str:
        return self.allowed_origins[0] if self.allowed_origins else "*"

    def resolve_origin(self, origin: str | None) -> str:
        """Echo an allow-listed origin, otherwise fall back to the default."""
        if origin and origin in self.allowed_origins:
            return origin
        return self.default_origin

    def headers(self, origin: str | None) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.resolve_origin(origin),
            "Vary": "Origin",
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        }
