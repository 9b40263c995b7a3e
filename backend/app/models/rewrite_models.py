import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

MIN_JOB_AD_CHARS = 40
DEFAULT_READING_LEVEL = 60.0


class Tone(str, Enum):
    """Voice of the rewritten ad."""

    PROFESSIONAL = "professional"
    WARM = "warm"


class Length(str, Enum):
    """Target length of the rewritten ad."""

    SHORT = "short"
    STANDARD = "standard"


class IssueType(str, Enum):
    """Categories of biased or exclusionary language the model reports."""

    GENDERED = "gendered"
    AGE = "age"
    ABLEIST = "ableist"
    CULTURAL = "cultural"
    JARGON = "jargon"
    UNNECESSARY_REQUIREMENT = "unnecessary_requirement"
    OTHER = "other"


# ── Request Models ──────────────────────────────────────────────────────────


class RewriteRequest(BaseModel):
    """
    Caller input for a rewrite.

    Preferences are forgiving: unknown or malformed values fall back to their
    defaults instead of failing. Only `text` is enforced: it must be a string
    or number, and the 40-character minimum counts it after surrounding
    whitespace is stripped.
    """

    text: str
    tone: Tone = Tone.PROFESSIONAL
    length: Length = Length.STANDARD
    reading_level_target: float = DEFAULT_READING_LEVEL
    neuroinclusive: bool = True

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        # Objects, lists and booleans are not job ad text
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return ""
        return str(value).strip()

    @field_validator("text")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < MIN_JOB_AD_CHARS:
            raise ValueError(f"job ad must be at least {MIN_JOB_AD_CHARS} characters")
        return value

    @field_validator("tone", mode="before")
    @classmethod
    def safe_tone(cls, value: Any) -> Tone:
        try:
            return Tone(value)
        except (ValueError, TypeError):
            return Tone.PROFESSIONAL

    @field_validator("length", mode="before")
    @classmethod
    def safe_length(cls, value: Any) -> Length:
        try:
            return Length(value)
        except (ValueError, TypeError):
            return Length.STANDARD

    @field_validator("reading_level_target", mode="before")
    @classmethod
    def safe_reading_level(cls, value: Any) -> float:
        if isinstance(value, bool):
            return DEFAULT_READING_LEVEL
        try:
            number = float(value)
        except (ValueError, TypeError, OverflowError):
            return DEFAULT_READING_LEVEL
        return number if math.isfinite(number) else DEFAULT_READING_LEVEL

    @field_validator("neuroinclusive", mode="before")
    @classmethod
    def neuroinclusive_unless_false(cls, value: Any) -> bool:
        return value is not False


# ── Response Models ─────────────────────────────────────────────────────────
# Documentation only: the route relays the model's JSON as-is.


class Issue(BaseModel):
    """A flagged phrase in the original ad."""

    type: IssueType
    note: str


class ChangelogEntry(BaseModel):
    """One edit made during the rewrite."""

    before: str
    after: str
    reason: str


class RewriteResult(BaseModel):
    """Structured output returned by the model."""

    bias_score: float = Field(ge=0, le=100)
    issues: list[Issue]
    reading_level: str
    rewrite: str
    changelog: list[ChangelogEntry]
    suggested_additions: list[str]
