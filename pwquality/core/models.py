"""
Password Quality Data Models
=============================

Pydantic models for the password quality pipeline: the per-call
character-class summary produced by the rule checker and the result
returned to callers.

All models are frozen and serialisable to JSON, so they can be handed
straight to the console output layer and the JSON report generator.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Strength(str, enum.Enum):
    """Qualitative strength label derived from the numeric score."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"

    @classmethod
    def from_score(cls, score: int) -> Strength:
        """Map a 0-100 score to its band.

        Bands are inclusive on their lower bound and checked top-down:
          - 80-100 : Strong
          - 60-79  : Good
          - 40-59  : Fair
          - 20-39  : Weak
          - 0-19   : Very Weak
        """
        if score >= 80:
            return cls.STRONG
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.FAIR
        if score >= 20:
            return cls.WEAK
        return cls.VERY_WEAK


# ===================================================================== #
#  Pipeline Models
# ===================================================================== #


class CheckSummary(BaseModel):
    """Character-class presence and uniqueness for one password.

    Attributes:
        upper: At least one ASCII uppercase letter.
        lower: At least one ASCII lowercase letter.
        number: At least one ASCII digit.
        symbol: At least one character that is not an ASCII letter or digit.
        unique_chars: Number of distinct characters.
    """

    model_config = ConfigDict(frozen=True)

    upper: bool = False
    lower: bool = False
    number: bool = False
    symbol: bool = False
    unique_chars: int = Field(default=0, ge=0)


class QualityResult(BaseModel):
    """Outcome of a password quality evaluation.

    Attributes:
        valid: ``True`` iff there is no feedback and the score is at least 60.
        score: Bounded score in [0, 100].
        entropy: Estimated entropy in bits, rounded to two decimals.
            ``None`` when the input was rejected before estimation.
        strength: Qualitative strength label.
        feedback: Ordered human-readable messages, one per violated rule.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool = False
    score: int = Field(default=0, ge=0, le=100)
    entropy: Optional[float] = None
    strength: Strength = Strength.VERY_WEAK
    feedback: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping form; ``entropy`` is omitted when not computed."""
        return self.model_dump(mode="json", exclude_none=True)


INVALID_TYPE_MESSAGE = "Password must be a string."


def invalid_result(message: str = INVALID_TYPE_MESSAGE) -> QualityResult:
    """Build the fixed degenerate result for rejected input."""
    return QualityResult(
        valid=False,
        score=0,
        strength=Strength.VERY_WEAK,
        feedback=[message],
    )
