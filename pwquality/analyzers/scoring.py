"""
Password Scorer
================

Aggregates the rule checker and entropy estimator outputs into a bounded
0-100 score, a strength label and the overall verdict.

Scoring breakdown:
    - Length: 2 points per character, capped at 25
    - Character classes: +10 upper, +10 lower, +10 digit, +15 symbol
    - Uniqueness: +10 for more than 8 distinct characters
    - Entropy: +10 above 45 bits
    - Feedback penalty: -5 per feedback message
"""

from __future__ import annotations

from pwquality.core.models import CheckSummary, Strength


MAX_LENGTH_POINTS = 25
POINTS_PER_CHARACTER = 2
UPPER_BONUS = 10
LOWER_BONUS = 10
DIGIT_BONUS = 10
SYMBOL_BONUS = 15
UNIQUE_CHARS_THRESHOLD = 8
UNIQUE_BONUS = 10
ENTROPY_BONUS_THRESHOLD = 45
ENTROPY_BONUS = 10
FEEDBACK_PENALTY = 5
PASS_SCORE = 60


class Scorer:
    """Computes score, strength and validity for one evaluation."""

    @staticmethod
    def length_points(length: int) -> int:
        """Length contribution; saturates at 25 from 13 characters on."""
        return min(MAX_LENGTH_POINTS, length * POINTS_PER_CHARACTER)

    def score(
        self,
        length: int,
        summary: CheckSummary,
        feedback_count: int,
        entropy: float,
    ) -> int:
        """Calculate the numeric score.

        Class bonuses follow what the password contains, independent of
        which classes the settings require.

        Args:
            length: Password length.
            summary: Character-class summary.
            feedback_count: Messages accumulated by all earlier stages.
            entropy: Unrounded entropy estimate in bits.

        Returns:
            Score clamped to [0, 100].
        """
        total = self.length_points(length)
        if summary.upper:
            total += UPPER_BONUS
        if summary.lower:
            total += LOWER_BONUS
        if summary.number:
            total += DIGIT_BONUS
        if summary.symbol:
            total += SYMBOL_BONUS
        if summary.unique_chars > UNIQUE_CHARS_THRESHOLD:
            total += UNIQUE_BONUS
        if entropy > ENTROPY_BONUS_THRESHOLD:
            total += ENTROPY_BONUS
        total -= feedback_count * FEEDBACK_PENALTY
        return max(0, min(100, total))

    @staticmethod
    def classify(score: int) -> Strength:
        return Strength.from_score(score)

    @staticmethod
    def is_valid(score: int, feedback_count: int) -> bool:
        """A password passes only with no feedback and a score of 60+."""
        return feedback_count == 0 and score >= PASS_SCORE
