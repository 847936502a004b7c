"""
Password Entropy Estimator
===========================

Combinatorial entropy estimate for a password:

    H = length * log2(pool_size)

where the pool size is the sum of nominal alphabet sizes for the
character classes present in the password:

    - Uppercase letters: 26
    - Lowercase letters: 26
    - Digits: 10
    - Symbols: 32

The sizes are fixed nominal values; they do not depend on which symbols
or how many distinct letters actually occur.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63 (2006). Electronic Authentication Guideline,
      Appendix A: Estimating Password Entropy and Strength.
"""

from __future__ import annotations

import math

from pwquality.core.models import CheckSummary
from pwquality.core.settings import Settings


MSG_LOW_ENTROPY = "Password entropy is too low (too predictable)."

UPPER_POOL = 26
LOWER_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32


class EntropyEstimator:
    """Estimates password entropy from the character classes present."""

    @staticmethod
    def pool_size(summary: CheckSummary) -> int:
        """Sum the nominal alphabet sizes of the classes present.

        Returns 1 when no class is present, so an empty password has
        zero entropy.
        """
        pool = 0
        if summary.upper:
            pool += UPPER_POOL
        if summary.lower:
            pool += LOWER_POOL
        if summary.number:
            pool += DIGIT_POOL
        if summary.symbol:
            pool += SYMBOL_POOL
        return pool or 1

    def estimate(self, password: str, summary: CheckSummary) -> float:
        """Return the unrounded entropy estimate in bits."""
        return len(password) * math.log2(self.pool_size(summary))

    def check(
        self,
        password: str,
        summary: CheckSummary,
        settings: Settings,
        feedback: list[str],
    ) -> float:
        """Estimate entropy and flag it when below ``settings.min_entropy``.

        Args:
            password: Candidate password.
            summary: Character-class summary from the rule checker.
            settings: Resolved settings for this call.
            feedback: Per-call feedback list, extended in place.

        Returns:
            Unrounded entropy in bits.
        """
        entropy = self.estimate(password, summary)
        if entropy < settings.min_entropy:
            feedback.append(MSG_LOW_ENTROPY)
        return entropy
