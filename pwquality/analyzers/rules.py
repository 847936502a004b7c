"""
Password Rule Checker
======================

Independent heuristic checks run against a candidate password:

1. Length bounds (``min_length`` / ``max_length``)
2. Required character classes (upper, lower, digit, symbol)
3. Weakening patterns (single repeated character, well-known sequences)
4. Membership in the common-password denylist

Every check runs; none short-circuits another. Feedback is appended in
the order listed above, and a :class:`CheckSummary` describing the
password's character composition is returned for the scorer.
"""

from __future__ import annotations

import re
import string

from pwquality.core.models import CheckSummary
from pwquality.core.settings import Settings


# ===================================================================== #
#  Character Classes and Pattern Databases
# ===================================================================== #

_UPPER: frozenset[str] = frozenset(string.ascii_uppercase)
_LOWER: frozenset[str] = frozenset(string.ascii_lowercase)
_DIGITS: frozenset[str] = frozenset(string.digits)
_ALNUM: frozenset[str] = _UPPER | _LOWER | _DIGITS

# Substrings that mark a password as built from a trivial sequence
_WEAK_SEQUENCES: tuple[str, ...] = (
    "1234", "abcd", "qwerty", "asdf", "password", "0000",
)
_WEAK_SEQUENCE_RE = re.compile(
    "|".join(re.escape(seq) for seq in _WEAK_SEQUENCES), re.IGNORECASE
)

MSG_TOO_SHORT = "Password must be at least {min_length} characters long."
MSG_TOO_LONG = "Password must be less than {max_length} characters."
MSG_ADD_UPPER = "Add uppercase letters."
MSG_ADD_LOWER = "Add lowercase letters."
MSG_ADD_NUMBER = "Add numbers."
MSG_ADD_SYMBOL = "Add special characters."
MSG_REPEATED = "Avoid repeating the same character."
MSG_SEQUENCE = "Avoid simple sequences like 1234 or qwerty."
MSG_COMMON = "Password is too common."


# ===================================================================== #
#  Pattern Predicates
# ===================================================================== #


def is_single_repeated(password: str) -> bool:
    """True when the password is one character, possibly repeated."""
    return len(password) >= 1 and len(set(password)) == 1


def contains_weak_sequence(password: str) -> bool:
    """True when a well-known sequence appears anywhere, ignoring case."""
    return _WEAK_SEQUENCE_RE.search(password) is not None


def summarize(password: str) -> CheckSummary:
    """Describe which character classes appear in *password*."""
    return CheckSummary(
        upper=any(c in _UPPER for c in password),
        lower=any(c in _LOWER for c in password),
        number=any(c in _DIGITS for c in password),
        symbol=any(c not in _ALNUM for c in password),
        unique_chars=len(set(password)),
    )


class RuleChecker:
    """Runs the length, character-class, pattern and denylist checks.

    Usage::

        checker = RuleChecker()
        feedback: list[str] = []
        summary = checker.check("hunter2", settings, feedback)
    """

    def check(
        self,
        password: str,
        settings: Settings,
        feedback: list[str],
    ) -> CheckSummary:
        """Run every rule, appending one message per failed rule.

        Args:
            password: Candidate password.
            settings: Resolved settings for this call.
            feedback: Per-call feedback list, extended in place.

        Returns:
            CheckSummary of the password's composition.
        """
        summary = summarize(password)

        self._check_length(password, settings, feedback)
        self._check_character_requirements(summary, settings, feedback)
        self._check_patterns(password, feedback)
        self._check_common_passwords(password, settings, feedback)

        return summary

    @staticmethod
    def _check_length(
        password: str, settings: Settings, feedback: list[str]
    ) -> None:
        # Both bounds are tested; a min above max reports both.
        if len(password) < settings.min_length:
            feedback.append(MSG_TOO_SHORT.format(min_length=settings.min_length))
        if len(password) > settings.max_length:
            feedback.append(MSG_TOO_LONG.format(max_length=settings.max_length))

    @staticmethod
    def _check_character_requirements(
        summary: CheckSummary, settings: Settings, feedback: list[str]
    ) -> None:
        if settings.require_upper and not summary.upper:
            feedback.append(MSG_ADD_UPPER)
        if settings.require_lower and not summary.lower:
            feedback.append(MSG_ADD_LOWER)
        if settings.require_number and not summary.number:
            feedback.append(MSG_ADD_NUMBER)
        if settings.require_symbol and not summary.symbol:
            feedback.append(MSG_ADD_SYMBOL)

    @staticmethod
    def _check_patterns(password: str, feedback: list[str]) -> None:
        if is_single_repeated(password):
            feedback.append(MSG_REPEATED)
        if contains_weak_sequence(password):
            feedback.append(MSG_SEQUENCE)

    @staticmethod
    def _check_common_passwords(
        password: str, settings: Settings, feedback: list[str]
    ) -> None:
        if password.lower() in settings.common_passwords:
            feedback.append(MSG_COMMON)
