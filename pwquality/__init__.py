"""
pwquality -- Password Quality Checker
======================================

Scores a candidate password against heuristic rules (length bounds,
character-class coverage, weak patterns, a common-password denylist and
an entropy floor) and returns a 0-100 score, a strength label and
actionable feedback.

Modules:
    - pwquality.core.engine: Evaluation pipeline orchestrator
    - pwquality.core.models: Pydantic result models
    - pwquality.core.settings: Settings record and option resolver
    - pwquality.analyzers: Rule checker, entropy estimator, scorer
    - pwquality.output: Console and JSON report output
    - pwquality.cli: Click-based command-line interface

Usage::

    from pwquality import check_password_quality

    result = check_password_quality("Tr0ub4dor&3xyz")
    result.valid, result.score, result.strength.value
"""

__version__ = "1.0.0"

import logging

from pwquality.core.engine import QualityEngine, check_password_quality
from pwquality.core.models import CheckSummary, QualityResult, Strength
from pwquality.core.settings import DEFAULT_SETTINGS, Settings, resolve_settings

__all__ = [
    "CheckSummary",
    "DEFAULT_SETTINGS",
    "QualityEngine",
    "QualityResult",
    "Settings",
    "Strength",
    "check_password_quality",
    "resolve_settings",
]

# Library records go to the host application's logging configuration.
logging.getLogger(__name__).addHandler(logging.NullHandler())
