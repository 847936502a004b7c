"""
pwquality Core Module
======================

Evaluation engine, settings resolver and data models.
"""

from pwquality.core.engine import QualityEngine, check_password_quality
from pwquality.core.models import (
    CheckSummary,
    QualityResult,
    Strength,
    invalid_result,
)
from pwquality.core.settings import DEFAULT_SETTINGS, Settings, resolve_settings

__all__ = [
    "CheckSummary",
    "DEFAULT_SETTINGS",
    "QualityEngine",
    "QualityResult",
    "Settings",
    "Strength",
    "check_password_quality",
    "invalid_result",
    "resolve_settings",
]
