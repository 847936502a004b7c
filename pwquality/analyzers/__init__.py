"""
pwquality Analyzers
====================

Pipeline stages used by the engine: rule checks, entropy estimation
and scoring.
"""

from pwquality.analyzers.entropy import EntropyEstimator
from pwquality.analyzers.rules import RuleChecker
from pwquality.analyzers.scoring import Scorer

__all__ = [
    "EntropyEstimator",
    "RuleChecker",
    "Scorer",
]
