"""
pwquality Output Module
========================

Console display and JSON report generation for evaluation results.
"""

from pwquality.output.console import QualityConsoleOutput
from pwquality.output.report import QualityReportGenerator

__all__ = [
    "QualityConsoleOutput",
    "QualityReportGenerator",
]
