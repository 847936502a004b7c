"""
pwquality Exceptions
=====================

Errors raised by the configuration layer and surfaced by the CLI.
Password evaluation itself never raises; rejected input is reported
through the returned result.
"""

from __future__ import annotations


class PwQualityError(Exception):
    """Base class for all pwquality errors."""


class ConfigFileError(PwQualityError):
    """A configuration file is missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
