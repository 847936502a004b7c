"""
pwquality Shared Module
========================

Configuration, logging and console utilities used by the engine and
the command-line tool.
"""

from pwquality.shared.config import AppConfig, GlobalConfig

__all__ = ["AppConfig", "GlobalConfig"]
