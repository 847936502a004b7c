"""
pwquality Module Entry Point
=============================

Allows running the CLI via: python -m pwquality
"""

from pwquality.cli import main

if __name__ == "__main__":
    main()
