"""
Evaluation Settings
====================

Immutable settings record for the password quality pipeline and the
resolver that overlays caller options onto the built-in defaults.

The overlay is shallow: each recognised option replaces the default
value as a whole (the common-password denylist is never appended to).
Unrecognised option keys are carried along in :attr:`Settings.extra`
and ignored by every stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional


_DEFAULT_COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "password123", "123456", "qwerty",
    "admin", "welcome", "abc123", "123123",
})

# Public (camelCase) option names -> Settings attribute names
OPTION_KEYS: Mapping[str, str] = MappingProxyType({
    "minLength": "min_length",
    "maxLength": "max_length",
    "requireUpper": "require_upper",
    "requireLower": "require_lower",
    "requireNumber": "require_number",
    "requireSymbol": "require_symbol",
    "minEntropy": "min_entropy",
    "commonPasswords": "common_passwords",
})


@dataclass(frozen=True, slots=True)
class Settings:
    """Effective configuration for a single evaluation.

    Attributes:
        min_length: Minimum acceptable password length.
        max_length: Maximum acceptable password length.
        require_upper: Report missing uppercase letters.
        require_lower: Report missing lowercase letters.
        require_number: Report missing digits.
        require_symbol: Report missing special characters.
        min_entropy: Entropy floor in bits.
        common_passwords: Denylisted passwords, compared against the
            lowercased candidate.
        extra: Unrecognised option keys, passed through untouched.
    """

    min_length: int = 8
    max_length: int = 128
    require_upper: bool = True
    require_lower: bool = True
    require_number: bool = True
    require_symbol: bool = True
    min_entropy: float = 35
    common_passwords: frozenset[str] = _DEFAULT_COMMON_PASSWORDS
    extra: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_options(self) -> dict[str, Any]:
        """Return the settings keyed by their public option names."""
        options: dict[str, Any] = {
            key: getattr(self, attr) for key, attr in OPTION_KEYS.items()
        }
        options["commonPasswords"] = sorted(self.common_passwords)
        return options


DEFAULT_SETTINGS = Settings()


def resolve_settings(options: Optional[Mapping[str, Any]] = None) -> Settings:
    """Overlay *options* onto :data:`DEFAULT_SETTINGS`.

    Only the public option names in :data:`OPTION_KEYS` are recognised;
    any other key, including attribute spellings such as ``min_length``,
    lands in :attr:`Settings.extra`. Values are taken as-is.

    Args:
        options: Partial option mapping. ``None`` means all defaults.

    Returns:
        A new :class:`Settings` record; the defaults are never mutated.
    """
    if not options:
        return DEFAULT_SETTINGS

    known: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in options.items():
        attr = OPTION_KEYS.get(key)
        if attr is None:
            extra[key] = value
        else:
            known[attr] = value

    if "common_passwords" in known:
        denylist = known["common_passwords"]
        if isinstance(denylist, str):
            denylist = [denylist]
        known["common_passwords"] = frozenset(denylist or ())

    return replace(DEFAULT_SETTINGS, extra=MappingProxyType(extra), **known)
