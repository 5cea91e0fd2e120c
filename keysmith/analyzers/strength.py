"""
Password Strength Analyzer
===========================

Post-hoc strength assessment of an arbitrary password.  The analyzer
asks which categories an attacker would have to search, given the
characters actually present, and sizes the brute-force keyspace from
that alphabet:

    pool_size = sum of the sizes of the categories present
    keyspace  = pool_size ^ length           (exact integer)
    entropy   = log2(keyspace) bits

Categories are the generator's own pools (see
:func:`keysmith.generators.charset.category_pools`), so a password the
generator produced with a given set of flags is always credited with
exactly those categories.  Characters outside every pool (spaces,
``~``, non-ASCII) each widen the pool by one.

The qualitative label is a fixed policy over (length, category count):

    strong    categories >= 4 and length >= 16
    moderate  categories >= 2 and length >= 12
    weak      otherwise

Crack-time estimates assume the attacker finds the password after
searching half the keyspace on average, at the speeds configured in
:class:`shared.config.AnalyzerConfig`.  They are computed in log space
because the keyspace of a long password does not fit in a float.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math
from typing import Optional

from shared.config import AnalyzerConfig, GeneratorConfig

from keysmith.core.errors import EmptyPasswordError
from keysmith.core.models import (
    Category,
    CrackTimeEstimate,
    StrengthLabel,
    StrengthReport,
)
from keysmith.generators.charset import category_pools

_SECONDS_PER_YEAR = 86400 * 365
# Largest power of ten we convert back to a float number of seconds
_MAX_FLOAT_EXPONENT = 300

_CATEGORY_NAMES: dict[Category, str] = {
    Category.LOWERCASE: "lowercase letters",
    Category.UPPERCASE: "uppercase letters",
    Category.SPECIAL: "special characters",
    Category.DIGIT: "digits",
}


class StrengthAnalyzer:
    """Assesses password strength from category coverage and length.

    Usage::

        analyzer = StrengthAnalyzer()
        report = analyzer.analyze("Abc123!@")
        print(report.strength.value, report.keyspace)

    Args:
        config: Label thresholds and attack speeds.
        generator_config: Supplies the category pools.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        generator_config: Optional[GeneratorConfig] = None,
    ) -> None:
        self.config = config or AnalyzerConfig()
        self._pools = {
            category: frozenset(chars)
            for category, chars in category_pools(generator_config).items()
        }
        self._known = frozenset().union(*self._pools.values())

    def analyze(self, password: str) -> StrengthReport:
        """Analyse *password*.

        Raises:
            EmptyPasswordError: If *password* is empty.
        """
        if not password:
            raise EmptyPasswordError()

        length = len(password)
        categories = self._detect_categories(password)
        pool_size = self._calculate_pool_size(password, categories)
        keyspace = pool_size**length
        entropy_bits = length * math.log2(pool_size)
        strength = self._rate_strength(length, len(categories))

        return StrengthReport(
            password_masked=self._mask_password(password),
            length=length,
            categories=categories,
            category_count=len(categories),
            pool_size=pool_size,
            keyspace=keyspace,
            entropy_bits=round(entropy_bits, 2),
            strength=strength,
            crack_time_estimates=self._estimate_crack_times(keyspace),
            suggestions=self._generate_suggestions(length, categories, strength),
        )

    # ------------------------------------------------------------------ #
    #  Category and Pool Detection
    # ------------------------------------------------------------------ #

    def _detect_categories(self, password: str) -> list[Category]:
        present = set(password)
        return [
            category
            for category, pool in self._pools.items()
            if not present.isdisjoint(pool)
        ]

    def _calculate_pool_size(
        self, password: str, categories: list[Category]
    ) -> int:
        """Sum the pools of the present categories plus unrecognised characters."""
        unrecognised = {c for c in password if c not in self._known}
        return sum(len(self._pools[c]) for c in categories) + len(unrecognised)

    # ------------------------------------------------------------------ #
    #  Strength Rating
    # ------------------------------------------------------------------ #

    def _rate_strength(self, length: int, category_count: int) -> StrengthLabel:
        cfg = self.config
        if (
            category_count >= cfg.strong_min_categories
            and length >= cfg.strong_min_length
        ):
            return StrengthLabel.STRONG
        if (
            category_count >= cfg.moderate_min_categories
            and length >= cfg.moderate_min_length
        ):
            return StrengthLabel.MODERATE
        return StrengthLabel.WEAK

    # ------------------------------------------------------------------ #
    #  Crack Time Estimation
    # ------------------------------------------------------------------ #

    def _estimate_crack_times(self, keyspace: int) -> list[CrackTimeEstimate]:
        """Expected time to search half the keyspace at each attack speed."""
        half_keyspace_log = math.log10(keyspace) - math.log10(2)
        estimates: list[CrackTimeEstimate] = []

        for scenario, speed in self.config.attack_speeds:
            seconds_log = half_keyspace_log - math.log10(speed)
            if seconds_log < _MAX_FLOAT_EXPONENT:
                seconds: Optional[float] = 10**seconds_log
                display = self._format_duration(seconds)
            else:
                seconds = None
                years_log = seconds_log - math.log10(_SECONDS_PER_YEAR)
                display = f"about 10^{math.floor(years_log)} years"
            estimates.append(CrackTimeEstimate(
                scenario=scenario,
                guesses_per_second=speed,
                seconds=seconds,
                display=display,
            ))

        return estimates

    @staticmethod
    def _format_duration(seconds: float) -> str:
        """Format a duration in seconds to a human-readable string."""
        if seconds < 0.001:
            return "instant"
        if seconds < 1:
            return f"{seconds * 1000:.0f} milliseconds"
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        if seconds < 3600:
            return f"{seconds / 60:.1f} minutes"
        if seconds < 86400:
            return f"{seconds / 3600:.1f} hours"
        if seconds < _SECONDS_PER_YEAR:
            return f"{seconds / 86400:.1f} days"
        years = seconds / _SECONDS_PER_YEAR
        if years < 1e3:
            return f"{years:.1f} years"
        if years < 1e6:
            return f"{years / 1e3:.1f} thousand years"
        if years < 1e9:
            return f"{years / 1e6:.1f} million years"
        if years < 1e12:
            return f"{years / 1e9:.1f} billion years"
        return f"{years:.1e} years"

    # ------------------------------------------------------------------ #
    #  Presentation Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _mask_password(password: str) -> str:
        """Show first and last character with asterisks in between."""
        if len(password) <= 2:
            return "*" * len(password)
        return password[0] + "*" * (len(password) - 2) + password[-1]

    def _generate_suggestions(
        self,
        length: int,
        categories: list[Category],
        strength: StrengthLabel,
    ) -> list[str]:
        suggestions: list[str] = []

        if length < self.config.strong_min_length:
            suggestions.append(
                f"Increase length to at least {self.config.strong_min_length} "
                f"characters (currently {length}). Each additional character "
                f"multiplies the keyspace by the pool size."
            )

        missing = [
            _CATEGORY_NAMES[c] for c in self._pools if c not in categories
        ]
        if missing:
            suggestions.append(
                f"Add {', '.join(missing)} to widen the search alphabet."
            )

        if strength == StrengthLabel.STRONG:
            suggestions.append(
                "Password meets the strong policy. Keep it unique and store "
                "it in a password manager."
            )

        return suggestions


def analyze(password: str) -> StrengthReport:
    """Analyse *password* with the default policy."""
    return StrengthAnalyzer().analyze(password)
