"""
Keysmith Core Data Models
==========================

Pydantic models for password generation requests, character sets,
generated passwords and strength reports.  Everything here is transient:
a model lives for one command invocation.
"""

from __future__ import annotations

import enum
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# Python refuses to stringify ints beyond ~4300 digits; keyspaces wider
# than this are serialised in scientific notation.
_MAX_EXACT_KEYSPACE_BITS = 14_000


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Category(str, enum.Enum):
    """Character category, in the order pools are added to a charset."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    SPECIAL = "special"
    DIGIT = "digit"


class StrengthLabel(str, enum.Enum):
    """Qualitative password strength rating."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class GenerationRequest(BaseModel):
    """Composition rules for one generated password.

    ``length`` is taken as requested; the length validator decides
    whether it is used or replaced by the default.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 16
    include_uppercase: bool = False
    include_special: bool = False
    include_numbers: bool = False


class CategoryPool(BaseModel):
    """The characters belonging to one category."""

    model_config = ConfigDict(frozen=True)

    category: Category
    chars: str


class CharacterSet(BaseModel):
    """Ordered category pools making up the generation alphabet.

    The merged sequence keeps every pool's characters in order; nothing
    is de-duplicated across categories.
    """

    model_config = ConfigDict(frozen=True)

    pools: tuple[CategoryPool, ...] = ()

    @property
    def chars(self) -> str:
        """Flat merged character sequence."""
        return "".join(pool.chars for pool in self.pools)

    @property
    def categories(self) -> list[Category]:
        return [pool.category for pool in self.pools]

    @property
    def size(self) -> int:
        return sum(len(pool.chars) for pool in self.pools)

    def pool_for(self, category: Category) -> str:
        """Return the characters of *category*, or ``""`` if not enabled."""
        for pool in self.pools:
            if pool.category == category:
                return pool.chars
        return ""


class GeneratedPassword(BaseModel):
    """A generated password and the parameters that produced it.

    Attributes:
        password: The password itself.
        requested_length: Length the caller asked for.
        length: Effective length after validation.
        length_adjusted: Whether the requested length was replaced.
        categories: Categories guaranteed to appear in the password.
        pool_size: Size of the merged generation alphabet.
        entropy_bits: ``length * log2(pool_size)`` for uniform generation.
        notices: User-facing notices raised while generating.
    """

    password: str
    requested_length: int
    length: int
    length_adjusted: bool = False
    categories: list[Category] = Field(default_factory=list)
    pool_size: int = 0
    entropy_bits: float = 0.0
    notices: list[str] = Field(default_factory=list)


# ===================================================================== #
#  Strength Analysis Models
# ===================================================================== #


class CrackTimeEstimate(BaseModel):
    """Expected brute-force time at one attack speed.

    Attributes:
        scenario: Description of the attack scenario.
        guesses_per_second: Attack speed.
        seconds: Expected time (half the keyspace); ``None`` when it
            does not fit in a float.
        display: Human-readable duration.
    """

    scenario: str
    guesses_per_second: float
    seconds: Optional[float] = None
    display: str = ""


class StrengthReport(BaseModel):
    """Post-hoc strength assessment of a password.

    Attributes:
        password_masked: First and last character with asterisks between.
        length: Password length in characters.
        categories: Categories observed in the password.
        category_count: Number of observed categories.
        pool_size: Search alphabet an attacker needs, from observed categories.
        keyspace: ``pool_size ** length``, exact.
        entropy_bits: ``log2(keyspace)``.
        strength: Qualitative label.
        crack_time_estimates: Expected crack time per attack scenario.
        suggestions: Ways to strengthen the password.
    """

    password_masked: str = ""
    length: int = 0
    categories: list[Category] = Field(default_factory=list)
    category_count: int = 0
    pool_size: int = 0
    keyspace: int = 0
    entropy_bits: float = 0.0
    strength: StrengthLabel = StrengthLabel.WEAK
    crack_time_estimates: list[CrackTimeEstimate] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    @field_serializer("keyspace", when_used="json")
    def _serialize_keyspace(self, keyspace: int) -> int | str:
        if keyspace.bit_length() > _MAX_EXACT_KEYSPACE_BITS:
            return format_keyspace(keyspace)
        return keyspace


def format_keyspace(keyspace: int) -> str:
    """Render a keyspace exactly when short, in scientific notation otherwise.

    >>> format_keyspace(17576)
    '17,576'
    >>> format_keyspace(10 ** 30)
    '1.00e+30'
    """
    if keyspace < 10**21:
        return f"{keyspace:,}"
    log = math.log10(keyspace)
    exponent = math.floor(log)
    mantissa = 10 ** (log - exponent)
    if round(mantissa, 2) >= 10:
        mantissa /= 10
        exponent += 1
    return f"{mantissa:.2f}e+{exponent}"
