"""
Keysmith Generators
====================

Length validation, character-set construction and category-guaranteed
password generation.
"""

from keysmith.generators.charset import build_charset, category_pools
from keysmith.generators.length import LengthValidator, validate_length
from keysmith.generators.password import PasswordGenerator, generate
from keysmith.generators.rng import RandomSource, system_random

__all__ = [
    "LengthValidator",
    "PasswordGenerator",
    "RandomSource",
    "build_charset",
    "category_pools",
    "generate",
    "system_random",
    "validate_length",
]
