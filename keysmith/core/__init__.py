"""
Keysmith Core Module
=====================

Data models and the error taxonomy.  The engine facade lives in
:mod:`keysmith.core.engine` and is imported from there.
"""

from keysmith.core.errors import (
    EmptyCharsetError,
    EmptyPasswordError,
    KeysmithError,
    LengthTooShortForCategoriesError,
)
from keysmith.core.models import (
    Category,
    CategoryPool,
    CharacterSet,
    CrackTimeEstimate,
    GeneratedPassword,
    GenerationRequest,
    StrengthLabel,
    StrengthReport,
)

__all__ = [
    "Category",
    "CategoryPool",
    "CharacterSet",
    "CrackTimeEstimate",
    "EmptyCharsetError",
    "EmptyPasswordError",
    "GeneratedPassword",
    "GenerationRequest",
    "KeysmithError",
    "LengthTooShortForCategoriesError",
    "StrengthLabel",
    "StrengthReport",
]
