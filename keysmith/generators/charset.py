"""
Charset Builder
================

Composes the generation alphabet from the enabled categories.  Lowercase
is always present; uppercase, special and digit pools follow in that
fixed order when requested.
"""

from __future__ import annotations

from typing import Optional

from shared.config import GeneratorConfig

from keysmith.core.errors import EmptyCharsetError
from keysmith.core.models import Category, CategoryPool, CharacterSet


def category_pools(config: Optional[GeneratorConfig] = None) -> dict[Category, str]:
    """Map every category to its configured pool, in charset order.

    This is the single category taxonomy shared by the generator and the
    strength analyzer.
    """
    config = config or GeneratorConfig()
    return {
        Category.LOWERCASE: config.lowercase,
        Category.UPPERCASE: config.uppercase,
        Category.SPECIAL: config.special,
        Category.DIGIT: config.digits,
    }


def build_charset(
    include_uppercase: bool = False,
    include_special: bool = False,
    include_numbers: bool = False,
    config: Optional[GeneratorConfig] = None,
) -> CharacterSet:
    """Build the character set for the given category flags.

    Raises:
        EmptyCharsetError: If the lowercase pool, or any enabled pool, is
            configured empty.
    """
    pools = category_pools(config)
    enabled = {
        Category.LOWERCASE: True,
        Category.UPPERCASE: include_uppercase,
        Category.SPECIAL: include_special,
        Category.DIGIT: include_numbers,
    }

    selected: list[CategoryPool] = []
    for category, chars in pools.items():
        if not enabled[category]:
            continue
        if not chars:
            raise EmptyCharsetError(category.value)
        selected.append(CategoryPool(category=category, chars=chars))

    return CharacterSet(pools=tuple(selected))
