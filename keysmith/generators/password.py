"""
Password Generator
===================

Generates passwords that contain at least one character from every
enabled category:

1. Validate the requested length and build the character set.
2. Draw one character from each enabled category's own pool, so small
   pools are represented regardless of their share of the merged set.
3. Fill the remaining positions with draws (with replacement) from the
   merged character set.
4. Fisher-Yates shuffle the buffer so the mandatory characters do not
   sit at the front.

Every random index comes from ``RandomSource.randrange``; with the
default :class:`secrets.SystemRandom` each draw is uniform and
independent.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.4.2, Algorithm P (shuffling).
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import math
from typing import Any, Optional

from shared.config import GeneratorConfig

from keysmith.core.errors import EmptyCharsetError, LengthTooShortForCategoriesError
from keysmith.core.models import (
    Category,
    CharacterSet,
    GeneratedPassword,
    GenerationRequest,
)
from keysmith.generators.charset import build_charset
from keysmith.generators.length import LengthValidator, Notifier
from keysmith.generators.rng import RandomSource, system_random


class PasswordGenerator:
    """Category-guaranteed random password generator.

    Usage::

        generator = PasswordGenerator()
        result = generator.generate(GenerationRequest(length=20, include_numbers=True))
        print(result.password)

    Args:
        config: Alphabets and length bounds.
        rng: Random source; a fresh :func:`system_random` when omitted.
        notify: Receives the notice emitted when a length is replaced.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[RandomSource] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self._rng = rng if rng is not None else system_random()
        self._validator = LengthValidator(self.config, notify)

    def generate(self, request: GenerationRequest) -> GeneratedPassword:
        """Generate a password satisfying *request*.

        Raises:
            EmptyCharsetError: If an enabled pool is configured empty.
            LengthTooShortForCategoriesError: If the validated length is
                smaller than the number of enabled categories.
        """
        length = self._validator.validate(request.length)
        charset = build_charset(
            request.include_uppercase,
            request.include_special,
            request.include_numbers,
            config=self.config,
        )
        password = self.generate_from(length, charset)

        return GeneratedPassword(
            password=password,
            requested_length=request.length,
            length=length,
            length_adjusted=length != request.length,
            categories=charset.categories,
            pool_size=charset.size,
            entropy_bits=round(length * math.log2(charset.size), 2),
        )

    def generate_from(self, length: int, charset: CharacterSet) -> str:
        """Generate *length* characters from a prebuilt *charset*.

        The pool order of *charset* is irrelevant: every pool contributes
        one mandatory character wherever it sits.
        """
        if not charset.pools:
            raise EmptyCharsetError(Category.LOWERCASE.value)
        for pool in charset.pools:
            if not pool.chars:
                raise EmptyCharsetError(pool.category.value)
        if length < len(charset.pools):
            raise LengthTooShortForCategoriesError(length, len(charset.pools))

        buffer = [self._draw(pool.chars) for pool in charset.pools]

        merged = charset.chars
        buffer.extend(self._draw(merged) for _ in range(length - len(buffer)))

        self._shuffle(buffer)
        return "".join(buffer)

    def _draw(self, pool: str) -> str:
        return pool[self._rng.randrange(len(pool))]

    def _shuffle(self, items: list[Any]) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(items) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]


def generate(
    request: GenerationRequest,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Generate a password string for *request*."""
    return PasswordGenerator(config, rng).generate(request).password
