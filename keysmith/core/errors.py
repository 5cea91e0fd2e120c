"""
Keysmith Errors
================

Named failures for structurally impossible requests.  An out-of-range
length is not among them: it is corrected, never raised.
"""

from __future__ import annotations


class KeysmithError(Exception):
    """Base class for errors that abort a single Keysmith operation."""


class EmptyCharsetError(KeysmithError):
    """A character pool required for generation is empty."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(
            f"The {category} character pool is empty; "
            f"generation requires a non-empty pool"
        )


class LengthTooShortForCategoriesError(KeysmithError):
    """The password length cannot hold one character per mandatory category."""

    def __init__(self, length: int, categories: int) -> None:
        self.length = length
        self.categories = categories
        super().__init__(
            f"Length {length} is too short to include one character "
            f"from each of the {categories} enabled categories"
        )


class EmptyPasswordError(KeysmithError):
    """Strength analysis was requested for an empty string."""

    def __init__(self) -> None:
        super().__init__("Cannot analyze an empty password")
