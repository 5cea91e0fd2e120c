"""
Length Validator
=================

Accepts a requested password length or silently replaces it with the
configured default.  An out-of-range request is corrected, never
rejected; there is no clamping to the nearest bound.
"""

from __future__ import annotations

from typing import Callable, Optional

from shared.config import GeneratorConfig
from shared.logger import ForgeLogger

Notifier = Callable[[str], None]


class LengthValidator:
    """Validates requested lengths against a :class:`GeneratorConfig`.

    Args:
        config: Length bounds and default. Uses the stock 8..128 / 16 when omitted.
        notify: Receives the user-facing notice when a length is replaced.
            Defaults to a WARNING on the ``keysmith.length`` logger.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        if notify is None:
            notify = ForgeLogger("length").warning
        self._notify = notify

    def is_valid(self, requested: int) -> bool:
        return self.config.min_length <= requested <= self.config.max_length

    def validate(self, requested: int) -> int:
        """Return *requested* if it is in range, the default length otherwise."""
        if self.is_valid(requested):
            return requested
        self._notify(
            f"Password length must be between {self.config.min_length} and "
            f"{self.config.max_length}; got {requested}, using the default "
            f"of {self.config.default_length}."
        )
        return self.config.default_length


def validate_length(
    requested: int,
    config: Optional[GeneratorConfig] = None,
    notify: Optional[Notifier] = None,
) -> int:
    """Functional form of :meth:`LengthValidator.validate`."""
    return LengthValidator(config, notify).validate(requested)
