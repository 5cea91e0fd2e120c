"""
Keysmith Configuration Management
==================================

Centralized configuration for the Keysmith toolkit using Python
dataclasses and TOML-based persistence.

The generator and analyzer sections are frozen: alphabets, length bounds
and strength thresholds are owned by an immutable object that is passed
into the components instead of living in module-level globals, so tests
can substitute alternate alphabets in isolation.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "keysmith.toml"


# ========================== Field Validation ===============================

_SCALAR_TYPES: dict[str, type] = {"int": int, "str": str, "bool": bool}


def _check_scalar_fields(section: Any) -> None:
    """Raise ``ValueError`` when a scalar field holds a value of the wrong type.

    TOML values reach the dataclasses unchecked; ``bool`` is rejected
    where an ``int`` is expected even though it subclasses ``int``.
    """
    for f in fields(section):
        expected = _SCALAR_TYPES.get(f.type)
        if expected is None:
            continue
        value = getattr(section, f.name)
        if not isinstance(value, expected) or (
            isinstance(value, bool) and expected is not bool
        ):
            raise ValueError(
                f"{type(section).__name__}.{f.name} must be of type "
                f"{f.type}, got {value!r}"
            )


def _speed_pairs(value: Any) -> tuple[tuple[str, float], ...]:
    """Normalise a TOML table or a sequence of pairs to ``(scenario, speed)`` pairs."""
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError(f"attack_speeds must be a table, got {value!r}")

    pairs: list[tuple[str, float]] = []
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"Malformed attack speed entry: {item!r}")
        scenario, speed = item
        if (
            not isinstance(scenario, str)
            or isinstance(speed, bool)
            or not isinstance(speed, (int, float))
        ):
            raise ValueError(f"Malformed attack speed entry: {item!r}")
        if speed <= 0:
            raise ValueError(
                f"Attack speed for {scenario!r} must be positive, got {speed}"
            )
        pairs.append((scenario, float(speed)))
    return tuple(pairs)


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Length bounds and character pools used by the password generator.

    The same four pools form the category taxonomy of the strength
    analyzer, so both sides always agree on what "special" means.
    """

    min_length: int = 8
    max_length: int = 128
    default_length: int = 16
    lowercase: str = "abcdefghijklmnopqrstuvwxyz"
    uppercase: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    special: str = "!@#$%^&*_-+=<>?"
    digits: str = "0123456789"

    def __post_init__(self) -> None:
        _check_scalar_fields(self)
        if self.min_length < 1:
            raise ValueError(
                f"min_length must be positive, got {self.min_length}"
            )
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) exceeds "
                f"max_length ({self.max_length})"
            )
        if not self.min_length <= self.default_length <= self.max_length:
            raise ValueError(
                f"default_length ({self.default_length}) must lie in "
                f"[{self.min_length}, {self.max_length}]"
            )


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Strength label thresholds and crack-time attack scenarios.

    A password is labelled ``strong`` when it reaches both strong
    thresholds, ``moderate`` when it reaches both moderate thresholds,
    and ``weak`` otherwise.  Requiring the strong thresholds to be at
    least the moderate ones keeps the label monotonic in length and in
    category count.

    ``attack_speeds`` accepts a mapping (the TOML table form) and is
    stored as ordered ``(scenario, guesses_per_second)`` pairs.
    """

    moderate_min_length: int = 12
    moderate_min_categories: int = 2
    strong_min_length: int = 16
    strong_min_categories: int = 4
    attack_speeds: tuple[tuple[str, float], ...] = (
        ("Online attack (throttled)", 1e3),
        ("Offline attack (bcrypt, cost 10)", 1e4),
        ("Offline attack (fast hash, e.g. MD5 on GPU)", 1e9),
        ("Massive parallel / state-level", 1e12),
    )

    def __post_init__(self) -> None:
        _check_scalar_fields(self)
        if self.strong_min_length < self.moderate_min_length:
            raise ValueError(
                "strong_min_length must not be lower than moderate_min_length"
            )
        if self.strong_min_categories < self.moderate_min_categories:
            raise ValueError(
                "strong_min_categories must not be lower than "
                "moderate_min_categories"
            )
        object.__setattr__(self, "attack_speeds", _speed_pairs(self.attack_speeds))


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations.

    An empty ``log_file`` disables file logging.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        _check_scalar_fields(self)


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating global, generator and analyzer settings.

    Usage:
        >>> config = ForgeConfig.load()                    # from default path
        >>> config = ForgeConfig.load("custom.toml")       # from custom path
        >>> config.generator.default_length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``keysmith.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ForgeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If a section holds inconsistent values.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files do not break older code.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"[{cls.__name__}] section must be a TOML table, got {data!r}"
            )
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

