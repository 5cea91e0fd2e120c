"""
Keysmith Engine
================

Facade over the password generator and the strength analyzer.  The
engine owns configuration and logging, runs one operation per call and
converts the typed results into :class:`shared.models.ToolResult`
envelopes for the report writers.

Errors from the core (:class:`keysmith.core.errors.KeysmithError`) are
logged and re-raised; the CLI decides how to present them.
"""

from __future__ import annotations

from typing import Optional

from shared.config import ForgeConfig
from shared.logger import ForgeLogger
from shared.models import Finding, Severity, ToolResult

from keysmith.analyzers.strength import StrengthAnalyzer
from keysmith.core.errors import KeysmithError
from keysmith.core.models import (
    GeneratedPassword,
    GenerationRequest,
    StrengthLabel,
    StrengthReport,
    format_keyspace,
)
from keysmith.generators.password import PasswordGenerator
from keysmith.generators.rng import RandomSource

_STRENGTH_SEVERITY: dict[StrengthLabel, Severity] = {
    StrengthLabel.WEAK: Severity.HIGH,
    StrengthLabel.MODERATE: Severity.MEDIUM,
    StrengthLabel.STRONG: Severity.INFO,
}


class KeysmithEngine:
    """Runs generate and analyze operations.

    Usage::

        engine = KeysmithEngine()
        generated = engine.generate(length=20, include_numbers=True)
        report = engine.analyze("Abc123!@")

    Args:
        config: Keysmith configuration; defaults when omitted.
        rng: Random source shared by every generation of this engine.
            ``None`` gives each generation its own OS-entropy source.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        self._rng = rng
        settings = self.config.global_settings
        self.logger = ForgeLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )
        self._analyzer = StrengthAnalyzer(self.config.analyzer, self.config.generator)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(
        self,
        length: Optional[int] = None,
        include_uppercase: bool = False,
        include_special: bool = False,
        include_numbers: bool = False,
    ) -> GeneratedPassword:
        """Generate one password.

        Args:
            length: Requested length; the configured default when ``None``.
            include_uppercase: Guarantee at least one uppercase letter.
            include_special: Guarantee at least one special character.
            include_numbers: Guarantee at least one digit.

        Returns:
            The generated password with any length notices attached.
        """
        request = GenerationRequest(
            length=self.config.generator.default_length if length is None else length,
            include_uppercase=include_uppercase,
            include_special=include_special,
            include_numbers=include_numbers,
        )
        notices: list[str] = []

        def _notify(message: str) -> None:
            notices.append(message)
            self.logger.info(message)

        generator = PasswordGenerator(self.config.generator, rng=self._rng, notify=_notify)

        with self.logger.operation("generate"), self.logger.timed("password generation"):
            try:
                generated = generator.generate(request)
            except KeysmithError as exc:
                self.logger.error("Password generation failed: %s", exc)
                raise

            self.logger.info(
                "Generated password of length %d from a pool of %d characters",
                generated.length,
                generated.pool_size,
                categories=[c.value for c in generated.categories],
            )
        return generated.model_copy(update={"notices": notices})

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> StrengthReport:
        """Analyse the strength of *password*."""
        with self.logger.operation("analyze"), self.logger.timed("strength analysis"):
            try:
                report = self._analyzer.analyze(password)
            except KeysmithError as exc:
                self.logger.error("Password analysis failed: %s", exc)
                raise

            self.logger.info(
                "Analysed password of length %d: %s",
                report.length,
                report.strength.value,
                category_count=report.category_count,
            )
        return report

    # ------------------------------------------------------------------ #
    #  Result Envelopes
    # ------------------------------------------------------------------ #

    def generation_result(self, generated: GeneratedPassword) -> ToolResult:
        """Wrap a generated password into a :class:`ToolResult`."""
        result = ToolResult(tool_name="generate", target="[generated password]")
        result.metadata = generated.model_dump(mode="json")

        result.add_finding(Finding(
            severity=Severity.INFO,
            title="Password Generated",
            description=(
                f"Generated {generated.length} characters from a pool of "
                f"{generated.pool_size} ({generated.entropy_bits:.2f} bits)."
            ),
            evidence={
                "length": generated.length,
                "pool_size": generated.pool_size,
                "categories": [c.value for c in generated.categories],
            },
        ))
        for notice in generated.notices:
            result.add_finding(Finding(
                severity=Severity.LOW,
                title="Requested Length Replaced",
                description=notice,
                evidence={"requested_length": generated.requested_length},
                recommendation=(
                    f"Request a length between {self.config.generator.min_length} "
                    f"and {self.config.generator.max_length}."
                ),
            ))

        return result.finalize(
            f"Generated a {generated.length}-character password "
            f"({generated.entropy_bits:.2f} bits)"
        )

    def analysis_result(self, report: StrengthReport) -> ToolResult:
        """Wrap a strength report into a :class:`ToolResult`."""
        result = ToolResult(tool_name="analyze", target="[password]")
        result.metadata = report.model_dump(mode="json")

        result.add_finding(Finding(
            severity=_STRENGTH_SEVERITY[report.strength],
            title=f"Password Strength: {report.strength.value.title()}",
            description=(
                f"Length {report.length}, {report.category_count} categories, "
                f"pool of {report.pool_size} characters, keyspace "
                f"{format_keyspace(report.keyspace)} "
                f"({report.entropy_bits:.2f} bits)."
            ),
            evidence={
                "categories": [c.value for c in report.categories],
                "pool_size": report.pool_size,
                "entropy_bits": report.entropy_bits,
            },
        ))
        for suggestion in report.suggestions:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Improvement Suggestion",
                description=f"The password is rated {report.strength.value}.",
                recommendation=suggestion,
            ))

        return result.finalize(
            f"Password strength: {report.strength.value}, "
            f"entropy={report.entropy_bits:.1f} bits"
        )
