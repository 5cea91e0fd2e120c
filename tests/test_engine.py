import random

import pytest

from shared.config import ForgeConfig, GeneratorConfig
from shared.models import Severity
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import EmptyCharsetError, EmptyPasswordError
from keysmith.core.models import Category, StrengthLabel


@pytest.fixture
def engine():
    return KeysmithEngine(rng=random.Random(7))


def test_default_length_when_none(engine):
    generated = engine.generate()
    assert generated.length == 16
    assert generated.notices == []
    assert generated.categories == [Category.LOWERCASE]


def test_out_of_range_length_collects_notice(engine):
    generated = engine.generate(length=5, include_numbers=True)
    assert len(generated.password) == 16
    assert generated.length_adjusted
    assert len(generated.notices) == 1
    assert "got 5" in generated.notices[0]


def test_generation_result_envelope(engine):
    generated = engine.generate(length=300)
    result = engine.generation_result(generated)
    assert result.tool_name == "generate"
    assert result.end_time is not None
    severities = [f.severity for f in result.findings]
    assert severities == [Severity.INFO, Severity.LOW]
    assert result.metadata["password"] == generated.password
    assert result.metadata["requested_length"] == 300


def test_analysis_result_envelope(engine):
    report = engine.analyze("Abc123!@")
    assert report.strength == StrengthLabel.WEAK
    result = engine.analysis_result(report)
    assert result.findings[0].severity == Severity.HIGH
    assert result.highest_severity == Severity.HIGH
    assert result.metadata["keyspace"] == 77**8
    assert result.metadata["password_masked"] == "A******@"


def test_strong_password_maps_to_info(engine):
    result = engine.analysis_result(engine.analyze("Abcdefgh1!xyzuvw"))
    assert result.findings[0].severity == Severity.INFO


def test_analyze_empty_raises(engine):
    with pytest.raises(EmptyPasswordError):
        engine.analyze("")


def test_engine_uses_configured_pools():
    config = ForgeConfig(generator=GeneratorConfig(special="#", default_length=10))
    engine = KeysmithEngine(config, rng=random.Random(3))
    generated = engine.generate(include_special=True)
    assert generated.length == 10
    assert "#" in generated.password
    assert engine.analyze(generated.password).pool_size == 27


def test_engine_reraises_core_errors():
    config = ForgeConfig(generator=GeneratorConfig(uppercase=""))
    engine = KeysmithEngine(config)
    with pytest.raises(EmptyCharsetError):
        engine.generate(include_uppercase=True)


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "keysmith.log"
    config = ForgeConfig()
    config.global_settings.log_level = "INFO"
    config.global_settings.log_file = str(log_file)
    config.global_settings.log_json = True

    engine = KeysmithEngine(config, rng=random.Random(1))
    generated = engine.generate(length=12)
    for handler in engine.logger.underlying.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert '"component": "engine"' in content
    assert '"operation": "generate"' in content
    assert generated.password not in content
