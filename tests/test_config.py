import pytest

from shared.config import AnalyzerConfig, ForgeConfig, GeneratorConfig


def test_defaults():
    config = ForgeConfig()
    assert config.generator.min_length == 8
    assert config.generator.max_length == 128
    assert config.generator.default_length == 16
    assert config.generator.special == "!@#$%^&*_-+=<>?"
    assert config.analyzer.strong_min_categories == 4
    assert config.global_settings.log_level == "WARNING"


def test_load_from_toml(tmp_path):
    path = tmp_path / "keysmith.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "\n"
        "[generator]\n"
        "min_length = 10\n"
        "default_length = 20\n"
        'special = "#!"\n'
        "unknown_key = 1\n"
        "\n"
        "[analyzer]\n"
        "strong_min_length = 20\n"
        "\n"
        "[analyzer.attack_speeds]\n"
        '"Offline attack" = 1e10\n',
        encoding="utf-8",
    )
    config = ForgeConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.generator.min_length == 10
    assert config.generator.default_length == 20
    assert config.generator.special == "#!"
    assert config.generator.max_length == 128
    assert config.analyzer.strong_min_length == 20
    assert config.analyzer.attack_speeds == (("Offline attack", 1e10),)


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ForgeConfig.load(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_length": 0},
        {"min_length": 20, "max_length": 10},
        {"default_length": 200},
    ],
)
def test_inconsistent_generator_bounds(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)


def test_inconsistent_analyzer_thresholds():
    with pytest.raises(ValueError):
        AnalyzerConfig(strong_min_length=10)
    with pytest.raises(ValueError):
        AnalyzerConfig(attack_speeds={"broken": 0})


def test_generator_config_is_frozen():
    config = GeneratorConfig()
    with pytest.raises(AttributeError):
        config.min_length = 1


def test_to_dict():
    data = ForgeConfig().to_dict()
    assert data["generator"]["default_length"] == 16
    assert "attack_speeds" in data["analyzer"]


@pytest.mark.parametrize(
    "section,body",
    [
        ("generator", 'min_length = "x"'),
        ("generator", "default_length = true"),
        ("generator", "special = 5"),
        ("analyzer", 'strong_min_length = "16"'),
        ("analyzer", 'attack_speeds = "fast"'),
        ("global", "log_json = 1"),
    ],
)
def test_wrong_value_types_raise_value_error(tmp_path, section, body):
    path = tmp_path / "keysmith.toml"
    path.write_text(f"[{section}]\n{body}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ForgeConfig.load(path)


def test_section_must_be_a_table(tmp_path):
    path = tmp_path / "keysmith.toml"
    path.write_text("generator = 5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ForgeConfig.load(path)


def test_attack_speeds_are_immutable_pairs():
    config = AnalyzerConfig(attack_speeds={"Slow": 10, "Fast": 1e6})
    assert config.attack_speeds == (("Slow", 10.0), ("Fast", 1e6))
    assert isinstance(config.attack_speeds, tuple)
    assert hash(config) == hash(AnalyzerConfig(attack_speeds=[("Slow", 10), ("Fast", 1e6)]))


def test_default_attack_speeds_order():
    speeds = [speed for _, speed in AnalyzerConfig().attack_speeds]
    assert speeds == [1e3, 1e4, 1e9, 1e12]
