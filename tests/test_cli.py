import json

import pytest
from click.testing import CliRunner

from keysmith import __version__
from keysmith.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _password_line(output):
    lines = [line for line in output.splitlines() if line.startswith("Generated Password: ")]
    assert len(lines) == 1
    return lines[0][len("Generated Password: "):]


def test_generate_default(runner):
    result = runner.invoke(cli, ["generate"])
    assert result.exit_code == 0, result.output
    password = _password_line(result.output)
    assert len(password) == 16
    assert password.islower()


def test_generate_all_flags_quiet(runner):
    result = runner.invoke(cli, ["-q", "generate", "-l", "24", "-u", "-s", "-n"])
    assert result.exit_code == 0, result.output
    password = _password_line(result.output)
    assert len(password) == 24
    assert any(c.isupper() for c in password)
    assert any(c.isdigit() for c in password)
    assert any(c in "!@#$%^&*_-+=<>?" for c in password)


def test_generate_long_options(runner):
    result = runner.invoke(
        cli, ["generate", "--length", "30", "--uppercase-chars", "--numbers"]
    )
    assert result.exit_code == 0, result.output
    assert len(_password_line(result.output)) == 30


@pytest.mark.parametrize("length", ["7", "129", "0"])
def test_generate_out_of_range_warns_and_uses_default(runner, length):
    result = runner.invoke(cli, ["-q", "generate", "-l", length])
    assert result.exit_code == 0, result.output
    assert len(_password_line(result.output)) == 16
    assert "between 8 and 128" in result.output


def test_generate_rejects_non_integer_length(runner):
    result = runner.invoke(cli, ["generate", "-l", "ten"])
    assert result.exit_code == 2


def test_generate_json(runner):
    result = runner.invoke(cli, ["-o", "json", "generate", "-l", "20", "-n"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["report_metadata"]["tool"] == "generate"
    assert len(data["result"]["password"]) == 20


def test_analyze_console(runner):
    result = runner.invoke(cli, ["analyze", "Abc123!@"])
    assert result.exit_code == 0, result.output
    assert "Password Strength Analysis:" in result.output
    assert "WEAK" in result.output


def test_analyze_quiet(runner):
    result = runner.invoke(cli, ["-q", "analyze", "abc"])
    assert result.exit_code == 0, result.output
    assert "Strength:   weak" in result.output
    assert "Keyspace:   17,576" in result.output


def test_analyze_json(runner):
    result = runner.invoke(cli, ["-o", "json", "analyze", "Abc123!@"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["result"]["category_count"] == 4
    assert data["result"]["keyspace"] == 77**8
    assert data["summary"]["severity_counts"]["HIGH"] == 1


def test_analyze_html_report(runner, tmp_path):
    report_path = tmp_path / "report.html"
    result = runner.invoke(
        cli, ["-o", "html", "-f", str(report_path), "analyze", "Abc<b>123"]
    )
    assert result.exit_code == 0, result.output
    html = report_path.read_text(encoding="utf-8")
    assert "Keysmith" in html
    assert "<b>" not in html


def test_analyze_missing_argument(runner):
    result = runner.invoke(cli, ["analyze"])
    assert result.exit_code == 2


def test_analyze_empty_password(runner):
    result = runner.invoke(cli, ["analyze", ""])
    assert result.exit_code == 1
    assert "Cannot analyze an empty password" in result.output


def test_config_file_changes_default_length(runner, tmp_path):
    config_path = tmp_path / "keysmith.toml"
    config_path.write_text("[generator]\ndefault_length = 20\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config_path), "-q", "generate"])
    assert result.exit_code == 0, result.output
    assert len(_password_line(result.output)) == 20


def test_invalid_config_file(runner, tmp_path):
    config_path = tmp_path / "keysmith.toml"
    config_path.write_text("[generator]\nmin_length = 50\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config_path), "generate"])
    assert result.exit_code == 2


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_json_output_keeps_notices_off_stdout(runner):
    result = runner.invoke(cli, ["-o", "json", "generate", "-l", "5"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert len(data["result"]["password"]) == 16
    assert "between 8 and 128" in result.stderr
    assert data["findings"][1]["recommendation"] == "Request a length between 8 and 128."


def test_console_notice_stays_on_stdout(runner):
    result = runner.invoke(cli, ["generate", "-l", "5"])
    assert result.exit_code == 0, result.output
    assert "between 8 and 128" in result.stdout
    assert result.stderr == ""


def test_config_value_of_wrong_type_is_usage_error(runner, tmp_path):
    config_path = tmp_path / "keysmith.toml"
    config_path.write_text('[generator]\nmin_length = "x"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config_path), "generate"])
    assert result.exit_code == 2
    assert "min_length" in result.output


def test_html_report_shows_recommendations(runner, tmp_path):
    report_path = tmp_path / "weak.html"
    result = runner.invoke(cli, ["-o", "html", "-f", str(report_path), "analyze", "abc"])
    assert result.exit_code == 0, result.output
    assert "Recommendation: Increase length" in report_path.read_text(encoding="utf-8")
