import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_convert_with_style(runner, fresh_settings):
    result = runner.invoke(cli, ["convert", "-s", "dot", "someCamelCase", "first name"])
    assert result.exit_code == 0
    assert result.stdout == "some.camel.case\nfirst.name\n"


def test_convert_uses_default_style(runner, fresh_settings):
    result = runner.invoke(cli, ["convert", "user_id", "SCREEN_NAME"])
    assert result.exit_code == 0
    assert result.stdout == "userId\nscreenName\n"


def test_convert_default_style_from_config_file(runner, fresh_settings, tmp_path):
    path = tmp_path / "styles.toml"
    path.write_text('[converter]\ndefault_style = "kebab"\n')
    result = runner.invoke(cli, ["--config", str(path), "convert", "myVariableName"])
    assert result.exit_code == 0
    assert result.stdout == "my-variable-name\n"


def test_convert_unknown_style(runner, fresh_settings):
    result = runner.invoke(cli, ["convert", "--style", "shout", "x"])
    assert result.exit_code == 2
    assert "Unknown case style 'shout'" in result.output


def test_convert_requires_values(runner, fresh_settings):
    result = runner.invoke(cli, ["convert"])
    assert result.exit_code == 2


def test_bad_config_file(runner, fresh_settings, tmp_path):
    result = runner.invoke(cli, ["--config", str(tmp_path / "missing.toml"), "styles"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_styles(runner, fresh_settings):
    result = runner.invoke(cli, ["styles"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["camel", "constant", "dot", "kebab", "pascal", "snake"]


@pytest.fixture
def broken_cwd_config(fresh_settings, tmp_path):
    (tmp_path / "casekit.toml").write_text("[converter\n")
    return tmp_path


def test_broken_cwd_config_exits_cleanly(runner, broken_cwd_config):
    result = runner.invoke(cli, ["styles"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Failed to read config" in result.output
    assert "Traceback" not in result.output


def test_explicit_config_bypasses_broken_cwd_config(runner, broken_cwd_config, tmp_path):
    good = tmp_path / "good.toml"
    good.write_text('[converter]\ndefault_style = "dot"\n')
    result = runner.invoke(cli, ["--config", str(good), "convert", "someCamelCase"])
    assert result.exit_code == 0
    assert result.stdout == "some.camel.case\n"
