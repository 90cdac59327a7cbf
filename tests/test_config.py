"""Tests for config.py."""

from pathlib import Path
from textwrap import dedent

import pytest
from pytest import MonkeyPatch

from langver import ConfigError, LangverConfig, LanguageVersion, load_config


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Run a test from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults_without_config(project_dir: Path) -> None:
    """Test defaults are used when no config file exists."""
    config = load_config()
    assert config.minimum is None
    assert config.features == {}


def test_load_from_pyproject(project_dir: Path) -> None:
    """Test the [tool.langver] table in pyproject.toml is read."""
    (project_dir / "pyproject.toml").write_text(
        dedent("""
        [project]
        name = "example"

        [tool.langver]
        minimum = "2.12"
        features = { records = "3.0", patterns = "3.0", null-safety = "2.12" }
        """)
    )

    config = load_config()
    assert config.minimum == LanguageVersion(2, 12)
    assert config.features == {
        "records": LanguageVersion(3, 0),
        "patterns": LanguageVersion(3, 0),
        "null-safety": LanguageVersion(2, 12),
    }


def test_langver_toml_takes_precedence(project_dir: Path) -> None:
    """Test langver.toml is preferred over pyproject.toml."""
    (project_dir / "pyproject.toml").write_text('[tool.langver]\nminimum = "1.0"\n')
    (project_dir / "langver.toml").write_text('[langver]\nminimum = "2.0"\n')

    assert load_config().minimum == LanguageVersion(2, 0)


def test_pyproject_without_table(project_dir: Path) -> None:
    """Test a pyproject.toml without a langver table gives defaults."""
    (project_dir / "pyproject.toml").write_text('[project]\nname = "example"\n')
    assert load_config() == LangverConfig()


def test_explicit_path(tmp_path: Path) -> None:
    """Test an explicit config path is read."""
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[langver]\nminimum = "3.4"\n')

    assert load_config(config_file).minimum == LanguageVersion(3, 4)


def test_explicit_path_missing(tmp_path: Path) -> None:
    """Test a missing explicit path is an error."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.toml")


def test_invalid_toml(project_dir: Path) -> None:
    """Test malformed TOML is reported."""
    (project_dir / "langver.toml").write_text("[langver\nminimum = ")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config()


def test_invalid_version_in_config(project_dir: Path) -> None:
    """Test an invalid version string is reported with its location."""
    (project_dir / "langver.toml").write_text('[langver]\nminimum = "2.012"\n')
    with pytest.raises(ConfigError, match=r"minimum: .*leading zeros"):
        load_config()


def test_unknown_key_in_config(project_dir: Path) -> None:
    """Test unknown keys are rejected."""
    (project_dir / "langver.toml").write_text('[langver]\nmaximum = "9.0"\n')
    with pytest.raises(ConfigError, match="maximum"):
        load_config()


def test_section_must_be_table(tmp_path: Path) -> None:
    """Test a non-table langver entry is rejected."""
    config_file = tmp_path / "custom.toml"
    config_file.write_text('langver = "2.0"\n')
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(config_file)


def test_supports() -> None:
    """Test feature support checks."""
    config = LangverConfig(features={"records": "3.0"})  # type: ignore[dict-item]
    assert config.supports("records", LanguageVersion(3, 0))
    assert config.supports("records", LanguageVersion(3, 1))
    assert not config.supports("records", LanguageVersion(2, 19))
    with pytest.raises(KeyError):
        config.supports("macros", LanguageVersion(3, 0))


def test_tool_must_be_table(project_dir: Path) -> None:
    """Test a non-table tool entry in pyproject.toml is reported."""
    (project_dir / "pyproject.toml").write_text('tool = "x"\n')
    with pytest.raises(ConfigError, match="tool configuration .* must be a table"):
        load_config()
