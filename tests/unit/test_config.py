"""Tests for [tool.ormond] configuration loading."""

import logging

import pytest

from ormond.config import DEFAULT_CONFIG, OrmondConfig, load_config, parse_config


def test_defaults_without_pyproject(tmp_path, monkeypatch):
    monkeypatch.setattr("ormond.config.find_pyproject", lambda start=None: None)

    assert load_config(tmp_path) == OrmondConfig()


def test_reads_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.ormond]
search-dirs = ["spec"]
ends_with = ".spec.py"
verbosity = 1
save_logs = false
watch_interval = 2
"""
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    config = load_config(nested)

    assert config.search_dirs == ["spec"]
    assert config.ends_with == [".spec.py"]
    assert config.verbosity == 1
    assert config.save_logs is False
    assert config.watch_interval == 2.0
    assert config.exclude_dirs == DEFAULT_CONFIG.exclude_dirs


def test_unknown_keys_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="ormond.config"):
        config = parse_config({"mystery": 1})

    assert config == OrmondConfig()
    assert "mystery" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"verbosity": "high"},
        {"save_logs": "yes"},
        {"search_dirs": [1, 2]},
        {"log_dir": 5},
    ],
)
def test_parse_config_rejects_wrong_types(data):
    with pytest.raises(TypeError):
        parse_config(data)


def test_invalid_values_fall_back_to_defaults(tmp_path, caplog):
    (tmp_path / "pyproject.toml").write_text("[tool.ormond]\nverbosity = 'loud'\n")

    with caplog.at_level(logging.WARNING, logger="ormond.config"):
        config = load_config(tmp_path)

    assert config == OrmondConfig()
    assert "Invalid [tool.ormond]" in caplog.text


def test_unparseable_pyproject_falls_back(tmp_path, caplog):
    (tmp_path / "pyproject.toml").write_text("[tool.ormond\n")

    with caplog.at_level(logging.WARNING, logger="ormond.config"):
        config = load_config(tmp_path)

    assert config == OrmondConfig()
    assert "Using defaults" in caplog.text
