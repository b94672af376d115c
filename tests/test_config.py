"""Tests for configuration defaults, validation and merging."""

import pytest

from include_cost.config import AnalysisConfig, load_config
from include_cost.exceptions import InvalidConfigError


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert ".h" in config.header_extensions
        assert ".cpp" in config.source_extensions
        assert config.placeholder_lines == 1
        assert config.case_sensitive is True
        assert config.workers is None

    def test_is_source(self):
        config = AnalysisConfig()
        assert config.is_source("main.cpp")
        assert config.is_source("MAIN.C")
        assert not config.is_source("main.h")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"workers": 0},
            {"placeholder_lines": -1},
            {"header_extensions": ["h"]},
            {"header_extensions": [".h"], "source_extensions": [".h"]},
            {"header_extensions": [], "source_extensions": []},
            {"verbosity": "loud"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)


class TestLoadConfig:
    def test_overrides(self):
        config = load_config(workers=3, placeholder_lines=7)
        assert config.workers == 3
        assert config.placeholder_lines == 7

    def test_none_overrides_ignored(self):
        assert load_config(workers=None).workers is None

    def test_verbosity_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("INCLUDE_COST_WORKERS", "5")
        monkeypatch.setenv("INCLUDE_COST_CASE_SENSITIVE", "false")
        monkeypatch.setenv("INCLUDE_COST_VERBOSITY", "quiet")
        config = load_config()
        assert config.workers == 5
        assert config.case_sensitive is False
        assert config.verbosity == "quiet"

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("INCLUDE_COST_WORKERS", "5")
        assert load_config(workers=2).workers == 2

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("INCLUDE_COST_FOLLOW_SYMLINKS", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "INCLUDE_COST_FOLLOW_SYMLINKS"

    def test_unknown_key(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(colour="blue")
        assert exc_info.value.key == "colour"

    def test_invalid_value_wrapped(self):
        with pytest.raises(InvalidConfigError):
            load_config(workers=0)
