"""
Unit tests for DiffSettings environment configuration.
"""

import pytest

from rowdiff import DiffSettings


@pytest.mark.usefixtures("clear_rowdiff_env")
class TestDiffSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        settings = DiffSettings()

        assert settings.case_sensitive is True
        assert settings.isolate_listeners is True
        assert settings.tracing_enabled is False
        assert settings.metrics_enabled is False

    def test_from_env_without_variables_matches_defaults(self):
        assert DiffSettings.from_env() == DiffSettings()

    def test_from_env_reads_all_variables(self, monkeypatch):
        monkeypatch.setenv("ROWDIFF_CASE_SENSITIVE", "false")
        monkeypatch.setenv("ROWDIFF_ISOLATE_LISTENERS", "0")
        monkeypatch.setenv("ROWDIFF_TRACING", "true")
        monkeypatch.setenv("ROWDIFF_METRICS", "yes")

        settings = DiffSettings.from_env()

        assert settings == DiffSettings(
            case_sensitive=False,
            isolate_listeners=False,
            tracing_enabled=True,
            metrics_enabled=True,
        )

    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", " Yes "])
    def test_true_variations(self, monkeypatch, raw):
        monkeypatch.setenv("ROWDIFF_TRACING", raw)

        assert DiffSettings.from_env().tracing_enabled is True

    @pytest.mark.parametrize("raw", ["false", "0", "no", "", "off"])
    def test_false_variations(self, monkeypatch, raw):
        monkeypatch.setenv("ROWDIFF_CASE_SENSITIVE", raw)

        assert DiffSettings.from_env().case_sensitive is False

    def test_settings_are_frozen(self):
        with pytest.raises(AttributeError):
            DiffSettings().tracing_enabled = True
