"""Tests for FinSettings, unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from finpatterns.config.settings import FinSettings


class TestFinSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = FinSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.accounts.currency == "USD"
        assert settings.dashboard.theme == "dark"
        assert list(settings.plans.templates) == ["Savings Plan", "Investment Plan"]

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FinSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "finpatterns.toml"
        toml.write_text('[accounts]\ncurrency = "EUR"\n[dashboard]\ntheme = "light"\n')
        settings = FinSettings.from_cli(search_from=tmp_path)
        assert settings.accounts.currency == "EUR"
        assert settings.dashboard.theme == "light"
        assert settings.config_path == toml.resolve()
        assert "Savings Plan" in settings.plans.templates  # default preserved

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text('[accounts]\ncurrency = "CHF"\n')
        subdir = tmp_path / "sub" / "deep"
        subdir.mkdir(parents=True)
        settings = FinSettings.from_cli(search_from=subdir)
        assert settings.accounts.currency == "CHF"

    def test_templates_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text(
            '[plans.templates."Holiday"]\n'
            'goal = "Beach trip"\n'
            "duration = 6\n"
            "monthly_savings = 150\n"
            'incentives = ["Lounge access"]\n'
        )
        settings = FinSettings.from_cli(search_from=tmp_path)
        assert list(settings.plans.templates) == ["Holiday"]
        assert settings.plans.templates["Holiday"].incentives == ["Lounge access"]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[dashboard]\ntheme = "high-contrast"\n')
        settings = FinSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.dashboard.theme == "high-contrast"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text('[dashboard]\ntheme = "light"\n')
        settings = FinSettings.from_cli(
            config_path=str(tmp_path / "nope.toml"), search_from=tmp_path
        )
        assert settings.dashboard.theme == "dark"
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text("[accounts\ncurrency = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FinSettings.from_cli(search_from=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = FinSettings.from_cli(
            search_from=tmp_path, json_output=True, quiet=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text("quiet = true\n")
        settings = FinSettings.from_cli(search_from=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_toml_flag_without_cli(self, tmp_path: Path) -> None:
        (tmp_path / "finpatterns.toml").write_text("quiet = true\n")
        assert FinSettings.from_cli(search_from=tmp_path).quiet is True


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FINPATTERNS_QUIET", "true")
        assert FinSettings.from_cli(search_from=tmp_path).quiet is True

    def test_nested_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FINPATTERNS_ACCOUNTS__CURRENCY", "CAD")
        assert FinSettings.from_cli(search_from=tmp_path).accounts.currency == "CAD"

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "finpatterns.toml").write_text('[dashboard]\ntheme = "light"\n')
        monkeypatch.setenv("FINPATTERNS_DASHBOARD__THEME", "high-contrast")
        settings = FinSettings.from_cli(search_from=tmp_path)
        assert settings.dashboard.theme == "high-contrast"
