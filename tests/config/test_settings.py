"""Tests for RoadhubSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from roadhub.config.settings import RoadhubSettings
from roadhub.domain.types import Direction


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ROADHUB_CONFIG",
        "ROADHUB_VERBOSE",
        "ROADHUB_SOLVER__DIRECTION",
        "ROADHUB_SOLVER__VALIDATE_INPUT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RoadhubSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.solver.direction is Direction.INBOUND
        assert settings.solver.validate_input is True
        assert settings.output.width == 100
        assert settings.output.max_listed == 20

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RoadhubSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "roadhub.toml").write_text('[solver]\ndirection = "outbound"\n')
        settings = RoadhubSettings.from_cli(start=tmp_path)
        assert settings.solver.direction is Direction.OUTBOUND
        assert settings.solver.validate_input is True
        assert settings.config_path == tmp_path / "roadhub.toml"

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "roadhub.toml").write_text("[output]\nmax_listed = 5\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = RoadhubSettings.from_cli(start=nested)
        assert settings.output.max_listed == 5

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "roadhub.toml").write_text("")
        settings = RoadhubSettings.from_cli(start=tmp_path)
        assert settings.solver.direction is Direction.INBOUND

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "roads.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[solver]\nvalidate_input = false\n")
        settings = RoadhubSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.solver.validate_input is False
        assert settings.config_path == custom

    def test_missing_explicit_config_ignored(self, tmp_path: Path) -> None:
        settings = RoadhubSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "roadhub.toml").write_text("[solver\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RoadhubSettings.from_cli(start=tmp_path)

    def test_invalid_direction_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "roadhub.toml").write_text('[solver]\ndirection = "sideways"\n')
        with pytest.raises(Exception):
            RoadhubSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "roadhub.toml").write_text('[solver]\ndirection = "outbound"\n')
        monkeypatch.setenv("ROADHUB_SOLVER__DIRECTION", "inbound")
        settings = RoadhubSettings.from_cli(start=tmp_path)
        assert settings.solver.direction is Direction.INBOUND

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROADHUB_VERBOSE", "false")
        settings = RoadhubSettings.from_cli(start=tmp_path, verbose=True)
        assert settings.verbose is True
