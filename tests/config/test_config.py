"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitslots.config import Config, default_config_path
from gitslots.config.paths import default_config_dir
from gitslots.errors import ConfigError


def _write(path: Path, body: str) -> Path:
    _ = path.write_text(body, encoding="utf-8")
    return path


def test_missing_file_yields_defaults_without_creating_it(tmp_path: Path) -> None:
    config_path = tmp_path / "absent.toml"

    config = Config.load(config_path)

    assert config.suffixes == (".rb",)
    assert config.duration == 5.0
    assert config.flicker_interval == 0.5
    assert config.max_fps == 0.0
    assert config.easing == "linear"
    assert config.log_file is None
    assert not config_path.exists()


def test_values_are_read_from_toml(tmp_path: Path) -> None:
    config_path = _write(
        tmp_path / "config.toml",
        'suffixes = [".rb", ".rake"]\n'
        "duration = 2\n"
        "flicker_interval = 0.25\n"
        "max_fps = 60\n"
        'easing = "ease-out"\n'
        'log_file = "~/spin.log"\n',
    )

    config = Config.load(config_path)

    assert config.suffixes == (".rb", ".rake")
    assert config.duration == 2
    assert config.flicker_interval == 0.25
    assert config.max_fps == 60
    assert config.easing == "ease-out"
    assert config.log_file == Path("~/spin.log")


def test_single_suffix_string_is_accepted(tmp_path: Path) -> None:
    config = Config.load(_write(tmp_path / "config.toml", 'suffixes = ".go"\n'))

    assert config.suffixes == (".go",)


def test_blank_log_file_means_no_file(tmp_path: Path) -> None:
    config = Config.load(_write(tmp_path / "config.toml", 'log_file = "  "\n'))

    assert config.log_file is None


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config = Config.load(_write(tmp_path / "config.toml", "duration = 1.5\ncolour = 'red'\n"))

    assert config.duration == 1.5
    assert not hasattr(config, "colour")


@pytest.mark.parametrize(
    "body",
    [
        "suffixes = []\n",
        'suffixes = ["", ".py"]\n',
        "suffixes = [1]\n",
        "duration = -1\n",
        'duration = "fast"\n',
        "duration = true\n",
        "flicker_interval = 0\n",
        "max_fps = -5\n",
        'easing = "bounce"\n',
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, body: str) -> None:
    with pytest.raises(ConfigError):
        _ = Config.load(_write(tmp_path / "config.toml", body))


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "config.toml", "duration = = 3\n")

    with pytest.raises(ConfigError, match="Failed to read configuration"):
        _ = Config.load(config_path)


def test_load_caches_per_path(tmp_path: Path) -> None:
    first_path = _write(tmp_path / "first.toml", "duration = 1.0\n")
    second_path = _write(tmp_path / "second.toml", "duration = 2.0\n")

    first = Config.load(first_path)

    assert Config.load(first_path) is first
    assert Config.load(second_path).duration == 2.0


def test_direct_construction_validates() -> None:
    with pytest.raises(ConfigError, match="Unsupported easing"):
        _ = Config(easing="wobble")


def test_explicit_path_wins_over_environment(tmp_path: Path) -> None:
    env = {"GIT_SLOTS_CONFIG": str(tmp_path / "env.toml")}

    assert default_config_path(tmp_path / "cli.toml", env=env) == (tmp_path / "cli.toml").resolve()
    assert default_config_path(env=env) == (tmp_path / "env.toml").resolve()


def test_default_path_follows_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert default_config_path(env=env) == (tmp_path / "xdg" / "git-slots" / "config.toml").resolve()


def test_default_dir_falls_back_to_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_config_dir(env={}) == tmp_path / ".config" / "git-slots"
