import logging
from pathlib import Path

import pytest

from level_preview.cli import preview_cli
from level_preview.cli.preview_cli import main


def _write_level(directory: Path, info: str = "800, 600\n0, 0", polygons: str = "(0, 0), (10, 0), (10, 10)") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "collision_info.txt").write_text(info, encoding="utf-8")
    (directory / "polygons.txt").write_text(polygons, encoding="utf-8")
    return directory


@pytest.mark.parametrize("argv", [[], ["a", "b"]])
def test_wrong_argument_count_prints_usage(argv, capsys, monkeypatch) -> None:
    """A wrong positional count prints the usage line and loads nothing."""

    def fail(*_args, **_kwargs):
        raise AssertionError("nothing should be loaded")

    monkeypatch.setattr(preview_cli, "load_level", fail)

    assert main(argv, prog="level-preview") == 0
    assert capsys.readouterr().out.strip() == "Usage: level-preview <path>"


def test_check_loads_without_opening_window(tmp_path: Path, monkeypatch, caplog) -> None:
    """``--check`` validates and logs the level summary without a window."""

    level_dir = _write_level(tmp_path / "level")

    def fail(*_args, **_kwargs):
        raise AssertionError("--check must not open a window")

    monkeypatch.setattr(preview_cli, "show_level", fail)

    with caplog.at_level(logging.INFO, logger="level_preview"):
        assert main([str(level_dir), "--check"]) == 0
    assert "Loaded 1 polygon(s) with 3 point(s)" in caplog.text


def test_invalid_level_exits_with_status_one(tmp_path: Path, caplog) -> None:
    """A bad coordinate is logged with its file, line and token."""

    level_dir = _write_level(tmp_path / "level", polygons="(abc, 1), (2, 2)")

    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main([str(level_dir), "--check"]) == 1

    assert "polygons.txt, line 1" in caplog.text
    assert '"abc"' in caplog.text


def test_missing_directory_exits_with_status_one(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main([str(tmp_path / "missing")]) == 1
    assert "does not exist" in caplog.text


def test_flags_and_config_reach_show_level(tmp_path: Path, monkeypatch) -> None:
    """CLI flags override the YAML file, which overrides the defaults."""

    level_dir = _write_level(tmp_path / "level")
    cfg_path = tmp_path / "preview.yaml"
    cfg_path.write_text("line_color: blue\nfps: 30\n", encoding="utf-8")
    seen = {}

    def fake_show(level, config, max_frames=None):
        seen.update(level=level, config=config, max_frames=max_frames)
        return 1

    monkeypatch.setattr(preview_cli, "show_level", fake_show)

    assert main([str(level_dir), "--config", str(cfg_path), "--color", "green", "--frames", "5"]) == 0
    assert seen["config"].line_color == "green"
    assert seen["config"].fps == 30
    assert seen["max_frames"] == 5
    assert len(seen["level"].polygons) == 1


def test_bad_config_exits_with_status_one(tmp_path: Path, caplog) -> None:
    level_dir = _write_level(tmp_path / "level")
    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main([str(level_dir), "--fps", "0"]) == 1
    assert "Invalid configuration" in caplog.text


def test_undecodable_level_file_exits_with_status_one(tmp_path: Path, caplog) -> None:
    """Non-UTF-8 input is logged with the file name instead of escaping main."""

    level_dir = _write_level(tmp_path / "level")
    (level_dir / "polygons.txt").write_bytes(b"(0, 0), (\xff, 1)")

    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main([str(level_dir), "--check"]) == 1
    assert "polygons.txt" in caplog.text
    assert "UTF-8" in caplog.text


@pytest.mark.parametrize("content", ["fps: [1, \n", "fps: fast\n", "dpi: high\n"])
def test_broken_config_file_exits_with_status_one(tmp_path: Path, caplog, content: str) -> None:
    """Malformed or wrongly typed YAML is reported as an invalid configuration."""

    level_dir = _write_level(tmp_path / "level")
    cfg_path = tmp_path / "preview.yaml"
    cfg_path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main([str(level_dir), "--config", str(cfg_path), "--check"]) == 1
    assert "Invalid configuration" in caplog.text


def test_unknown_log_level_is_an_argument_error(tmp_path: Path, capsys) -> None:
    """Only the standard level names are accepted by --log-level."""

    level_dir = _write_level(tmp_path / "level")
    with pytest.raises(SystemExit) as info:
        main([str(level_dir), "--log-level", "foo", "--check"])
    assert info.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    level_dir = _write_level(tmp_path / "level")
    assert main([str(level_dir), "--log-level", "debug", "--check"]) == 0


def test_empty_path_argument_exits_with_status_one(tmp_path: Path, monkeypatch, caplog) -> None:
    """``level-preview ""`` reports a missing path even if cwd is a level."""

    _write_level(tmp_path)
    monkeypatch.chdir(tmp_path)

    with caplog.at_level(logging.ERROR, logger="level_preview"):
        assert main(["", "--check"]) == 1
    assert "does not exist" in caplog.text
