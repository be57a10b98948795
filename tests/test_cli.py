"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_scores_without_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "No high score yet." in result.output


def test_scores_with_file(tmp_path: Path) -> None:
    (tmp_path / "highscore.txt").write_text("95\n")
    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "95 points" in result.output


def test_bad_override_exits_with_code_2(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["-f", "rich", "--duration-ms", "0", "--data-dir", str(tmp_path)]
    )
    assert result.exit_code == 2
    assert "duration_ms must be positive" in result.output


def test_bad_config_file_exits_with_code_2(tmp_path: Path) -> None:
    cfg = tmp_path / "game.yaml"
    cfg.write_text("game:\n  colours: 3\n")
    result = runner.invoke(
        app, ["-f", "pygame", "--config", str(cfg), "--data-dir", str(tmp_path)]
    )
    assert result.exit_code == 2
    assert "unknown game settings: colours" in result.output


def test_unknown_log_level_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["--scores", "--log-level", "foo", "--data-dir", str(tmp_path)]
    )
    assert result.exit_code == 2
    assert "No high score" not in result.output


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["--scores", "--log-level", "debug", "--data-dir", str(tmp_path)]
    )
    assert result.exit_code == 0
