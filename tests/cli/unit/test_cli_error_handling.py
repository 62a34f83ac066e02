"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from commerce_field_mapper.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["map", "--repository", "/tmp/repository.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["map", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "map",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--repository",
            str(tmp_path / "repository.yaml"),
            "--item-id",
            "item-1",
            "--template-id",
            "{template}",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "mapper-config.yaml"
    existing.write_text("templates: {}\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert existing.read_text(encoding="utf-8") == "templates: {}\n"
