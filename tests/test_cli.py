"""Tests for CLI parser and main behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from class2css.cli.main import build_parser, main


def test_build_parser_accepts_build_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(["build", "-r", str(tmp_path), "-c", "custom.yaml", "--no-stdout", "-v"])

    assert args.command == "build"
    assert args.root == tmp_path
    assert args.config == Path("custom.yaml")
    assert args.no_stdout is True
    assert args.verbose is True


def test_version_flag_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "class2css" in capsys.readouterr().out


def test_build_writes_output_and_prints_status(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "class2css.yaml").write_text(
        "system: {css_format: compressed}\nstatic_classes: {flex: 'display: flex;'}\n", encoding="utf-8"
    )
    (tmp_path / "index.html").write_text('<div class="flex"></div>', encoding="utf-8")

    exit_code = main(["build", "--root", str(tmp_path), "--no-color"])

    assert exit_code == 0
    assert (tmp_path / "index.css").read_text(encoding="utf-8") == ".flex{display:flex}\n"
    out = capsys.readouterr().out
    assert "Tokens      1" in out
    assert "Build       full, 1 rule(s)" in out


def test_build_with_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "class2css.yaml").write_text("output: {mode: bundle}\n", encoding="utf-8")

    assert main(["build", "-r", str(tmp_path)]) == 2
    assert "output.mode" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("yaml_text", "expected_code"),
    [("rules: {mt: margin-top}\n", 0), ("rules: {mt: 5}\n", 2)],
    ids=["valid", "invalid"],
)
def test_validate_config(tmp_path: Path, yaml_text: str, expected_code: int) -> None:
    (tmp_path / "class2css.yaml").write_text(yaml_text, encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path)]) == expected_code
