import json

import pytest

import rotor_balance.__main__ as cli

RUN_ARGS = ["--run", "4", "0", "--run", "3.5", "120", "--run", "5", "240"]


def test_main_prints_text_report(capsys):
    cli.main(["--v0", "7", *RUN_ARGS])

    out = capsys.readouterr().out
    assert "Trilateration:" in out
    assert "magnitude: 0.540" in out
    assert "phase: 76.6°" in out
    assert "Vectors:" in out
    assert "  - Base: 7.00" in out


def test_main_json_matches_http_shape(capsys):
    cli.main(["--v0", "7", *RUN_ARGS, "--json"])

    body = json.loads(capsys.readouterr().out)
    assert set(body) == {"solution", "vectors"}
    assert body["solution"]["degenerate"] is False
    assert body["solution"]["rmsError"] == pytest.approx(2.8547, abs=1e-3)


def test_main_reports_degenerate_input(capsys):
    cli.main(["--v0", "7", "--run", "4", "0", "--run", "3.5", "0", "--run", "5", "0"])

    out = capsys.readouterr().out
    assert "degenerate" in out
    assert "magnitude" not in out


def test_main_compare_lists_both_methods(capsys):
    cli.main(["--v0", "7", *RUN_ARGS, "--compare"])

    out = capsys.readouterr().out
    assert "Iterative comparison:" in out
    assert "method A:" in out
    assert "method B:" in out


def test_main_writes_tikz_document(tmp_path, capsys):
    tikz_path = tmp_path / "out" / "vectors.tex"

    cli.main(["--v0", "7", *RUN_ARGS, "--tikz-output-path", str(tikz_path), "--tikz-view", "vectors"])

    document = tikz_path.read_text(encoding="utf-8")
    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\textbf{Vector sum}" in document
    assert "Res(" in document
    assert f"TikZ document written to {tikz_path}" in capsys.readouterr().out


def test_main_rejects_wrong_run_count(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--v0", "7", "--run", "4", "0"])

    assert excinfo.value.code == 2
    assert "exactly 3 runs" in capsys.readouterr().err
