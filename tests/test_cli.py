# tests/test_cli.py
"""CLI tests (Typer CliRunner)."""

from __future__ import annotations

import json
import re

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_SGR = re.compile(r"\x1b\[([0-9;]*)m")


def _has_foreground_colour(text: str) -> bool:
    for params in _SGR.findall(text):
        for code in params.split(";"):
            if code.isdigit() and (30 <= int(code) <= 38 or 90 <= int(code) <= 97):
                return True
    return False


def test_list_shows_every_principle():
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    for key in ("srp", "ocp", "lsp", "isp", "dip"):
        assert key in result.output


def test_run_single_compliant():
    result = runner.invoke(app, ["run", "ocp", "--variant", "compliant", "--no-banner"])

    assert result.exit_code == 0
    assert "Total Area with OCP: 78.26" in result.output
    assert "without OCP" not in result.output


def test_run_liskov_violation_reports_but_succeeds():
    result = runner.invoke(app, ["run", "lsp", "--variant", "violation", "--no-banner"])

    assert result.exit_code == 0
    assert "The sparrow is flying" in result.output
    assert "Penguins cannot fly" in result.output


def test_run_exports_json(tmp_path):
    out = tmp_path / "out" / "run.json"

    result = runner.invoke(app, ["run", "dip", "--no-banner", "--json", str(out)])

    assert result.exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [t["variant"] for t in payload["transcripts"]] == ["violation", "compliant"]


def test_bare_json_filename_goes_to_reports_dir(tmp_path):
    result = runner.invoke(app, ["run", "srp", "--no-banner", "--json", "run.json"])

    assert result.exit_code == 0
    assert (tmp_path / "reports" / "run.json").exists()


def test_unknown_principle_is_rejected():
    result = runner.invoke(app, ["run", "yagni"])

    assert result.exit_code != 0


def test_unknown_variant_is_rejected():
    result = runner.invoke(app, ["run", "--variant", "sometimes"])

    assert result.exit_code != 0


def test_doctor_passes():
    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "FAIL" not in result.output


def test_explicit_relative_json_path_is_kept(tmp_path):
    result = runner.invoke(app, ["run", "srp", "--no-banner", "--json", "./run.json"])

    assert result.exit_code == 0
    assert (tmp_path / "run.json").exists()
    assert not (tmp_path / "reports" / "run.json").exists()


def test_variant_has_no_short_flag():
    result = runner.invoke(app, ["run", "ocp", "-v", "compliant"])

    assert result.exit_code != 0


def test_doctor_honours_color_setting(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")

    coloured = runner.invoke(app, ["doctor", "run"])
    assert coloured.exit_code == 0
    assert _has_foreground_colour(coloured.output)

    monkeypatch.setenv("SOLID_DEMOS_COLOR", "false")
    plain = runner.invoke(app, ["doctor", "run"])
    assert plain.exit_code == 0
    assert not _has_foreground_colour(plain.output)
