"""
Test for the draw report script
===============================

Runs scripts/analyze_draws.py main() against the bundled sample dataset.
"""

import importlib.util
import os

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SCRIPT_PATH = os.path.join(REPO_ROOT, "scripts", "analyze_draws.py")
SAMPLE_FILE = os.path.join(REPO_ROOT, "data", "sample_draws.json")


@pytest.fixture
def report_script():
    spec = importlib.util.spec_from_file_location("analyze_draws", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_report(report_script, monkeypatch, *args):
    monkeypatch.setattr("sys.argv", ["analyze_draws.py", "--file", SAMPLE_FILE, *args])
    return report_script.main()


def test_full_report(report_script, monkeypatch, capsys):
    assert run_report(report_script, monkeypatch) == 0

    out = capsys.readouterr().out
    assert "Draws analyzed: 7" in out
    assert "quadrant_signature" in out
    assert "Hot / Cold Numbers" in out


def test_report_with_bet(report_script, monkeypatch, capsys):
    assert run_report(report_script, monkeypatch, "--bet", "4", "10", "23", "31", "42", "55") == 0

    out = capsys.readouterr().out
    assert "Bet Evaluation" in out
    assert "Score:" in out


def test_incomplete_bet_is_reported(report_script, monkeypatch, capsys):
    assert run_report(report_script, monkeypatch, "--bet", "4", "10") == 0

    assert "Bet cannot be evaluated" in capsys.readouterr().out


def test_special_only_filter(report_script, monkeypatch, capsys):
    assert run_report(report_script, monkeypatch, "--special-only") == 0

    assert "Draws analyzed: 2" in capsys.readouterr().out


def test_empty_selection_returns_error_code(report_script, monkeypatch):
    assert run_report(report_script, monkeypatch, "--year", "1999") == 1
