"""
tests/test_output.py
====================
Console rendering, password masking and JSON reports.
"""
import json

import pytest

from pwquality.core.models import QualityResult, Strength, invalid_result
from pwquality.core.settings import resolve_settings
from pwquality.output.console import QualityConsoleOutput, mask_password
from pwquality.output.report import QualityReportGenerator
from pwquality.shared.console import QualityConsole


@pytest.mark.parametrize("password,masked", [
    ("", ""),
    ("a", "*"),
    ("ab", "**"),
    ("abc", "a*c"),
    ("password", "p******d"),
])
def test_mask_password(password, masked):
    assert mask_password(password) == masked


@pytest.fixture
def recorded():
    console = QualityConsole(record=True)
    return console, QualityConsoleOutput(console)


def test_display_result(recorded):
    console, output = recorded
    result = QualityResult(
        valid=False,
        score=1,
        entropy=37.6,
        strength=Strength.VERY_WEAK,
        feedback=["Password is too common."],
    )
    output.display_result(result, password="password")
    text = console.rich.export_text()
    assert "1/100" in text
    assert "VERY WEAK" in text
    assert "37.60 bits" in text
    assert "Password is too common." in text


def test_display_invalid_result_without_entropy(recorded):
    console, output = recorded
    output.display_result(invalid_result())
    text = console.rich.export_text()
    assert "Entropy" not in text
    assert "Password must be a string." in text


def test_display_settings(recorded):
    console, output = recorded
    output.display_settings(resolve_settings({"commonPasswords": [], "theme": "x"}))
    text = console.rich.export_text()
    assert "(empty)" in text
    assert "theme (ignored)" in text


def test_json_report(tmp_path):
    path = QualityReportGenerator().generate_json(invalid_result(), tmp_path / "r.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["result"] == {
        "valid": False,
        "score": 0,
        "strength": "Very Weak",
        "feedback": ["Password must be a string."],
    }
    assert data["report_metadata"]["version"]
