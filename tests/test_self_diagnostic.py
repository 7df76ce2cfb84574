import pytest

from insureassist.catalog import load_default_catalog
from insureassist.checks.self_diagnostic import run_self_diagnostic


def test_self_diagnostic_passes_on_default_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    report = run_self_diagnostic(load_default_catalog())
    assert report["failed"] == 0
    assert report["passed"] == 4
    assert report["warnings"] == []
