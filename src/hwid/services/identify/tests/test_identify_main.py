from __future__ import annotations

import pytest

from hwid.services.identify import main as identify_main
from hwid.services.probe.static_probe import StaticProbe


def test_main_configures_logging_from_config(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("HWID_LABEL", "HWID")
    monkeypatch.setenv("HWID_APPLY_DIGEST", "0")
    monkeypatch.setenv("HWID_CATEGORIES", "RAM")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_CFG", "/nonexistent/logging.yaml")
    calls = []
    monkeypatch.setattr(identify_main, "setup_logging", lambda *args: calls.append(args))

    identify_main.main(StaticProbe({"ram": {"total_bytes": 4096}}))

    assert calls == [("/nonexistent/logging.yaml", "DEBUG")]
    assert capsys.readouterr().out.strip() == "HWID[RAM(total=4096)]"
