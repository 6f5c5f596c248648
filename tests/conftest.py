import pytest


@pytest.fixture(autouse=True)
def _debug_log_in_tmp(tmp_path, monkeypatch):
    """Keep the app's debug log out of /tmp during tests."""
    monkeypatch.setattr("tip_calculator.tip_app.DEBUG_LOG_PATH", str(tmp_path / "debug.log"))
