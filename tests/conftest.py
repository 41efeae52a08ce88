import pytest

from range_demo.log import reset_logger


@pytest.fixture(autouse=True)
def _reset_loggers(monkeypatch):
    for name in ("BATCH", "HEIGHT", "WIDTH", "DEPTH", "COLOR", "LOG_LEVEL"):
        monkeypatch.delenv(f"RANGE_DEMO_{name}", raising=False)
    yield
    reset_logger()
