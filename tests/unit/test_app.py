import pytest
from fastapi.testclient import TestClient

import settings
from app import app


def test_lifespan_rejects_invalid_target_address(monkeypatch):
    monkeypatch.setattr(settings, "TARGET_ADDRESS", "not-a-solana-address")

    with pytest.raises(RuntimeError, match="Invalid target address"):
        with TestClient(app):
            pass
