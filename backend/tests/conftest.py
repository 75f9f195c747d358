"""Shared fixtures: a fresh store on a fixed clock, and an app around it."""

from datetime import datetime
from pathlib import Path
import sys

import pytest
import pytz
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))
from app.core.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.store import PipelineStore  # noqa: E402

NOW = datetime(2026, 1, 20, 9, 30, tzinfo=pytz.utc)
TODAY = "2026-01-20"


@pytest.fixture
def store() -> PipelineStore:
    return PipelineStore(tz=pytz.utc, clock=lambda: NOW)


@pytest.fixture
def client(store: PipelineStore) -> TestClient:
    app = create_app(Settings(SEED_DEMO_DATA=False), store=store)
    return TestClient(app)
