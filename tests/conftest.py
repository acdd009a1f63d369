import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# settings are read at import time, so point them at a scratch database first
_DB_DIR = Path(tempfile.mkdtemp(prefix="splitledger-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'ledger.db'}"
os.environ.setdefault("DB_CONNECT_DELAY", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from splitledger.db.base import Base  # noqa: E402
from splitledger.db.session import engine  # noqa: E402
from splitledger.main import app  # noqa: E402


async def _recreate_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def fresh_db():
    """Empty tables for every test that touches the database."""
    asyncio.run(_recreate_schema())
    yield


@pytest.fixture
def client(fresh_db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(client):
    """Factory registering a user through the API; returns the JSON body."""
    counter = {"n": 0}

    def _make(name=None, email=None, mobile=None):
        counter["n"] += 1
        n = counter["n"]
        payload = {
            "name": name or f"User {n}",
            "email": email or f"user{n}@ledger.io",
            "mobile": mobile or f"+12345678{n:02d}",
        }
        res = client.post("/api/v1/users", json=payload)
        assert res.status_code == 201, res.text
        return res.json()

    return _make


@pytest.fixture
def three_users(make_user):
    return make_user(), make_user(), make_user()
