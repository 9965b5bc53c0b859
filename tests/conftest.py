import asyncio
import os

# Flags de arranque: la config se lee al importar la app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT"] = "10000/minute"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.pool import NullPool

from customer_api.core.rate_limit import limiter
from customer_api.infra.db.session import build_engine, build_session_factory, get_db, init_db
from customer_api.main import app


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "customers.db"


@pytest.fixture()
def test_engine(db_path):
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture()
def seeded(test_engine, db_path):
    sync_engine = create_engine(f"sqlite:///{db_path}")
    with sync_engine.begin() as conn:
        conn.execute(
            text("INSERT INTO customer (id, first_name, last_name) VALUES (:id, :first_name, :last_name)"),
            [
                {"id": 1, "first_name": "Alice", "last_name": "Sample1"},
                {"id": 2, "first_name": "Bob", "last_name": "Sample2"},
            ],
        )
    sync_engine.dispose()
    return db_path


@pytest.fixture()
def session_factory(test_engine):
    return build_session_factory(test_engine)


@pytest.fixture()
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    limiter.reset()
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    limiter.reset()
