import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import config
from database import StudentContext, create_database, get_db, make_engine
from main import app
from models.tables import StudentRecord


@pytest.fixture
def session_factory():
    # fresh in-memory database per test
    engine = make_engine("sqlite://")
    create_database(engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def context(session_factory):
    ctx = StudentContext(session_factory())
    yield ctx
    ctx.close()


@pytest.fixture
def seed(session_factory):
    """Store students through a separate context, like an earlier request would."""
    def _seed(*students):
        ctx = StudentContext(session_factory())
        try:
            for s in students:
                ctx.add(StudentRecord(**s))
            ctx.save()
        finally:
            ctx.close()
    return _seed


@pytest.fixture
def lookup(session_factory):
    def _lookup(student_id):
        ctx = StudentContext(session_factory())
        try:
            return ctx.find(student_id)
        finally:
            ctx.close()
    return _lookup


@pytest.fixture
def client(session_factory, monkeypatch):
    monkeypatch.setattr(config, "API_KEY", None)

    def override_get_db():
        ctx = StudentContext(session_factory())
        try:
            yield ctx
        finally:
            ctx.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
