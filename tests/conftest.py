import pytest
from fastapi.testclient import TestClient
from hobbies.main import app
from hobbies.core.db import get_session
from hobbies.models import Person
from sqlmodel import Session, create_engine, SQLModel, select
from sqlmodel.pool import StaticPool


def _memory_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

# create in-memory test database
@pytest.fixture(name="session")
def session_fixture():
    engine = _memory_engine()
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session

# same, but the people table was never created
@pytest.fixture(name="broken_session")
def broken_session_fixture():
    engine = _memory_engine()
    with Session(engine) as session:
        yield session

def _client_for(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    return TestClient(app)

@pytest.fixture(name="client")
def client_fixture(session: Session):
    yield _client_for(session)
    app.dependency_overrides.clear()

@pytest.fixture(name="broken_client")
def broken_client_fixture(broken_session: Session):
    yield _client_for(broken_session)
    app.dependency_overrides.clear()

@pytest.fixture(name="count_people")
def count_people_fixture(session: Session):
    def count():
        return len(session.exec(select(Person)).all())
    return count
