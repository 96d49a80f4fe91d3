from sqlmodel import SQLModel, Session, create_engine
from hobbies.core.config import settings

def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": settings.DB_CONNECT_TIMEOUT}
    if url.startswith("postgresql"):
        return {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
        }
    return {}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
)

def init_db():
    """create tables from model metadata (alembic is the normal path)"""
    from hobbies import models  # noqa: F401  registers tables on the metadata
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
