from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import DATABASE_URL

def engine_options(url: str) -> dict:
    """
    SQLite is shared across the threadpool sync routes run in;
    server databases get liveness checks on pooled connections.
    """
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}

engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

class Base(DeclarativeBase):
    pass

@contextmanager
def session_scope(factory=None):
    db = (factory or SessionLocal)()
    try:
        yield db
    finally:
        db.close()

# Request-scoped session for FastAPI dependencies
def get_db():
    with session_scope() as db:
        yield db
