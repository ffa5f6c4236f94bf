from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from book_library.core.config import DATABASE_URL, SQL_ECHO


def _connect_args(url: str) -> dict:
    # sqlite connections are shared across the threadpool FastAPI runs sync routes in
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL), echo=SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
