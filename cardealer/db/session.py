from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cardealer.core.config import settings
from cardealer.models import Base

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite connections are used from FastAPI's threadpool.
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create any missing tables."""
    Base.metadata.create_all(bind=engine)


# Dependency to get the DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
