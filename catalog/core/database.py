from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from catalog.core.config import settings


class Base(DeclarativeBase):
    pass


def build_engine(url: str, echo: Optional[bool] = None) -> Engine:
    """Create the SQLAlchemy engine for a connection URL"""
    if echo is None:
        echo = settings.DEBUG

    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, echo=echo)

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        echo=echo,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create database tables"""
    # Registers every table on Base.metadata
    import catalog.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
