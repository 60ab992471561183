from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def make_engine(url: str):
    # Only apply sqlite-specific connect_args when using sqlite
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}

    # Enable pool_pre_ping to avoid stale connections on hosted databases
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
