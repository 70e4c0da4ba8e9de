"""Database engine initialization and connection management."""

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .schema import Base, FleetMetadata

SCHEMA_VERSION = "1.0.0"


def init_database(database_url: str, echo: bool = False) -> sessionmaker[Any]:
    """Initialize database and return session factory.

    Accepts a SQLAlchemy URL or a bare filesystem path, which is treated as a
    SQLite database file.
    """
    if "://" not in database_url:
        database_url = f"sqlite:///{database_url}"

    url = make_url(database_url)
    engine_kwargs: dict[str, Any] = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise each session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **engine_kwargs)
    Base.metadata.create_all(engine)

    session_maker = sessionmaker(bind=engine, expire_on_commit=False)

    with session_maker() as session:
        schema_version = session.get(FleetMetadata, "schema_version")
        if not schema_version:
            session.add(FleetMetadata(key="schema_version", value=SCHEMA_VERSION))
            session.commit()

    return session_maker
