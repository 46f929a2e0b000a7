from sqlalchemy import create_engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class Database:
    """Database connection manager"""

    def __init__(self, database_url: str, echo: bool = False):
        engine_options = {"echo": echo}
        if database_url.startswith("sqlite"):
            engine_options["connect_args"] = {"check_same_thread": False}
            # In-memory SQLite lives as long as its connection, share one
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_options["poolclass"] = StaticPool

        self.engine = create_engine(database_url, **engine_options)
        self.session_factory = sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
        )

    def create_tables(self) -> None:
        """Create all tables in database"""
        from shop.infrastructure import models  # noqa: F401 - registers tables

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all tables (for testing)"""
        Base.metadata.drop_all(bind=self.engine)

    def close(self) -> None:
        """Close database connection"""
        self.engine.dispose()


def masked_url(database_url: str) -> str:
    """Database URL with the password replaced by ***"""
    return make_url(database_url).render_as_string(hide_password=True)
