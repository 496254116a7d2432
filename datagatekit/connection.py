# datagatekit/connection.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import logging

logger = logging.getLogger(__name__)


class DatastoreConnection:
    def __init__(self, url: str, echo: bool = False):
        """Initialize a SQLAlchemy connection for the given database URL."""
        self.url = url
        self.engine = self._create_sqlalchemy_engine(echo)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _create_sqlalchemy_engine(self, echo: bool) -> Engine:
        """Private: Create a SQLAlchemy engine for the URL."""
        try:
            if self.url.startswith("sqlite") and ":memory:" in self.url:
                # A single shared connection keeps the in-memory database alive across threads
                return create_engine(
                    self.url,
                    echo=echo,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            return create_engine(self.url, echo=echo)
        except Exception as e:
            logger.error(f"Failed to create SQLAlchemy engine: {e}")
            raise

    def get_engine(self) -> Engine:
        return self.engine

    def get_session_factory(self) -> sessionmaker:
        return self.session_factory

    def stop(self):
        """Dispose of the engine's connection pool."""
        self.engine.dispose()
