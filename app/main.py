# external
import logging
from contextlib import contextmanager
from typing import Iterator
from neo4j import GraphDatabase

# internal
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.services.user_store import Neo4jUserStore

logger = logging.getLogger(__name__)

@contextmanager
def lifespan(settings: Settings = default_settings) -> Iterator[Neo4jUserStore]:
    """Controls the lifespan of the process from startup to shutdown and properly manages the neccessary resources"""
    configure_logging(settings.LOG_LEVEL)
    # neo4j
    driver = GraphDatabase.driver(settings.NEO4J_URI, auth=(settings.NEO4J_USERNAME, settings.NEO4J_PASSWORD))
    try:
        session = driver.session(database=settings.NEO4J_DATABASE)
        try:
            store = Neo4jUserStore(session)
            store.ensure_constraints()
            logger.info("connected to %s", settings.NEO4J_URI)
            yield store
        finally:
            session.close()
    finally:
        driver.close()
