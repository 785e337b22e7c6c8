import logging
import sys
from app.config import settings
from app.db.session import build_engine
from app.init_db import initialize_database


def run_migrations():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    logging.info("Synchronizing database schema...")
    engine = build_engine(settings.database_url, echo=settings.SQL_ECHO)
    try:
        initialize_database(engine)
    finally:
        engine.dispose()
    logging.info("Schema synchronization completed successfully.")


if __name__ == "__main__":
    try:
        run_migrations()
    except Exception:
        logging.exception("Schema synchronization failed")
        sys.exit(1)
