import logging
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.schema import CreateColumn
from app.db.session import Base
import app.models  # noqa: F401  registers every mapped table on Base.metadata


def check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logging.info("Database connection established successfully.")


def sync_schema(engine: Engine) -> list[str]:
    """
    Create missing tables and add model columns missing from existing ones.

    Existing columns are never dropped or retyped. Returns the
    ``table.column`` names that were added.
    """
    Base.metadata.create_all(bind=engine)

    added = []
    preparer = engine.dialect.identifier_preparer
    with engine.begin() as conn:
        inspector = inspect(conn)
        for table in Base.metadata.sorted_tables:
            existing = {col["name"] for col in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.name in existing:
                    continue
                ddl = CreateColumn(column).compile(dialect=engine.dialect)
                conn.execute(text(f"ALTER TABLE {preparer.format_table(table)} ADD COLUMN {ddl}"))
                added.append(f"{table.name}.{column.name}")
                logging.info(f"Added column {table.name}.{column.name}")
    return added


def initialize_database(engine: Engine) -> None:
    check_connection(engine)
    sync_schema(engine)
    logging.info("Database synced successfully.")

