"""Packing-item suggestions from the relational store."""

import logging
import threading
from contextlib import closing
from pathlib import Path
from typing import List

import psycopg2

from vacation_planner.core.errors import ConfigurationError, DataAccessError

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent.parent / "sql"

ITEMS_QUERY = """
    SELECT standard_packing_item.name
    FROM standard_packing_item
    JOIN standard_packing_item_activity_type
    ON standard_packing_item.id = standard_packing_item_activity_type.standard_packing_item_id
    JOIN standard_packing_item_vacation_type
    ON standard_packing_item.id = standard_packing_item_vacation_type.standard_packing_item_id
    WHERE activity_type_id =
    (SELECT id FROM activity_type WHERE LOWER(name) = {p})
    AND vacation_type_id =
    (SELECT id FROM vacation_type WHERE LOWER(name) = {p})
    ORDER BY standard_packing_item.id
"""


class PackingStore:
    """
    Handle on one DB-API connection, shared by every request.

    `placeholder` is the parameter marker of the driver: "%s" for psycopg2
    (the default), "?" for sqlite3.
    """

    def __init__(self, conn, placeholder: str = "%s"):
        self._conn = conn
        self._placeholder = placeholder
        # one cursor at a time on the shared connection
        self._lock = threading.Lock()

    @classmethod
    def connect(cls, dsn: str) -> "PackingStore":
        if not dsn:
            raise ConfigurationError("DATABASE_URL missing or empty.")
        # Render and Heroku hand out postgres:// but libpq wants postgresql://
        if dsn.startswith("postgres://"):
            dsn = dsn.replace("postgres://", "postgresql://", 1)
        try:
            conn = psycopg2.connect(dsn)
        except psycopg2.Error as e:
            raise DataAccessError(f"Could not connect to the database: {e}") from e
        conn.autocommit = True
        logger.info("Connected to the packing-item database")
        return cls(conn)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def items_for(self, activity_type: str, vacation_type: str) -> List[str]:
        """
        Names of the standard items linked to both the activity type and the
        vacation type (names compared case-insensitively). No match is an
        empty list, not an error.
        """
        sql = ITEMS_QUERY.format(p=self._placeholder)
        params = (activity_type.strip().lower(), vacation_type.strip().lower())
        rows = self._fetchall(sql, params)
        items = [row[0] for row in rows]
        logger.info("%d packing item(s) for %s / %s", len(items), activity_type, vacation_type)
        return items

    def init_schema(self, seed: bool = True) -> None:
        """Create the tables (and load the sample items) if they do not exist yet."""
        files = ["schema.sql"] + (["seed.sql"] if seed else [])
        with self._lock:
            try:
                with closing(self._conn.cursor()) as cursor:
                    for name in files:
                        for statement in (SQL_DIR / name).read_text().split(";"):
                            if statement.strip():
                                cursor.execute(statement)
                self._conn.commit()
            except self._conn.Error as e:
                raise DataAccessError(f"Could not initialise the database: {e}") from e
        logger.info("Database schema ready (%s)", ", ".join(files))

    def _fetchall(self, sql: str, params: tuple) -> list:
        with self._lock:
            try:
                with closing(self._conn.cursor()) as cursor:
                    cursor.execute(sql, params)
                    rows = cursor.fetchall()
            except self._conn.Error as e:
                raise DataAccessError(f"Packing item query failed: {e}") from e
        return rows
