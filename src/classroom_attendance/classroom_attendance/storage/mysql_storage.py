from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .base import LockedStorage


class MySQLStorage(LockedStorage):
    """Key-value items kept as rows of the `kv_store` table.

    The write lock only serializes writers inside this process.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__()
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT item_value FROM kv_store WHERE item_key=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return row["item_value"]

    def set_item(self, key: str, value: str) -> None:
        with self.locked():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(item_key, item_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE item_value=VALUES(item_value)
                    """,
                    (key, str(value)),
                )

    def remove_item(self, key: str) -> None:
        with self.locked():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE item_key=%s", (key,))
