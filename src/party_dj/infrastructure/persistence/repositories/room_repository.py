"""SQLite implementation of the room repository.

Each room is stored as a single JSON document, so partial updates replace
whole top-level fields (for example the full ``songs`` list) rather than
patching inside them.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from party_dj.domain.rooms.entities import Room
from party_dj.domain.rooms.repository import RoomRepository
from party_dj.domain.shared.constants import DatabaseTables
from party_dj.domain.shared.exceptions import EntityNotFoundError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..database import Database

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class SQLiteRoomRepository(RoomRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, room_code: str) -> Room | None:
        row = await self._db.fetch_one(
            f"SELECT document FROM {DatabaseTables.ROOMS} WHERE room_code = ?",
            (room_code,),
        )
        if row is None:
            return None
        return Room.from_document(room_code, json.loads(row["document"]))

    async def set(self, room: Room) -> None:
        now = _now_iso()
        async with self._db.transaction() as conn:
            await conn.execute(
                f"""
                INSERT INTO {DatabaseTables.ROOMS} (room_code, document, created_at, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(room_code) DO UPDATE SET
                    document = excluded.document,
                    updated_at = excluded.updated_at
                """,
                (room.room_code, json.dumps(room.to_document()), now, now),
            )

        logger.debug(LogTemplates.ROOM_SAVED, room.room_code)

    async def update(self, room_code: str, fields: dict[str, Any]) -> None:
        async with self._db.transaction() as conn:
            cursor = await conn.execute(
                f"SELECT document FROM {DatabaseTables.ROOMS} WHERE room_code = ?",
                (room_code,),
            )
            row = await cursor.fetchone()
            if row is None:
                raise EntityNotFoundError("Room", room_code)

            document = json.loads(row["document"])
            document.update(fields)
            await conn.execute(
                f"UPDATE {DatabaseTables.ROOMS} SET document = ?, updated_at = ? WHERE room_code = ?",
                (json.dumps(document), _now_iso(), room_code),
            )

        logger.debug(LogTemplates.ROOM_UPDATED, room_code, sorted(fields))

    async def delete(self, room_code: str) -> bool:
        async with self._db.transaction() as conn:
            cursor = await conn.execute(
                f"DELETE FROM {DatabaseTables.ROOMS} WHERE room_code = ?",
                (room_code,),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.debug(LogTemplates.ROOM_DELETED, room_code)
        return deleted

    async def exists(self, room_code: str) -> bool:
        row = await self._db.fetch_one(
            f"SELECT 1 FROM {DatabaseTables.ROOMS} WHERE room_code = ?",
            (room_code,),
        )
        return row is not None
