"""Hotel and room lookups."""

from typing import List, Optional

from models.hotel import Hotel, Room
from repositories.postgres_repo import PostgresRepository

_HOTEL_COLUMNS = """
    id, name, image, "createdAt" AS created_at, "updatedAt" AS updated_at
"""


class CatalogRepository(PostgresRepository):
    """Read-only access to the hotel catalog."""

    async def list_hotels(self) -> List[Hotel]:
        rows = await self.fetch_all(f'SELECT {_HOTEL_COLUMNS} FROM "Hotel" ORDER BY id')
        return [Hotel.model_validate(row) for row in rows]

    async def find_hotel_with_rooms(self, hotel_id: int) -> Optional[Hotel]:
        """Return the hotel with its rooms nested, or None when it does not exist."""
        row = await self.fetch_one(
            f'SELECT {_HOTEL_COLUMNS} FROM "Hotel" WHERE id = :hotel_id',
            {"hotel_id": hotel_id},
        )
        if not row:
            return None

        room_rows = await self.fetch_all(
            """
            SELECT id, name, capacity, "hotelId" AS hotel_id,
                   "createdAt" AS created_at, "updatedAt" AS updated_at
            FROM "Room"
            WHERE "hotelId" = :hotel_id
            ORDER BY id
            """,
            {"hotel_id": hotel_id},
        )
        return Hotel(**row, rooms=[Room.model_validate(r) for r in room_rows])
