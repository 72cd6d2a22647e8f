"""Catalog lookups served once eligibility has passed."""

from typing import List

from models.hotel import Hotel
from utils.error_handling import NotFoundError


class HotelsService:
    """Wraps the catalog repository and turns absences into NotFoundError."""

    def __init__(self, catalog_repo):
        self.catalog_repo = catalog_repo

    async def list_hotels(self) -> List[Hotel]:
        """Return every hotel; an empty catalog counts as not found."""
        hotels = await self.catalog_repo.list_hotels()
        if not hotels:
            raise NotFoundError("No hotels found")
        return hotels

    async def get_hotel_with_rooms(self, hotel_id: int) -> Hotel:
        hotel = await self.catalog_repo.find_hotel_with_rooms(hotel_id)
        if not hotel:
            raise NotFoundError(f"Hotel {hotel_id} not found")
        return hotel
