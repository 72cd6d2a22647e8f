"""Handlers for GET /hotels and GET /hotels/{hotelId}."""

from __future__ import annotations

import asyncio
import json
import uuid
from typing import Dict, Optional

from services.response_shaper import shape_hotel_with_rooms, shape_hotels
from utils.error_handling import AppError, status_response, to_response
from utils.logging_config import get_logger
from utils.validators import parse_positive_int

logger = get_logger(__name__)

# Lazy-loaded services to avoid import-time DB connections
_auth_service: Optional["AuthService"] = None
_eligibility_service: Optional["EligibilityService"] = None
_hotels_service: Optional["HotelsService"] = None


def _get_auth_service():
    """Lazy-load AuthService."""
    global _auth_service
    if _auth_service is None:
        from repositories.postgres_repo import get_db_engine
        from repositories.session_repo import SessionRepository
        from services.auth_service import AuthService
        _auth_service = AuthService(SessionRepository(get_db_engine()))
    return _auth_service


def _get_eligibility_service():
    """Lazy-load EligibilityService."""
    global _eligibility_service
    if _eligibility_service is None:
        from repositories.enrollment_repo import EnrollmentRepository
        from repositories.postgres_repo import get_db_engine
        from services.eligibility_service import EligibilityService
        _eligibility_service = EligibilityService(EnrollmentRepository(get_db_engine()))
    return _eligibility_service


def _get_hotels_service():
    """Lazy-load HotelsService."""
    global _hotels_service
    if _hotels_service is None:
        from repositories.catalog_repo import CatalogRepository
        from repositories.postgres_repo import get_db_engine
        from services.hotels_service import HotelsService
        _hotels_service = HotelsService(CatalogRepository(get_db_engine()))
    return _hotels_service


def _ok(body: str) -> Dict:
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": body,
    }


async def list_hotels(event) -> Dict:
    """Authenticate, check eligibility, then return the hotel summaries."""
    user_id = await _get_auth_service().authenticate(event.get("headers"))
    await _get_eligibility_service().validate(user_id)
    hotels = await _get_hotels_service().list_hotels()

    logger.info("Hotels listed", extra={"user_id": user_id, "count": len(hotels)})
    return _ok(json.dumps([summary.model_dump() for summary in shape_hotels(hotels)]))


async def get_hotel(event) -> Dict:
    """
    Authenticate, validate the id, look the hotel up, then check eligibility.

    The hotel lookup runs before the eligibility check so a missing hotel is
    reported as 404 even to users whose ticket would yield 402.
    """
    user_id = await _get_auth_service().authenticate(event.get("headers"))
    path_params = event.get("pathParameters") or {}
    hotel_id = parse_positive_int(path_params.get("hotelId"), "hotelId")

    hotel = await _get_hotels_service().get_hotel_with_rooms(hotel_id)
    await _get_eligibility_service().validate(user_id)

    logger.info(
        "Hotel served",
        extra={"user_id": user_id, "hotel_id": hotel_id, "rooms": len(hotel.rooms)},
    )
    return _ok(shape_hotel_with_rooms(hotel).model_dump_json())


def list_hotels_handler(event, context):
    """Handle GET /hotels."""
    correlation_id = str(uuid.uuid4())
    try:
        return asyncio.run(list_hotels(event))
    except AppError as exc:
        logger.info(
            "Hotel list refused",
            extra={"correlation_id": correlation_id, "status": exc.status_code, "reason": str(exc)},
        )
        return to_response(exc)
    except Exception:
        logger.exception("Hotel list failed", extra={"correlation_id": correlation_id})
        return status_response(400)


def get_hotel_handler(event, context):
    """Handle GET /hotels/{hotelId}."""
    correlation_id = str(uuid.uuid4())
    try:
        return asyncio.run(get_hotel(event))
    except AppError as exc:
        logger.info(
            "Hotel lookup refused",
            extra={"correlation_id": correlation_id, "status": exc.status_code, "reason": str(exc)},
        )
        return to_response(exc)
    except Exception:
        logger.exception("Hotel lookup failed", extra={"correlation_id": correlation_id})
        return status_response(500)
