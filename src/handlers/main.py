"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One function serves every route so the engine and lazily built services stay
warm across them.
"""

from typing import Callable, Dict, Tuple
import json

from . import health_check, hotels


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event carries the HTTP method and path; we route it to the matching
    handler. Authentication runs inside the hotel handlers.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path}"

    # Prefix match on whole path segments; the path-parameter route must come
    # before the bare list.
    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("GET /hotels/", _hotel_by_path),
        ("GET /hotels", hotels.list_hotels_handler),
    )

    for prefix, handler in route_table:
        if _matches(route_key, prefix):
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})


def _matches(route_key: str, prefix: str) -> bool:
    """Match the prefix exactly or up to a segment boundary, so /hotelsX is not /hotels."""
    return route_key == prefix or route_key.startswith(prefix.rstrip("/") + "/")


def _hotel_by_path(event, context):
    """Fill pathParameters from the raw path when API Gateway did not."""
    path_params = event.get("pathParameters") or {}
    if "hotelId" not in path_params:
        path = event.get("requestContext", {}).get("http", {}).get("path", "")
        raw_id = path[len("/hotels/"):].strip("/")
        event = {**event, "pathParameters": {**path_params, "hotelId": raw_id or None}}
    return hotels.get_hotel_handler(event, context)
