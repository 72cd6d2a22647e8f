"""Request input validation helpers."""

from typing import Any

from utils.error_handling import BadRequestError

# Upper bound of a Postgres INTEGER primary key.
MAX_DB_INT = 2**31 - 1


def parse_positive_int(value: Any, field: str, maximum: int = MAX_DB_INT) -> int:
    """Return value as a positive int no larger than maximum, raising BadRequestError otherwise."""
    if value is None:
        raise BadRequestError(f"{field} is required")

    raw = str(value).strip()
    if not (raw.isascii() and raw.isdigit()):
        raise BadRequestError(f"{field} must be numeric")

    # Length check first; int() refuses very long digit strings.
    digits = raw.lstrip("0")
    if len(digits) > len(str(maximum)):
        raise BadRequestError(f"{field} is out of range")

    number = int(digits or "0")
    if number < 1:
        raise BadRequestError(f"{field} must be positive")
    if number > maximum:
        raise BadRequestError(f"{field} is out of range")
    return number
