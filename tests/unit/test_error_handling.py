import pytest

from utils.error_handling import (
    AppError,
    BadRequestError,
    NotFoundError,
    PaymentRequiredError,
    UnauthorizedError,
    to_response,
)


@pytest.mark.parametrize(
    "error, status",
    [
        (BadRequestError(), 400),
        (UnauthorizedError(), 401),
        (PaymentRequiredError(), 402),
        (NotFoundError(), 404),
        (AppError("boom"), 400),
    ],
)
def test_to_response_uses_status_and_no_body(error, status):
    resp = to_response(error)
    assert resp["statusCode"] == status
    assert resp["body"] == ""
