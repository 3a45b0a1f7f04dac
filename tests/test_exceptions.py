import pytest

from pyparkingpricing.exceptions import (
    ApiError,
    AuthError,
    NetworkError,
    NotFoundError,
    PyParkingPricingError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls",
    [ApiError, AuthError, NetworkError, NotFoundError, ValidationError],
)
def test_errors_share_base(error_cls: type[Exception]) -> None:
    assert issubclass(error_cls, PyParkingPricingError)


def test_not_found_is_api_error() -> None:
    with pytest.raises(ApiError):
        raise NotFoundError("missing")
