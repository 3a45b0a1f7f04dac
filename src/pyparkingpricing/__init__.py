"""pyParkingPricing package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import Client
from .editor import AdvancedPricingEditor
from .exceptions import (
    ApiError,
    AuthError,
    NetworkError,
    NotFoundError,
    PyParkingPricingError,
    ValidationError,
)
from .models import (
    BlockMode,
    DayOfWeek,
    DaySchedule,
    DayScheduleBlock,
    LotPricing,
    PersistedBlock,
)
from .resolver import (
    adjust_coverage,
    apply_mode_change,
    build_persistable_blocks,
    parse_day_schedule,
)

try:
    __version__ = version("pyparkingpricing")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "AdvancedPricingEditor",
    "ApiError",
    "AuthError",
    "BlockMode",
    "Client",
    "DayOfWeek",
    "DaySchedule",
    "DayScheduleBlock",
    "LotPricing",
    "NetworkError",
    "NotFoundError",
    "PersistedBlock",
    "PyParkingPricingError",
    "ValidationError",
    "__version__",
    "adjust_coverage",
    "apply_mode_change",
    "build_persistable_blocks",
    "parse_day_schedule",
]
