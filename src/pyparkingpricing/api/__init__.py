"""Async access to the lot pricing backend."""

from .base import BaseApi
from .pricing import LotPricingApi

__all__ = ["BaseApi", "LotPricingApi"]
