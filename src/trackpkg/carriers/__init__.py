"""Carrier adapters package."""

from trackpkg.carriers.base import BaseCarrier, CarrierConfig, ServiceConfig

__all__ = ["BaseCarrier", "CarrierConfig", "ServiceConfig"]
