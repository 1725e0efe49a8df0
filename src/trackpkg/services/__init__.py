"""Services package."""

from trackpkg.services.carrier_loader import CarrierLoader
from trackpkg.services.classifier import (
    classify_tracking_number,
    identify_tracking_number,
    tracking_url,
)

__all__ = [
    "CarrierLoader",
    "classify_tracking_number",
    "identify_tracking_number",
    "tracking_url",
]
