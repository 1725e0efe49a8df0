"""Tracking number validation for UPS, FedEx and USPS."""

from trackpkg.models import Carrier, TrackingMatch
from trackpkg.services.classifier import (
    classify_tracking_number,
    identify_tracking_number,
    tracking_url,
)

__version__ = "0.1.0"

__all__ = [
    "Carrier",
    "TrackingMatch",
    "classify_tracking_number",
    "identify_tracking_number",
    "tracking_url",
]
