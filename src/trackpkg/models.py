"""Carrier tags and classification results."""

from dataclasses import dataclass
from enum import Enum


class Carrier(str, Enum):
    """Carriers a tracking number can be classified as."""

    UPS = "ups"
    FEDEX = "fedex"
    USPS = "usps"


@dataclass(frozen=True)
class TrackingMatch:
    """A tracking number that validated for one carrier service."""

    carrier: Carrier
    service: str  # Service id from carrier.yaml, e.g. "express"
    service_name: str
    tracking_number: str  # Trimmed
