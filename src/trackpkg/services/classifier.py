"""Tracking number classification and tracking URLs."""

import logging

from trackpkg.carriers.base import BaseCarrier, ServiceConfig
from trackpkg.models import Carrier, TrackingMatch
from trackpkg.services.carrier_loader import CarrierLoader, carrier_loader

logger = logging.getLogger(__name__)


def _find(
    tracking_number: str, loader: CarrierLoader | None
) -> tuple[BaseCarrier, ServiceConfig] | None:
    loader = loader if loader is not None else carrier_loader
    for carrier in loader.load_all().values():
        service = carrier.match_service(tracking_number)
        if service is not None:
            return carrier, service
    return None


def identify_tracking_number(
    tracking_number: str, loader: CarrierLoader | None = None
) -> TrackingMatch | None:
    """Identify the carrier and service of a tracking number.

    Carriers are tried in priority order (UPS, FedEx, USPS) and each
    carrier's services in their configured order, so FedEx Express is
    checked before FedEx Ground. The first acceptance wins.
    """
    found = _find(tracking_number, loader)
    if found is None:
        logger.debug("No carrier matched %r", tracking_number)
        return None

    carrier, service = found
    logger.debug("Matched %r as %s", tracking_number, service.name)
    return TrackingMatch(
        carrier=carrier.config.id,
        service=service.id,
        service_name=service.name,
        tracking_number=tracking_number.strip(),
    )


def classify_tracking_number(
    tracking_number: str, loader: CarrierLoader | None = None
) -> Carrier | None:
    """Return the carrier a tracking number belongs to, or None."""
    match = identify_tracking_number(tracking_number, loader)
    return match.carrier if match else None


def tracking_url(tracking_number: str, loader: CarrierLoader | None = None) -> str | None:
    """Build the carrier's tracking URL for a valid tracking number.

    The number is inserted exactly as given (untrimmed, not URL-encoded).
    Returns None if no carrier accepts it.
    """
    found = _find(tracking_number, loader)
    if found is None:
        return None

    carrier, _ = found
    return carrier.get_tracking_url(tracking_number)
