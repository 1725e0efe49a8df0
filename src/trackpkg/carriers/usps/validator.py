"""USPS tracking number validation."""

from trackpkg.carriers.base import BaseCarrier, ServiceConfig
from trackpkg.checksums import is_valid_mod10


class USPSCarrier(BaseCarrier):
    """USPS carrier adapter."""

    def validate_service(self, service: ServiceConfig, tracking_number: str) -> bool:
        return is_valid_mod10(
            tracking_number,
            window=service.window,
            prefixes=service.prefixes,
            excluded_prefixes=service.excluded_prefixes,
        )
