"""UPS tracking number validation."""

from trackpkg.carriers.base import BaseCarrier, ServiceConfig
from trackpkg.checksums import is_valid_ups


class UPSCarrier(BaseCarrier):
    """UPS carrier adapter. Every UPS service shares the 1Z format."""

    def validate_service(self, service: ServiceConfig, tracking_number: str) -> bool:
        return is_valid_ups(tracking_number)
