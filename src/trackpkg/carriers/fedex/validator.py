"""FedEx tracking number validation."""

from trackpkg.carriers.base import BaseCarrier, ServiceConfig
from trackpkg.checksums import is_valid_fedex_express, is_valid_mod10


class FedExCarrier(BaseCarrier):
    """FedEx carrier adapter.

    Express numbers use a weighted mod 11 check; Ground (and anything else
    configured with a window) uses the mod 10 barcode scheme.
    """

    def validate_service(self, service: ServiceConfig, tracking_number: str) -> bool:
        if service.id == "express":
            return is_valid_fedex_express(tracking_number)

        return is_valid_mod10(
            tracking_number,
            window=service.window,
            prefixes=service.prefixes,
            excluded_prefixes=service.excluded_prefixes,
        )
