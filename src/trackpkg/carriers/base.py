"""Base classes for carrier adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from trackpkg.models import Carrier


@dataclass
class ServiceConfig:
    """A carrier service (e.g. FedEx Ground) declared in carrier.yaml.

    ``window``, ``prefixes`` and ``excluded_prefixes`` only apply to
    services validated with the shared mod 10 scheme.
    """

    id: str
    name: str
    window: int = 0
    prefixes: list[str] = field(default_factory=list)
    excluded_prefixes: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceConfig":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            window=int(data.get("window", 0)),
            prefixes=[str(prefix) for prefix in data.get("prefixes", [])],
            excluded_prefixes=[str(prefix) for prefix in data.get("excluded_prefixes", [])],
        )


@dataclass
class CarrierConfig:
    """Configuration loaded from carrier.yaml."""

    id: Carrier
    name: str
    website: str
    tracking_url_template: str
    services: list[ServiceConfig]
    priority: int = 100
    enabled: bool = True

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CarrierConfig":
        """Load carrier configuration from a YAML file.

        Raises:
            ValueError: If the carrier id is not a known ``Carrier``.
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(
            id=Carrier(data["id"]),
            name=data["name"],
            website=data["website"],
            tracking_url_template=data.get("tracking_url_template", ""),
            services=[ServiceConfig.from_dict(s) for s in data.get("services", [])],
            priority=int(data.get("priority", 100)),
            enabled=data.get("enabled", True),
        )


class BaseCarrier(ABC):
    """Abstract base class for carrier adapters.

    To add a carrier:
    1. Create a directory in /carriers/ named after the carrier
    2. Add a carrier.yaml with configuration and its services
    3. Create a validator.py that subclasses BaseCarrier
    4. Implement the validate_service method
    """

    def __init__(self, config: CarrierConfig):
        self.config = config

    def match_service(self, tracking_number: str) -> ServiceConfig | None:
        """Return the first service (in carrier.yaml order) that accepts the number."""
        normalised = tracking_number.strip()
        for service in self.config.services:
            if self.validate_service(service, normalised):
                return service
        return None

    def matches_tracking_number(self, tracking_number: str) -> bool:
        """Check if a tracking number is valid for any of this carrier's services."""
        return self.match_service(tracking_number) is not None

    def get_tracking_url(self, tracking_number: str) -> str:
        """Get the URL to track a parcel on the carrier's website.

        The number is substituted verbatim; it is not URL-encoded.
        """
        return self.config.tracking_url_template.format(tracking_number=tracking_number)

    @abstractmethod
    def validate_service(self, service: ServiceConfig, tracking_number: str) -> bool:
        """Check a tracking number against one of this carrier's services.

        This method must be implemented by each carrier adapter. It must not
        raise for any string input.

        Args:
            service: The service configuration from carrier.yaml.
            tracking_number: The tracking number, already trimmed.

        Returns:
            True if the number is well formed and its check digit matches.
        """
        pass
