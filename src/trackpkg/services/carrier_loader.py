"""Service for loading and managing carrier adapters."""

import importlib.util
import logging
import threading
from pathlib import Path

from trackpkg.carriers.base import BaseCarrier, CarrierConfig
from trackpkg.config import settings

logger = logging.getLogger(__name__)


class CarrierLoader:
    """Loads carrier adapters from the carriers directory.

    Carriers are kept in priority order, which is the order the classifier
    tries them in.
    """

    def __init__(self, carriers_dir: Path | None = None):
        self.carriers_dir = carriers_dir or settings.carriers_dir
        self._carriers: dict[str, BaseCarrier] = {}
        self._configs: dict[str, CarrierConfig] = {}
        self._loaded = False
        self._lock = threading.Lock()

    def load_all(self) -> dict[str, BaseCarrier]:
        """Load all carrier adapters from the carriers directory."""
        with self._lock:
            if self._loaded:
                return self._carriers

            for carrier_dir in sorted(self.carriers_dir.iterdir()):
                if not carrier_dir.is_dir():
                    continue
                if carrier_dir.name.startswith("_") or carrier_dir.name.startswith("."):
                    continue

                self._load_carrier(carrier_dir)

            self._configs = dict(
                sorted(self._configs.items(), key=lambda item: item[1].priority)
            )
            self._carriers = dict(
                sorted(self._carriers.items(), key=lambda item: item[1].config.priority)
            )
            self._loaded = True

        return self._carriers

    def _load_carrier(self, carrier_dir: Path) -> None:
        """Load a single carrier adapter."""
        config_path = carrier_dir / "carrier.yaml"
        validator_path = carrier_dir / "validator.py"

        if not config_path.exists():
            logger.warning("Skipping %s: no carrier.yaml", carrier_dir.name)
            return

        try:
            config = CarrierConfig.from_yaml(config_path)
        except Exception as e:
            logger.error("Error loading config for %s: %s", carrier_dir.name, e)
            return

        if not config.enabled:
            logger.info("Skipping %s: disabled", carrier_dir.name)
            return

        if not validator_path.exists():
            logger.warning("%s has no validator.py", carrier_dir.name)
            return

        try:
            # Dynamically load the validator module
            spec = importlib.util.spec_from_file_location(
                f"trackpkg.carriers.{carrier_dir.name}.validator",
                validator_path,
            )
            if spec is None or spec.loader is None:
                logger.error("Error loading validator for %s: invalid spec", carrier_dir.name)
                return

            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)

            # Find the carrier class (should be a subclass of BaseCarrier)
            carrier_class = None
            for name in dir(module):
                obj = getattr(module, name)
                if (
                    isinstance(obj, type)
                    and issubclass(obj, BaseCarrier)
                    and obj is not BaseCarrier
                ):
                    carrier_class = obj
                    break

            if carrier_class is None:
                logger.error("No carrier class found in %s", validator_path)
                return

            carrier = carrier_class(config)
            self._carriers[config.id.value] = carrier
            self._configs[config.id.value] = config
            logger.info("Loaded carrier: %s", config.name)

        except Exception:
            logger.exception("Error loading validator for %s", carrier_dir.name)

    def get_carrier(self, carrier_id: str) -> BaseCarrier | None:
        """Get a carrier by ID."""
        self.load_all()
        return self._carriers.get(carrier_id)

    def get_config(self, carrier_id: str) -> CarrierConfig | None:
        """Get a carrier config by ID."""
        self.load_all()
        return self._configs.get(carrier_id)

    def detect_carrier(self, tracking_number: str) -> list[BaseCarrier]:
        """Detect which carriers accept a tracking number, in priority order.

        The built-in carriers are mutually exclusive, so at most one matches.
        """
        return [
            carrier
            for carrier in self.load_all().values()
            if carrier.matches_tracking_number(tracking_number)
        ]

    def list_carriers(self) -> list[CarrierConfig]:
        """List all loaded carrier configurations."""
        self.load_all()
        return list(self._configs.values())


# Global carrier loader instance
carrier_loader = CarrierLoader()
