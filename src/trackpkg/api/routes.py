"""API routes for tracking number detection."""

from fastapi import APIRouter, HTTPException

from trackpkg.services.carrier_loader import carrier_loader
from trackpkg.services.classifier import identify_tracking_number, tracking_url

router = APIRouter()


@router.get("/api/detect-carrier")
async def detect_carrier(tracking_number: str):
    """API endpoint to detect carrier and service from a tracking number."""
    match = identify_tracking_number(tracking_number)
    if match is None:
        return {
            "tracking_number": tracking_number,
            "carrier": None,
            "service": None,
            "tracking_url": None,
        }

    carrier = carrier_loader.get_carrier(match.carrier.value)
    return {
        "tracking_number": tracking_number,
        "carrier": match.carrier.value,
        "service": match.service,
        "tracking_url": carrier.get_tracking_url(tracking_number),
    }


@router.get("/api/tracking-url")
async def get_tracking_url(tracking_number: str):
    """API endpoint returning the carrier tracking URL for a tracking number."""
    url = tracking_url(tracking_number)

    if url is None:
        raise HTTPException(status_code=404, detail="Not a recognised tracking number")

    return {"tracking_number": tracking_number, "url": url}


@router.get("/api/carriers")
async def list_carriers():
    """API endpoint to list all carriers."""
    return {
        "carriers": [
            {
                "id": c.id.value,
                "name": c.name,
                "website": c.website,
                "enabled": c.enabled,
                "services": [{"id": s.id, "name": s.name} for s in c.services],
            }
            for c in carrier_loader.list_carriers()
        ],
    }
