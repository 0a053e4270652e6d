"""API routes for issuance stats."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# These will be set by app.py
_service = None
_audit = None


def init(service, audit):
    """Initialize with slug service and audit logger references."""
    global _service, _audit
    _service = service
    _audit = audit


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return issuance and audit log statistics (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "slugs": _service.get_stats(),
        "config": {
            "default_length": _service.config.default_length,
            "max_batch": _service.config.max_batch,
            "sampling": _service.config.sampling,
        },
        "audit": _audit.get_stats(),
    }
