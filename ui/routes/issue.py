"""Slug issuance and lookup routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from core.errors import InvalidParameter, ClockUnavailable, RandomnessUnavailable
from internal.logging import get_logger
from slugs.precision import Precision

router = APIRouter(prefix="/api/v1", tags=["slugs"])

# These will be set by app.py
_service = None
_audit = None


def init(service, audit):
    """Initialize with slug service and audit logger references."""
    global _service, _audit
    _service = service
    _audit = audit


def _raise_http(exc):
    if isinstance(exc, InvalidParameter):
        get_logger().warn("Rejected slug request", error=exc)
        raise HTTPException(status_code=400, detail=exc.to_dict()) from exc
    get_logger().error("Slug source unavailable", error=exc)
    raise HTTPException(status_code=503, detail=exc.to_dict()) from exc


def _parse_int(name, raw):
    """Strictly parse a decimal integer query value; "16.0" and "abc" are rejected."""
    if raw is None or isinstance(raw, int):
        return raw
    text = raw.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidParameter(f"{name} must be an integer, got {raw!r}", name=name, value=raw)
    return int(text)


def _issue(request, count, length):
    try:
        slugs = _service.generate_many(_parse_int("count", count), _parse_int("length", length))
    except (InvalidParameter, ClockUnavailable, RandomnessUnavailable) as exc:
        _raise_http(exc)
    precision = Precision(len(slugs[0]) - 1)
    if _audit:
        client = request.client.host if request.client else None
        _audit.log_slugs(slugs, precision.unit, client)
    return slugs, precision


@router.get("/slug")
async def slug(request: Request, length: Optional[str] = Query(None)):
    """Issue one slug; length defaults to the configured precision."""
    slugs, precision = _issue(request, 1, length)
    return {"slug": slugs[0], "length": precision.value, "precision": precision.unit}


@router.get("/slugs")
async def slugs(request: Request, count: str = Query("1"), length: Optional[str] = Query(None)):
    """Issue a batch of slugs."""
    issued, precision = _issue(request, count, length)
    return {"slugs": issued, "count": len(issued), "length": precision.value, "precision": precision.unit}


@router.get("/slugs/{slug}")
async def describe(slug: str):
    """Decode a slug back to the timestamp it was issued at."""
    try:
        return _service.describe(slug)
    except InvalidParameter as exc:
        _raise_http(exc)
