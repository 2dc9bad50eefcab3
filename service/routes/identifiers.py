"""Identifier issuing and inspection routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ids.codec import decode
from internal.errors import DecodeError
from internal.logging import get_logger
from service.auth import verify_basic_auth
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["ids"])

# These will be set by app.py
_generator = None
_max_batch = 100
_stats = {"generated": 0, "decoded": 0, "rejected": 0}


def init(generator, max_batch):
    """Initialize with the shared generator and batch limit."""
    global _generator, _max_batch
    _generator = generator
    _max_batch = max_batch
    for key in _stats:
        _stats[key] = 0


def describe(identifier):
    """JSON view of an identifier's parts."""
    try:
        created = identifier.datetime.isoformat().replace("+00:00", "Z")
    except (OverflowError, ValueError, OSError):
        created = None
    return {
        "id": str(identifier),
        "timestamp_ms": identifier.timestamp_ms,
        "datetime": created,
        "random": identifier.random.hex(),
        "hex": identifier.hex(),
    }


@router.post("/ids")
async def generate(count: int = Query(1, ge=1)):
    """Issue `count` new identifiers."""
    if count > _max_batch:
        raise HTTPException(
            status_code=422,
            detail=f"count must be at most {_max_batch}",
        )
    identifiers = _generator.generate_many(count)
    _stats["generated"] += count
    return {"ids": [str(identifier) for identifier in identifiers], "timestamp": format_timestamp()}


@router.get("/ids/{text}")
async def inspect(text: str):
    """Decode an identifier and return its parts. Malformed input is a 400."""
    try:
        identifier = decode(text)
    except DecodeError as exc:
        _stats["rejected"] += 1
        get_logger().debug("decode rejected", error=exc, code=exc.code)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.to_dict())
    _stats["decoded"] += 1
    return describe(identifier)


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return issuing statistics (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "ids": dict(_stats),
        "generator": {"entropy": _generator.entropy.name, "max_batch": _max_batch},
    }
