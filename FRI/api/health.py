from datetime import datetime, timezone

from fastapi import APIRouter

from packages.fri_core.config import FRIConfig

router = APIRouter()
config = FRIConfig.load()

@router.get("/health")
async def health_check():
    """
    Server Liveness Probe.
    Returns status, version, and current timestamp.
    """
    return {
        "status": "ok",
        "version": config.VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
