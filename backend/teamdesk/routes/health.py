from fastapi import APIRouter, Depends, HTTPException
from datetime import datetime, timezone
from teamdesk.config import settings
from teamdesk.db import get_db
from teamdesk.utils.logger import log_warning

router = APIRouter()

def _now() -> str:
    return datetime.now(timezone.utc).isoformat()

@router.get("/health")
async def health_check(db=Depends(get_db)):
    """
    Basic health check endpoint for production monitoring
    """
    health_status = {
        "status": "healthy",
        "timestamp": _now(),
        "version": settings.VERSION,
        "checks": {}
    }

    # Database connectivity check
    try:
        await db.command("ping")
        health_status["checks"]["database"] = {"status": "healthy"}
    except Exception as e:
        log_warning(f"Health check could not reach the database: {e}")
        health_status["checks"]["database"] = {"status": "unhealthy", "error": "database unreachable"}
        health_status["status"] = "degraded"

    return health_status

@router.get("/health/ready")
async def readiness_check(db=Depends(get_db)):
    """
    Readiness probe: ready only when the database answers
    """
    try:
        await db.command("ping")
    except Exception as e:
        log_warning(f"Readiness check failed: {e}")
        raise HTTPException(
            status_code=503,
            detail={
                "status": "not_ready",
                "timestamp": _now(),
            }
        )

    return {
        "status": "ready",
        "timestamp": _now()
    }

@router.get("/health/live")
async def liveness_check():
    """
    Liveness probe endpoint
    """
    return {
        "status": "alive",
        "timestamp": _now()
    }
