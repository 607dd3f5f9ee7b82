# earshop/api/v1/routers/health.py
import time
from fastapi import APIRouter, Depends
from earshop.api.deps import mongo_db
from earshop.core.config import get_settings

router = APIRouter(tags=["health"])
START_TIME = time.time()


@router.get("/health")
async def health(db = Depends(mongo_db)):
    """
    Tolerant health check: pings the document store and reports basic app info.
    """
    settings = get_settings()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "uptime_seconds": int(time.time() - START_TIME),
    }

    try:
        await db.command("ping")
        checks["mongodb"] = "ok"
    except Exception as e:
        checks["mongodb"] = f"error: {e}"

    status = "ok" if checks["mongodb"] == "ok" else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
