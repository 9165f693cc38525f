from fastapi import APIRouter

from dashboard.api.dashboard import get_sync_worker

router = APIRouter(prefix="/api/alerting", tags=["alerting"])


@router.get("/status")
def alerting_status():
    """Whether check sync is active and how many passes are waiting"""
    worker = get_sync_worker()
    if worker is None:
        return {"enabled": False, "running": False, "pending": 0, "backend_url": None}
    return {
        "enabled": worker.orchestrator.enabled,
        "running": worker.running,
        "pending": worker.pending,
        "backend_url": worker.orchestrator.config.base_url,
    }
