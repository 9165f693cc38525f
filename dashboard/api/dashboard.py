"""
Dashboard API

Endpoints:
- POST   /api/dashboards/db          Save a dashboard, then queue its check sync
- GET    /api/dashboards/db/{slug}   Fetch a dashboard with its meta
- DELETE /api/dashboards/db/{slug}   Delete a dashboard
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Any, Dict
import logging

from dashboard.database import SessionLocal
from dashboard.logic import (
    DashboardNameExists,
    DashboardNotFound,
    DashboardVersionMismatch,
    delete_dashboard,
    get_dashboard_by_slug,
    save_dashboard,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboards", tags=["dashboards"])


# Will be injected by service.py
_sync_worker = None

def set_sync_worker(worker):
    """Set sync worker reference (called by service.py)"""
    global _sync_worker
    _sync_worker = worker


def get_sync_worker():
    return _sync_worker


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class SaveDashboardCommand(BaseModel):
    dashboard: Dict[str, Any]
    overwrite: bool = False


@router.post("/db")
def post_dashboard(cmd: SaveDashboardCommand, db: Session = Depends(get_db)):
    try:
        dash = save_dashboard(db, cmd.dashboard, overwrite=cmd.overwrite)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DashboardNotFound as e:
        return JSONResponse(status_code=404, content={"status": e.status, "message": str(e)})
    except (DashboardNameExists, DashboardVersionMismatch) as e:
        return JSONResponse(status_code=412, content={"status": e.status, "message": str(e)})

    worker = get_sync_worker()
    if worker is not None:
        # Detached: the save response never depends on the sync
        queued = worker.submit(dash.get_data())
        logger.debug(f"Check sync for {dash.slug} queued={queued}")

    return {"status": "success", "slug": dash.slug, "version": dash.version, "id": dash.id}


@router.get("/db/{slug}")
def get_dashboard(slug: str, db: Session = Depends(get_db)):
    dash = get_dashboard_by_slug(db, slug)
    if not dash:
        raise HTTPException(status_code=404, detail="Dashboard not found")

    return {
        "dashboard": dash.get_data(),
        "meta": {
            "slug": dash.slug,
            "type": "db",
            "version": dash.version,
            "created": dash.created_at.isoformat() if dash.created_at else None,
            "updated": dash.updated_at.isoformat() if dash.updated_at else None,
        },
    }


@router.delete("/db/{slug}")
def remove_dashboard(slug: str, db: Session = Depends(get_db)):
    try:
        title = delete_dashboard(db, slug)
    except DashboardNotFound:
        raise HTTPException(status_code=404, detail="Dashboard not found")
    return {"title": title}
