"""
Dashboard Service Entrypoint

FastAPI application for dashboard storage with alerting check sync.
Includes the API routers, database initialization and the sync worker lifecycle.
"""

from fastapi import FastAPI
import logging

from alerting.config import load_alerting_config
from alerting.sync import SyncOrchestrator
from alerting.sync_worker import SyncWorker
from dashboard.api import alerting, dashboard
from dashboard.database import init_db

logger = logging.getLogger(__name__)

app = FastAPI(title="Dashboard Service")

app.include_router(dashboard.router)
app.include_router(alerting.router)

# Global sync worker instance
sync_worker = None


@app.on_event("startup")
def startup_init():
    """Initialize database and start the check sync worker"""
    global sync_worker

    init_db()

    # Configuration is resolved once here and passed down
    config = load_alerting_config()
    if config.enabled:
        logger.info(f"Alerting backend: {config.base_url}")

    orchestrator = SyncOrchestrator(config)
    sync_worker = SyncWorker(orchestrator, workers=config.sync_workers, queue_size=config.queue_size)
    sync_worker.start()

    dashboard.set_sync_worker(sync_worker)

    logger.info("Dashboard service startup complete")


@app.on_event("shutdown")
def shutdown_cleanup():
    """Stop sync worker on shutdown"""
    global sync_worker

    if sync_worker:
        logger.info("Stopping sync worker...")
        sync_worker.stop()
        dashboard.set_sync_worker(None)

    logger.info("Dashboard service shutdown complete")


@app.get("/")
def root():
    return {
        "service": "dashboard",
        "message": "Dashboard service running",
    }
