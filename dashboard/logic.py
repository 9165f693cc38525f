"""
Dashboard persistence logic.
Save/get/delete with the conflict rules the HTTP layer reports as 404/412.
"""

import re
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from dashboard.models import Dashboard


class DashboardNotFound(Exception):
    status = "not-found"


class DashboardNameExists(Exception):
    status = "name-exists"


class DashboardVersionMismatch(Exception):
    status = "version-mismatch"


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.strip().lower()).strip("-")
    return slug or "dashboard"


def get_dashboard_by_slug(session: Session, slug: str) -> Optional[Dashboard]:
    return session.scalars(select(Dashboard).where(Dashboard.slug == slug)).first()


def save_dashboard(session: Session, document: Dict[str, Any], overwrite: bool = False) -> Dashboard:
    """
    Insert or update a dashboard from its JSON document.

    The stored document gets `id` and `version` set to the persisted values.

    Raises:
        DashboardNotFound: document carries an id that is not stored
        DashboardNameExists: another dashboard already uses the same slug
        DashboardVersionMismatch: stored version is newer than the incoming one
    """
    title = str(document.get("title") or "").strip()
    if not title:
        raise ValueError("Dashboard title is required")
    slug = slugify(title)

    dash_id = document.get("id")
    existing: Optional[Dashboard] = None
    if dash_id is not None:
        existing = session.get(Dashboard, dash_id)
        if existing is None:
            raise DashboardNotFound("Dashboard not found")

    same_slug = get_dashboard_by_slug(session, slug)
    if same_slug is not None and (existing is None or same_slug.id != existing.id):
        if not overwrite:
            raise DashboardNameExists("A dashboard with the same name already exists")
        if existing is None:
            existing = same_slug
        else:
            session.delete(same_slug)
            session.flush()

    if existing is not None and not overwrite:
        incoming_version = document.get("version")
        if isinstance(incoming_version, int) and existing.version > incoming_version:
            raise DashboardVersionMismatch("The dashboard has been changed by someone else")

    dashboard = existing or Dashboard(version=0)
    dashboard.slug = slug
    dashboard.title = title
    dashboard.version = (dashboard.version or 0) + 1
    if dashboard.id is None:
        session.add(dashboard)
        session.flush()

    stored = dict(document)
    stored["id"] = dashboard.id
    stored["version"] = dashboard.version
    dashboard.set_data(stored)

    session.commit()
    session.refresh(dashboard)
    return dashboard


def delete_dashboard(session: Session, slug: str) -> str:
    """Delete by slug and return the deleted dashboard's title"""
    dashboard = get_dashboard_by_slug(session, slug)
    if dashboard is None:
        raise DashboardNotFound("Dashboard not found")
    title = dashboard.title
    session.delete(dashboard)
    session.commit()
    return title
