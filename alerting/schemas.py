"""
Typed views over the loose dashboard JSON and the check wire format.

Dashboards arrive as arbitrary JSON. Rows and panels are validated one at a
time so a single malformed element only disqualifies itself.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GraphPanel(BaseModel):
    """The subset of a graph panel the check builder relies on."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: Literal["graph"]
    title: str
    grid: Dict[str, Any]
    targets: Optional[List[Any]] = None
    alert_id: Optional[str] = Field(default=None, alias="alertID")

    @property
    def existing_check_id(self) -> str:
        return self.alert_id or ""

    def first_target(self) -> str:
        # For now just one target per graph.
        for entry in self.targets or []:
            if isinstance(entry, dict):
                target = entry.get("target")
                if isinstance(target, str) and target:
                    return target
        return ""


class DashboardRow(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Any = None
    panels: Optional[List[Any]] = None


class Check(BaseModel):
    """A Seyren check. `id` is local bookkeeping and never sent on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", exclude=True)
    name: str
    description: str = ""
    target: str = ""
    warn: str
    error: str
    enabled: bool = True
    live: bool = False
    from_: Optional[str] = Field(default=None, alias="from")
    until: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(by_alias=True, exclude_none=True)
        for key in ("from", "until"):
            if not payload.get(key):
                payload.pop(key, None)
        return payload


class SyncStatus(str, enum.Enum):
    """Per-panel result of a sync pass"""
    CREATED = "created"
    NOT_A_GRAPH = "not_a_graph"
    NO_THRESHOLDS = "no_thresholds"
    MALFORMED_PANEL = "malformed_panel"
    CREATE_FAILED = "create_failed"


class SyncOutcome(BaseModel):
    status: SyncStatus
    panel_title: Optional[str] = None
    check_id: Optional[str] = None
    replaced_check_id: Optional[str] = None
    delete_error: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == SyncStatus.CREATED
