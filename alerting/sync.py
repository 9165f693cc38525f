"""
Check Sync Orchestrator

Walks a dashboard's rows and panels and, for every eligible graph panel,
replaces its check on the alerting backend:

1. Build a Check from the panel (skip the panel if ineligible)
2. If the panel already carries an alertID, delete that check (best effort)
3. Create the check
4. Write the new id back into the panel's `alertID`

Failures never leave the panel they happened on. The dashboard passed in is
mutated in place, so callers hand over a private copy.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError

from alerting.check_builder import CheckBuilder
from alerting.client import AlertingClient
from alerting.config import AlertingConfig
from alerting.errors import (
    AlertingClientError,
    IneligiblePanelError,
    MalformedPanelError,
    NoThresholdsError,
    NotAGraphError,
)
from alerting.schemas import DashboardRow, SyncOutcome, SyncStatus

logger = logging.getLogger(__name__)

_INELIGIBLE_STATUS = {
    NotAGraphError: SyncStatus.NOT_A_GRAPH,
    NoThresholdsError: SyncStatus.NO_THRESHOLDS,
    MalformedPanelError: SyncStatus.MALFORMED_PANEL,
}


def _title_of(panel: Any) -> Optional[str]:
    if isinstance(panel, dict) and panel.get("title") is not None:
        return str(panel["title"])
    return None


class SyncOrchestrator:
    """Create-or-replace Seyren checks for every graph panel of a dashboard"""

    def __init__(
        self,
        config: AlertingConfig,
        client: Optional[AlertingClient] = None,
        builder: Optional[CheckBuilder] = None
    ):
        self.config = config
        self.builder = builder or CheckBuilder()
        if client is None and config.enabled:
            client = AlertingClient.from_config(config)
        self.client = client

    @property
    def enabled(self) -> bool:
        return self.config.enabled and self.client is not None

    def iter_panels(self, dashboard: Any) -> Iterator[Any]:
        """Yield raw panel objects, skipping rows that cannot hold graphs."""
        if not isinstance(dashboard, dict):
            logger.warning(f"Dashboard is not an object ({type(dashboard).__name__}), nothing to sync")
            return

        rows = dashboard.get("rows")
        if not isinstance(rows, list):
            logger.info(f"Dashboard {dashboard.get('title')!r} has no rows, nothing to sync")
            return

        for index, raw_row in enumerate(rows):
            if not isinstance(raw_row, dict):
                logger.warning(f"Row {index} is not an object. Ignoring")
                continue
            try:
                row = DashboardRow.model_validate(raw_row)
            except ValidationError:
                logger.warning(f"Row {index} ({raw_row.get('title')!r}) has malformed panels. Ignoring")
                continue
            if row.panels is None:
                logger.info(f"This row isn't a graph. Ignoring {row.title!r}")
                continue
            # Yield the raw entries; alertID is written back onto these.
            yield from raw_row["panels"]

    def sync_panel(self, panel: Any) -> SyncOutcome:
        """Run the create-or-replace protocol for one panel"""
        title = _title_of(panel)

        try:
            check = self.builder.build(panel)
        except IneligiblePanelError as e:
            logger.info(f"{e}. Moving on...")
            return SyncOutcome(status=_INELIGIBLE_STATUS.get(type(e), SyncStatus.MALFORMED_PANEL),
                               panel_title=title, detail=str(e))

        outcome = SyncOutcome(status=SyncStatus.CREATE_FAILED, panel_title=title)

        if check.id:
            logger.info(f"Check {check.id} already in place for {check.name!r}. Deleting the existing check")
            outcome.replaced_check_id = check.id
            try:
                status = self.client.delete(check)
                logger.info(f"Delete status - {status}")
            except AlertingClientError as e:
                logger.warning(f"Delete of check {check.id} failed: {e}")
                outcome.delete_error = str(e)

        try:
            check_id = self.client.create(check)
        except AlertingClientError as e:
            logger.warning(f"{e}")
            outcome.detail = str(e)
            return outcome

        panel["alertID"] = check_id
        outcome.status = SyncStatus.CREATED
        outcome.check_id = check_id
        return outcome

    def sync(self, dashboard: Dict[str, Any]) -> None:
        """
        One sync pass over the dashboard.

        Nothing is returned and nothing is raised for bad panels or remote
        failures; everything is reported through the log.
        """
        if not self.enabled:
            logger.info("No alerting backend URL configured. Skipping check sync")
            return

        outcomes: List[SyncOutcome] = []
        for panel in self.iter_panels(dashboard):
            try:
                outcomes.append(self.sync_panel(panel))
            except Exception as e:
                logger.error(f"Unexpected error syncing panel {_title_of(panel)!r}: {e}", exc_info=True)

        title = dashboard.get("title") if isinstance(dashboard, dict) else None
        created = sum(1 for o in outcomes if o.ok)
        failed = sum(1 for o in outcomes if o.status == SyncStatus.CREATE_FAILED)
        logger.info(
            f"Check sync for {title!r} done: "
            f"{created} created, {failed} failed, {len(outcomes) - created - failed} skipped"
        )
