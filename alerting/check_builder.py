"""
Check Builder

Turns a single dashboard panel into a Check. Pure: never touches the network
and never mutates the panel.

Eligibility, in order:
1. The panel is a mapping whose `type` is "graph"      (else NotAGraphError)
2. The graph fields have usable shapes                  (else MalformedPanelError)
3. The grid holds at least two numeric thresholds       (else NoThresholdsError)
"""

import logging
from typing import Any

from pydantic import ValidationError

from alerting.errors import MalformedPanelError, NoThresholdsError, NotAGraphError
from alerting.schemas import Check, GraphPanel
from alerting.thresholds import extract_thresholds

logger = logging.getLogger(__name__)

DESCRIPTION_TEMPLATE = "Check added from grafana for '{name}'"


def format_threshold(value: float) -> str:
    return f"{value:.6f}"


class CheckBuilder:
    """Build Seyren checks from graph panels"""

    def __init__(self, description_template: str = DESCRIPTION_TEMPLATE):
        self.description_template = description_template

    def parse_panel(self, panel: Any) -> GraphPanel:
        if not isinstance(panel, dict):
            raise MalformedPanelError(f"Panel is not an object: {type(panel).__name__}")

        title = panel.get("title")
        if panel.get("type") != "graph":
            raise NotAGraphError(f"Ignoring panel {title!r}: not a graph (type={panel.get('type')!r})", title=title)

        try:
            return GraphPanel.model_validate(panel)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedPanelError(f"Ignoring graph {title!r}: malformed fields ({fields})", title=title) from e

    def build(self, panel: Any) -> Check:
        """
        Build a Check from one panel.

        Raises:
            NotAGraphError: panel type is not "graph"
            MalformedPanelError: panel is not an object or has badly typed fields
            NoThresholdsError: fewer than two numeric thresholds in the grid
        """
        graph = self.parse_panel(panel)

        thresholds = extract_thresholds(graph.grid)
        if len(thresholds) < 2:
            raise NoThresholdsError(
                f"Ignoring graph {graph.title!r}: found {len(thresholds)} threshold(s), need 2",
                title=graph.title,
            )

        return Check(
            id=graph.existing_check_id,
            name=graph.title,
            description=self.description_template.format(name=graph.title),
            target=graph.first_target(),
            warn=format_threshold(thresholds[0]),
            error=format_threshold(thresholds[1]),
            enabled=True,
            live=False,
        )
