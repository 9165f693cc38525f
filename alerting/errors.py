"""Exceptions raised while building checks and talking to the alerting backend."""


class AlertingError(Exception):
    """Base class for every failure in the check sync pipeline."""


class IneligiblePanelError(AlertingError):
    """The panel cannot be turned into a check. Only that panel is skipped."""

    reason = "ineligible"

    def __init__(self, message: str, title=None):
        super().__init__(message)
        self.title = title


class NotAGraphError(IneligiblePanelError):
    reason = "not_a_graph"


class NoThresholdsError(IneligiblePanelError):
    reason = "no_thresholds"


class MalformedPanelError(IneligiblePanelError):
    reason = "malformed_panel"


class AlertingClientError(AlertingError):
    """Communication with the alerting backend failed."""


class AlertingRequestError(AlertingClientError):
    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class NoLocationHeaderError(AlertingClientError):
    """Create returned without a Location header, so the new id is unknown."""
