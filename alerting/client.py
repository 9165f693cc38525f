"""
Alerting Backend Client

Thin HTTP client for the Seyren checks API.

Endpoints used:
- POST   {base}/api/checks        create; new id comes back in the Location header
- DELETE {base}/api/checks/{id}   delete; status line is only logged by callers

Every call goes out on its own connection; there is no retry.
"""

import json
import logging
from typing import Optional
from urllib.parse import quote, urlparse

import requests
from requests.auth import HTTPBasicAuth

from alerting.config import AlertingConfig
from alerting.errors import AlertingRequestError, NoLocationHeaderError
from alerting.schemas import Check

logger = logging.getLogger(__name__)


def extract_id_from_location(location: str) -> str:
    """Return the last path segment of a Location header value ('' if none)."""
    path = urlparse(location.strip()).path
    segments = [s for s in path.split("/") if s]
    return segments[-1] if segments else ""


class AlertingClient:
    """
    Client for the alerting backend's check resource.

    Usage:
        client = AlertingClient("http://seyren:8080", username="u", password="p")
        check_id = client.create(check)
        client.delete(check.model_copy(update={"id": check_id}))
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 10.0
    ):
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: AlertingConfig) -> "AlertingClient":
        if not config.base_url:
            raise ValueError("Alerting backend URL is not configured")
        return cls(
            config.base_url,
            username=config.username,
            password=config.password,
            timeout=config.timeout_seconds,
        )

    def _auth(self) -> Optional[HTTPBasicAuth]:
        if not self.username and not self.password:
            logger.info("NOTE: No authentication information found for the alerting backend")
            return None
        return HTTPBasicAuth(self.username or "", self.password or "")

    def create(self, check: Check) -> str:
        """
        POST the check and return the id the backend assigned to it.

        Raises:
            AlertingRequestError: network failure, non-2xx status, or a Location without an id
            NoLocationHeaderError: response carried no Location header
        """
        url = f"{self.base_url}/api/checks"
        body = json.dumps(check.to_payload())
        logger.debug(f"JSON check: {body}")

        try:
            response = requests.post(
                url,
                data=body,
                headers={"Content-Type": "application/json"},
                auth=self._auth(),
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise AlertingRequestError(f"Create check {check.name!r} failed: {e}") from e

        try:
            if not response.ok:
                raise AlertingRequestError(
                    f"Create check {check.name!r} failed: {response.status_code} {response.reason}",
                    status_code=response.status_code,
                )

            location = response.headers.get("Location")
            if not location:
                raise NoLocationHeaderError(
                    f"Create check {check.name!r} returned {response.status_code} without a Location header"
                )
        finally:
            response.close()

        check_id = extract_id_from_location(location)
        if not check_id:
            raise AlertingRequestError(f"Cannot derive check id from Location {location!r}")

        logger.info(f"Created check {check.name!r} with id {check_id}")
        return check_id

    def delete(self, check: Check) -> str:
        """
        DELETE the check by id and return the raw status line.

        Non-2xx answers are returned, not raised. Only network failures raise
        AlertingRequestError.
        """
        url = f"{self.base_url}/api/checks/{quote(check.id, safe='')}"

        try:
            response = requests.delete(url, auth=self._auth(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise AlertingRequestError(f"Delete check {check.id!r} failed: {e}") from e

        status = f"{response.status_code} {response.reason or ''}".strip()
        response.close()
        return status
