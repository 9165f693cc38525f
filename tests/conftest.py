"""Pytest configuration and shared fixtures."""

import json
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class StubAlertingBackend:
    """In-process stand-in for the checks API, served from a thread."""

    def __init__(self):
        self.requests = []
        self.next_id = 42
        self.create_status = 201
        self.omit_location = False
        self.absolute_location = False
        self.delete_status = 204
        self._lock = threading.Lock()
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler_class())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()

    def requests_for(self, method):
        with self._lock:
            return [r for r in self.requests if r["method"] == method]

    def _handler_class(self):
        backend = self

        class Handler(BaseHTTPRequestHandler):
            def _record(self):
                length = int(self.headers.get("Content-Length") or 0)
                raw = self.rfile.read(length) if length else b""
                entry = {
                    "method": self.command,
                    "path": self.path,
                    "headers": dict(self.headers),
                    "body": json.loads(raw) if raw else None,
                }
                with backend._lock:
                    backend.requests.append(entry)
                return entry

            def do_POST(self):
                self._record()
                with backend._lock:
                    check_id = backend.next_id
                    backend.next_id += 1
                self.send_response(backend.create_status)
                if not backend.omit_location:
                    location = f"/api/checks/{check_id}"
                    if backend.absolute_location:
                        location = f"{backend.url}{location}"
                    self.send_header("Location", location)
                self.send_header("Content-Length", "0")
                self.end_headers()

            def do_DELETE(self):
                self._record()
                self.send_response(backend.delete_status)
                self.send_header("Content-Length", "0")
                self.end_headers()

            def log_message(self, format, *args):
                pass

        return Handler


@pytest.fixture
def alerting_backend():
    backend = StubAlertingBackend()
    backend.start()
    yield backend
    backend.stop()


def make_panel(title="CPU", thresholds=(5.0, 10.0), panel_type="graph", alert_id="", target="stats.cpu"):
    grid = {"leftMax": None, "threshold1Color": "rgba(216, 200, 27, 0.27)"}
    for i, value in enumerate(thresholds, start=1):
        grid[f"threshold{i}"] = value
    return {
        "type": panel_type,
        "title": title,
        "grid": grid,
        "targets": [{"target": target}] if target is not None else [],
        "alertID": alert_id,
    }


def make_dashboard(*rows, title="Ops"):
    return {"title": title, "rows": [{"title": f"row {i}", "panels": list(panels)} for i, panels in enumerate(rows)]}
