"""
Dashboard Service Launcher

Starts the dashboard API with alerting check sync.

This service provides:
- Dashboard save/get/delete
- Check sync to the alerting backend after every save (when SEYREN_URL is set)

Usage:
    python scripts/run_dashboard_service.py --host 0.0.0.0 --port 8080

Environment Variables:
    DASHBOARD_API_PORT: API port (default: 8080)
    DASHBOARD_BIND_HOST: Bind address (default: 0.0.0.0)
    DASHBOARD_LOG_LEVEL: Log level name (default: INFO)
    SEYREN_URL: Alerting backend base URL (unset disables check sync)
    SEYREN_USERNAME / SEYREN_PASSWORD: Optional basic auth for the backend
"""
import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from dashboard.config import DASHBOARD_API_PORT, DASHBOARD_BIND_HOST, DASHBOARD_LOG_LEVEL
from shared.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the dashboard service with alerting check sync")
    parser.add_argument("--host", default=DASHBOARD_BIND_HOST)
    parser.add_argument("--port", type=int, default=DASHBOARD_API_PORT)
    parser.add_argument("--log-level", default=DASHBOARD_LOG_LEVEL)
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    setup_logging("dashboard", level=args.log_level, log_file=args.log_file)

    print("=" * 60)
    print("Dashboard Service")
    print("=" * 60)
    print(f"API Address: {args.host}:{args.port}")
    print(f"Alerting backend: {os.getenv('SEYREN_URL') or 'disabled'}")
    print("=" * 60)

    os.environ["DASHBOARD_API_PORT"] = str(args.port)
    os.environ["DASHBOARD_BIND_HOST"] = args.host

    uvicorn.run("dashboard.service:app", host=args.host, port=args.port, reload=False, log_config=None)


if __name__ == "__main__":
    main()
