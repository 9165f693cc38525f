import os


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


DASHBOARD_API_PORT = _int_env("DASHBOARD_API_PORT", 8080)
DASHBOARD_BIND_HOST = str(os.getenv("DASHBOARD_BIND_HOST", "0.0.0.0")).strip()
DASHBOARD_DATABASE_URL = str(os.getenv("DASHBOARD_DATABASE_URL", "sqlite:///./dashboard/data/dashboards.db")).strip()
DASHBOARD_LOG_LEVEL = str(os.getenv("DASHBOARD_LOG_LEVEL", "INFO")).strip()
