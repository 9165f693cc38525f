"""
Shared utilities for the dashboard service and the alerting sync pipeline.

This package contains common functionality used across dashboard and alerting:
- logging_config: one-shot logging setup for a component
"""
