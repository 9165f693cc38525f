"""
Dashboard Service

Stores dashboards and hands every successful save to the alerting check sync.
Responsibilities:
- Dashboard save/get/delete over HTTP
- Version and name conflict detection on save
- Triggering the detached check sync pass after a save
"""
