"""
Alerting check sync.

Extracts warn/error thresholds from graph panels of a saved dashboard and
mirrors them as checks on the external alerting backend (Seyren API).

Modules:
- config: environment-derived settings, resolved once at startup
- thresholds: pull thresholdN values out of a panel grid
- check_builder: turn one panel into a Check
- client: create/delete checks over HTTP
- sync: walk a dashboard and create-or-replace checks per panel
- sync_worker: background threads that run sync passes off the save path
"""
