"""
Prefect flows.

Flows:
- build: Resolve location, fetch + normalize forecast, render static page

Usage (local):
    python -m weather_dashboard.flows.build

Usage (with the Prefect UI):
    prefect server start  # Optional, for dashboard
    python -m weather_dashboard.flows.build
"""
