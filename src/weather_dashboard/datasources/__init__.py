"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports + provider object
    ├── client.py         # API URLs, requested variables, fetch helper
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return raw dicts or schema models and raise the error kinds
in ``weather_dashboard.errors``. Normalization into typed snapshots lives in
``weather_dashboard.normalizer``, not here.

Adding a provider
-----------------
1. Create ``datasources/{name}/`` with the files above.
2. Expose an object with ``geocode(query)``, ``reverse_geocode(lat, lon)``
   and ``fetch_forecast(lat, lon)`` returning an Open-Meteo-shaped payload
   (see ``openmeteo.OpenMeteoProvider``).
3. Pass it to ``Dashboard(provider=...)`` or the build flow.
4. Add tests in ``tests/test_{name}.py``.
"""
