"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, URL building
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions go through the shared session and return domain models::

    from simple_weather.services.http import session

    def fetch_something(lat, lon) -> Model:
        resp = session.get(build_url(lat, lon))
        return Model.model_validate_json(resp.content)
"""
