"""
Main entrypoint for the Employee Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn employee_registry_api.app.main:app --reload

Each application owns its own ``EmployeeRegistry`` (``app.state.registry``),
seeded with the five initial employees.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.employee_service import EmployeeRegistry


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app with.  Defaults to the settings read
        from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with a freshly
        seeded registry.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.registry = EmployeeRegistry()

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> Dict[str, Any]:
        return {"status": "ok", "employees": len(request.app.state.registry)}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
