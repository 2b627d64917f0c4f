"""
Top-level package for the Employee Registry API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``employee_registry_api.app.main:app``.
"""

__all__ = []
