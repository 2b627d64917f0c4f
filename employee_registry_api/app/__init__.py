"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (settings and logging), ``schemas`` (pydantic
models), ``services`` (the in-memory employee registry) and ``api``
(versioned routers).
"""

from .main import app  # noqa: F401
