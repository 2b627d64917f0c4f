"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and double as the
records kept by the in-memory registry.
"""
