"""Pydantic response schemas (API -> client)."""
