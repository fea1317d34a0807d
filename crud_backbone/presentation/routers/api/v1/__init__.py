"""API v1 (controllers, route registry, response envelopes)."""
