"""JSON API (middleware, validation, versioned routers)."""
