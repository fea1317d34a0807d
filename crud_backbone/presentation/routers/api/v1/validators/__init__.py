"""Per-resource validation schemas."""
