"""Domain layer: entities, value objects, protocols and pure validators.

Nothing in this package imports FastAPI or SQLAlchemy.
"""
