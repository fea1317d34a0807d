"""crud-backbone: declarative CRUD HTTP services on FastAPI.

Layers:
    core: Result types, domain errors, configuration, dependency container
    domain: Entities, value objects, protocols, pure validators
    infrastructure: Persistence (SQLAlchemy), logging (structlog), security
    presentation: Route registry, rule engine, error/success envelopes
"""

__version__ = "0.1.0"
