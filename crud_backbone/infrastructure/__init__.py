"""Infrastructure layer - Adapters for the domain protocols.

Structure:
- persistence/: SQLAlchemy models, Database (engine/pool owner), repositories
- logging/: structlog adapters implementing LoggerProtocol
- security/: Authentication capability used by the auth gate

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
