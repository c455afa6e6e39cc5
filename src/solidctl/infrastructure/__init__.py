"""Infrastructure layer: concrete providers for the domain contracts.

Loggers, payment processors, and user repositories live here. Providers
depend on domain types and third-party libs (structlog, SQLAlchemy).
They must never import from services, commands, or output.
"""
