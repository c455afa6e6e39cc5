"""Service layer: orchestrators and capability-level calling code.

Services may import from domain and receive infrastructure providers
through their constructors. They must never import from commands or output.
"""
