"""Domain layer: value holders, capability abstractions, and contracts.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
