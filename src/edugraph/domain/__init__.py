"""Domain layer — node types, ids, type policy, validation, cycle rules.

This layer depends only on stdlib, pydantic, and NetworkX.
It must never import from services, infrastructure, commands, or config.
"""
